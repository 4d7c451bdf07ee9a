from .coordinate import Coordinate as Coordinate
from .distance_matrix_result import DistanceMatrixResult as DistanceMatrixResult
from .route_estimate import RouteEstimate as RouteEstimate
