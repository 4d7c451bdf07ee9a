from .port import RouteCache as RouteCache
from .port import RoutingProvider as RoutingProvider
from .port import RoutingProviderException as RoutingProviderException
from .value_object import Coordinate as Coordinate
from .value_object import DistanceMatrixResult as DistanceMatrixResult
from .value_object import RouteEstimate as RouteEstimate
