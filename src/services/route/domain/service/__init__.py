from .great_circle import estimate_route as estimate_route
from .great_circle import haversine_km as haversine_km
