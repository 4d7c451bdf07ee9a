from .route_cache import RouteCache as RouteCache
from .routing_provider import RoutingProvider as RoutingProvider
from .routing_provider import RoutingProviderException as RoutingProviderException
