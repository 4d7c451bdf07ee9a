import math

from services.route.domain.value_object import Coordinate, RouteEstimate

EARTH_RADIUS_KM = 6371.0
AVERAGE_SPEED_KMH = 60.0


def haversine_km(origin: Coordinate, destination: Coordinate) -> float:
    """大圏距離（km, 小数第1位に丸め）"""
    lat1, lat2 = math.radians(origin.lat), math.radians(destination.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(destination.lng - origin.lng)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_KM * c, 1)


def estimate_route(origin: Coordinate, destination: Coordinate) -> RouteEstimate:
    """経路検索が使えない場合の推定値（平均時速 60km で所要時間を計算）"""
    distance_km = haversine_km(origin, destination)
    duration_min = round(distance_km / AVERAGE_SPEED_KMH * 60)
    return RouteEstimate(
        distance_km=distance_km,
        duration_min=duration_min,
        duration_in_traffic_min=duration_min,
        is_fallback=True,
    )
