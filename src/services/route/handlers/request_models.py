from pydantic import BaseModel, ConfigDict, Field

from services.route.domain.value_object import Coordinate


class ResolveRouteRequest(BaseModel):
    """経路取得リクエストモデル（クエリ文字列）"""

    model_config = ConfigDict(populate_by_name=True)

    from_lat: float = Field(..., alias="fromLat", ge=-90, le=90)
    from_lng: float = Field(..., alias="fromLng", ge=-180, le=180)
    to_lat: float = Field(..., alias="toLat", ge=-90, le=90)
    to_lng: float = Field(..., alias="toLng", ge=-180, le=180)

    def origin(self) -> Coordinate:
        return Coordinate(lat=self.from_lat, lng=self.from_lng)

    def destination(self) -> Coordinate:
        return Coordinate(lat=self.to_lat, lng=self.to_lng)
