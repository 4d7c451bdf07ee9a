from abc import ABC, abstractmethod

from services.catalog.domain.value_object import AddOnPrice, TourRate, VehicleRate


class CatalogRepository(ABC):
    """カタログ（車両・ツアー・追加サービス）の読み取り専用インターフェース

    料金は必ずここから取得する。呼び出し元から渡された単価は信用しない。
    """

    @abstractmethod
    def get_vehicle_rate(self, vehicle_id: str) -> VehicleRate | None:
        """車両の料金表を取得する"""
        raise NotImplementedError

    @abstractmethod
    def get_tour_rate(self, tour_id: str) -> TourRate | None:
        """ツアーの料金を取得する"""
        raise NotImplementedError

    @abstractmethod
    def get_add_on(self, add_on_id: str) -> AddOnPrice | None:
        """追加サービスの単価を取得する"""
        raise NotImplementedError
