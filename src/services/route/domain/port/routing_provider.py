from abc import ABC, abstractmethod

from services.route.domain.value_object import Coordinate, DistanceMatrixResult
from services.shared.domain import ExternalServiceException


class RoutingProviderException(ExternalServiceException):
    """経路検索プロバイダの呼び出しに失敗した場合（タイムアウト・通信エラー・不正な応答）"""

    pass


class RoutingProvider(ABC):
    """経路検索プロバイダのインターフェース"""

    @abstractmethod
    def distance_matrix(
        self, origin: Coordinate, destination: Coordinate
    ) -> DistanceMatrixResult:
        """2地点間の距離・所要時間を取得する

        Raises:
            RoutingProviderException: 通信エラー・タイムアウト時
        """
        raise NotImplementedError
