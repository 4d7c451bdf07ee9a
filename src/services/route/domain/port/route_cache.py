from abc import ABC, abstractmethod

from services.route.domain.value_object import RouteEstimate


class RouteCache(ABC):
    """経路キャッシュのインターフェース

    実装は接続エラーを内部で握りつぶし、get はミス（None）、set は何もしない扱いにする。
    呼び出し側はキャッシュ固有の例外で分岐しない。
    """

    @abstractmethod
    def get(self, key: str) -> RouteEstimate | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, estimate: RouteEstimate, ttl_seconds: int) -> None:
        raise NotImplementedError
