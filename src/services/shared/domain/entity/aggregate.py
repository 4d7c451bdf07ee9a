from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティ（同乗者・追加サービス）へのアクセスは必ず集約ルートを経由
    - 状態遷移で発生したドメインイベントを保持し、アプリケーション層が取り出す
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[object] = []

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """ドメインイベントを取り出してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
