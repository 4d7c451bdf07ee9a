from abc import ABC, abstractmethod

from services.payment.domain.value_object import ChargeRequest, GatewayResponse
from services.shared.domain import ExternalServiceException


class PaymentGatewayException(ExternalServiceException):
    """ゲートウェイに到達できない・処理前に拒否された場合（タイムアウト含む）"""

    pass


class PaymentGateway(ABC):
    """外部決済ゲートウェイのインターフェース

    1 回の請求につき 1 回だけ同期的に呼び出す。リトライはしない。
    """

    @abstractmethod
    def submit(self, request: ChargeRequest) -> GatewayResponse:
        """請求を送信する（通信エラーは PaymentGatewayException）"""
        raise NotImplementedError
