from dataclasses import dataclass, field


@dataclass(frozen=True)
class GatewayResponse:
    """ゲートウェイの同期応答

    success はゲートウェイ自身の成功フラグのみから決める（HTTP ステータスは見ない）。
    """

    success: bool
    reference: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    raw: dict = field(default_factory=dict, repr=False)
