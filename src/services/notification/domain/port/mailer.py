from abc import ABC, abstractmethod


class Mailer(ABC):
    """メール送信のインターフェース（送信失敗は例外）"""

    @abstractmethod
    def send(self, to: str, subject: str, html_body: str) -> None:
        raise NotImplementedError
