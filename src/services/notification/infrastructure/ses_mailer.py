import os
from email.utils import formataddr

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from services.notification.domain.port import Mailer
from services.shared.domain import ExternalServiceException


class SesMailer(Mailer):
    """Amazon SES (sesv2) を使用した Mailer の具象実装"""

    def __init__(
        self,
        from_address: str | None = None,
        from_name: str | None = None,
        client=None,
    ) -> None:
        self.from_address = from_address or os.getenv("EMAIL_FROM_ADDRESS")
        self.from_name = from_name or os.getenv("EMAIL_FROM_NAME")
        self.client = client or boto3.client("sesv2")

    def send(self, to: str, subject: str, html_body: str) -> None:
        """HTML メールを送信する"""
        if not self.from_address:
            raise ExternalServiceException("EMAIL_FROM_ADDRESS is not configured")

        sender = (
            formataddr((self.from_name, self.from_address))
            if self.from_name
            else self.from_address
        )
        try:
            self.client.send_email(
                FromEmailAddress=sender,
                Destination={"ToAddresses": [to]},
                Content={
                    "Simple": {
                        "Subject": {"Data": subject, "Charset": "UTF-8"},
                        "Body": {"Html": {"Data": html_body, "Charset": "UTF-8"}},
                    }
                },
            )
        except (ClientError, BotoCoreError) as e:
            raise ExternalServiceException(f"Failed to send email to {to}: {e}") from e
