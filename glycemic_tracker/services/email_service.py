"""
Email Service

Sends notification mail through the SMTP server configured on the app.
"""

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)


@dataclass
class SmtpSettings:
    server: str
    port: int
    title: str
    username: str
    password: str
    timeout: int = 10

    @classmethod
    def from_config(cls, config) -> "SmtpSettings":
        return cls(
            server=config.get("SMTP_SERVER", "localhost"),
            port=int(config.get("SMTP_PORT", 587)),
            title=config.get("SMTP_TITLE", ""),
            username=config.get("SMTP_USERNAME", ""),
            password=config.get("SMTP_PASSWORD", ""),
            timeout=int(config.get("SMTP_TIMEOUT", 10)),
        )


class EmailService:
    def __init__(self, settings: SmtpSettings):
        self.settings = settings

    def build_message(self, recipients: List[str], subject: str, body: str, is_html: bool = True) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.settings.title, self.settings.username))
        message["To"] = ", ".join(recipients)
        message["Subject"] = subject
        if is_html:
            message.set_content(body, subtype="html")
        else:
            message.set_content(body)
        return message

    def send(self, to: Union[str, Iterable[str]], subject: str, body: str, is_html: bool = True) -> bool:
        """
        Send a message to one or more recipients.

        Returns:
            True when the SMTP server accepted the message, False otherwise
        """
        recipients = [to] if isinstance(to, str) else list(to)
        message = self.build_message(recipients, subject, body, is_html)

        try:
            with smtplib.SMTP(self.settings.server, self.settings.port, timeout=self.settings.timeout) as client:
                client.starttls()
                if self.settings.username:
                    client.login(self.settings.username, self.settings.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email to {', '.join(recipients)}: {e}")
            return False

        logger.info(f"Email sent to {', '.join(recipients)}")
        return True
