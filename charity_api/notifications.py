import smtplib
from email.message import EmailMessage

import structlog

from charity_api.errors import NotificationError

logger = structlog.get_logger()


class EmailNotifier:
    """Plain-text email over SMTP, sent from the configured account."""

    def __init__(self, host: str, port: int, user: str | None, password: str | None, use_tls: bool = True):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.use_tls = use_tls

    @classmethod
    def from_settings(cls, settings):
        return cls(
            host=settings.email_host,
            port=settings.email_port,
            user=settings.email_user,
            password=settings.email_pass,
            use_tls=settings.email_use_tls,
        )

    def send(self, to: str, subject: str, body: str):
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.user
        msg["To"] = to
        msg.set_content(body)

        try:
            with smtplib.SMTP(self.host, self.port) as server:
                if self.use_tls:
                    server.starttls()
                if self.user:
                    server.login(self.user, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("Email send failed", to=to, subject=subject, error=str(exc))
            raise NotificationError(f"could not send '{subject}' to {to}") from exc

        logger.info("Email sent", to=to, subject=subject)
