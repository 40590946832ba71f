import logging
import smtplib
from email.message import EmailMessage
from app.core.config import Settings
from app.core.errors import DeliveryError

logger = logging.getLogger(__name__)


class EmailNotifier:
    def __init__(self, settings: Settings):
        self._settings = settings

    def send(self, to_email: str, subject: str, html_body: str):
        settings = self._settings
        if not settings.smtp_host:
            raise DeliveryError()

        msg = EmailMessage()
        msg["From"] = settings.smtp_from
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.set_content("This email requires an HTML-capable client.")
        msg.add_alternative(html_body, subtype="html")

        try:
            with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout) as server:
                if settings.smtp_starttls:
                    server.starttls()
                if settings.smtp_user and settings.smtp_pass:
                    server.login(settings.smtp_user, settings.smtp_pass)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery to %s via %s:%s failed: %s", to_email, settings.smtp_host, settings.smtp_port, exc)
            raise DeliveryError() from exc
