import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from pybreaker import CircuitBreaker, CircuitBreakerError

from bookings.application.interfaces.email_gateway import EmailGateway
from bookings.config import Settings
from bookings.domain.errors import EmailDeliveryError
from bookings.infrastructure.circuit_breaker import email_breaker

logger = logging.getLogger(__name__)


class SMTPEmailGateway(EmailGateway):
    """
    Envío de emails por SMTP.

    ``smtplib`` es bloqueante, así que cada envío se ejecuta en un hilo y pasa
    por el circuit breaker. Puerto 465 usa SSL implícito; cualquier otro
    puerto usa STARTTLS si ``use_tls`` está activo.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout_seconds: float = 10.0,
        breaker: CircuitBreaker = email_breaker,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout_seconds
        self._breaker = breaker

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPEmailGateway":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.email_from,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout_seconds=settings.smtp_timeout_seconds,
        )

    async def send(self, to: str, subject: str, html_body: str) -> None:
        try:
            await asyncio.to_thread(self._breaker.call, self._send_sync, to, subject, html_body)
        except CircuitBreakerError as exc:
            logger.error("Email circuit open", extra={"to": to, "host": self._host})
            raise EmailDeliveryError(to, "servicio de email no disponible") from exc
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP send failed", extra={"to": to, "host": self._host, "error": str(exc)})
            raise EmailDeliveryError(to, str(exc)) from exc
        logger.info("Email sent", extra={"to": to, "host": self._host})

    def _build_message(self, to: str, subject: str, html_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._sender
        msg["To"] = to
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        return msg

    def _send_sync(self, to: str, subject: str, html_body: str) -> None:
        msg = self._build_message(to, subject, html_body)
        if self._port == 465:
            server = smtplib.SMTP_SSL(
                self._host, self._port, context=ssl.create_default_context(), timeout=self._timeout
            )
        else:
            server = smtplib.SMTP(self._host, self._port, timeout=self._timeout)
        with server:
            if self._port != 465 and self._use_tls:
                server.starttls(context=ssl.create_default_context())
            if self._username:
                server.login(self._username, self._password or "")
            server.sendmail(self._sender, [to], msg.as_string())
