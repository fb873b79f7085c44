import logging
from dataclasses import dataclass

from bookings.application.interfaces.email_gateway import EmailGateway
from bookings.domain.errors import EmailDeliveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentEmail:
    to: str
    subject: str
    html_body: str


class RecordingEmailGateway(EmailGateway):
    """
    Gateway sin transporte: guarda los emails en memoria.

    Con ``fail_with`` se simula un fallo de transporte en cada envío.
    """

    def __init__(self, fail_with: str | None = None) -> None:
        self.sent: list[SentEmail] = []
        self.attempts = 0
        self.fail_with = fail_with

    async def send(self, to: str, subject: str, html_body: str) -> None:
        self.attempts += 1
        if self.fail_with is not None:
            raise EmailDeliveryError(to, self.fail_with)
        self.sent.append(SentEmail(to=to, subject=subject, html_body=html_body))
        logger.info("Email recorded", extra={"to": to, "subject": subject})
