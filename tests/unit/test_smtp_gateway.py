import smtplib
from unittest.mock import patch

import pytest
from pybreaker import CircuitBreaker

from bookings.config import Settings
from bookings.domain.errors import EmailDeliveryError
from bookings.infrastructure.email.smtp_gateway import SMTPEmailGateway

SMTP_PATH = "bookings.infrastructure.email.smtp_gateway.smtplib.SMTP"


def _gateway(breaker=None, **overrides) -> SMTPEmailGateway:
    values = {
        "host": "smtp.example.com",
        "port": 587,
        "sender": "no-reply@sompoble.example.com",
        "username": "user",
        "password": "secret",
        "breaker": breaker or CircuitBreaker(fail_max=5, reset_timeout=60),
    }
    values.update(overrides)
    return SMTPEmailGateway(**values)


class TestSMTPEmailGateway:
    @pytest.mark.asyncio
    async def test_send_uses_starttls_and_login(self):
        with patch(SMTP_PATH) as smtp_cls:
            server = smtp_cls.return_value
            server.__enter__.return_value = server

            await _gateway().send("ana@example.com", "Asunto", "<p>Hola</p>")

        smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("user", "secret")
        sender, recipients, raw = server.sendmail.call_args.args
        assert sender == "no-reply@sompoble.example.com"
        assert recipients == ["ana@example.com"]
        assert "Subject: Asunto" in raw

    @pytest.mark.asyncio
    async def test_no_tls_no_login(self):
        with patch(SMTP_PATH) as smtp_cls:
            server = smtp_cls.return_value
            await _gateway(username=None, use_tls=False).send("ana@example.com", "s", "b")

        server.starttls.assert_not_called()
        server.login.assert_not_called()
        server.sendmail.assert_called_once()

    @pytest.mark.asyncio
    async def test_smtp_error_maps_to_delivery_error(self):
        with patch(SMTP_PATH) as smtp_cls:
            smtp_cls.return_value.sendmail.side_effect = smtplib.SMTPRecipientsRefused({})
            with pytest.raises(EmailDeliveryError) as exc_info:
                await _gateway().send("ana@example.com", "s", "b")

        assert exc_info.value.code == "EMAIL_DELIVERY_FAILED"

    @pytest.mark.asyncio
    async def test_connection_error_maps_to_delivery_error(self):
        with patch(SMTP_PATH, side_effect=ConnectionRefusedError("refused")):
            with pytest.raises(EmailDeliveryError):
                await _gateway().send("ana@example.com", "s", "b")

    @pytest.mark.asyncio
    async def test_open_circuit_skips_smtp(self):
        breaker = CircuitBreaker(fail_max=1, reset_timeout=60)
        gateway = _gateway(breaker=breaker)

        with patch(SMTP_PATH, side_effect=OSError("down")) as smtp_cls:
            with pytest.raises(EmailDeliveryError):
                await gateway.send("ana@example.com", "s", "b")
            with pytest.raises(EmailDeliveryError):
                await gateway.send("ana@example.com", "s", "b")

        assert smtp_cls.call_count == 1
        assert breaker.current_state == "open"

    def test_from_settings(self):
        settings = Settings(
            smtp_host="mail.example.com",
            smtp_port=465,
            email_from="hola@example.com",
            smtp_use_tls=False,
            _env_file=None,
        )
        gateway = SMTPEmailGateway.from_settings(settings)
        with patch("bookings.infrastructure.email.smtp_gateway.smtplib.SMTP_SSL") as ssl_cls:
            gateway._send_sync("ana@example.com", "s", "b")
        ssl_cls.assert_called_once()
