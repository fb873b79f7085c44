from bookings.infrastructure.email.smtp_gateway import SMTPEmailGateway

__all__ = ["SMTPEmailGateway"]
