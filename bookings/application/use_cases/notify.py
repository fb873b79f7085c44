import logging
from dataclasses import dataclass

from bookings.application.email_templates import render_notification_email, subject_for
from bookings.application.interfaces.clock import Clock
from bookings.application.interfaces.directories import ClientDirectory, CompanyDirectory
from bookings.application.interfaces.email_gateway import EmailGateway
from bookings.application.interfaces.notificacion_repo import NotificacionRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.domain.entities.notificacion import Notificacion, RecipientKind, TipoNotificacion
from bookings.domain.errors import (
    ClienteNotFoundError,
    DomainError,
    EmailDeliveryError,
    EmpresaNotFoundError,
    InvalidRecipientError,
)


@dataclass(frozen=True)
class DispatchResult:
    notificacion: Notificacion
    delivered: bool
    error: EmailDeliveryError | None = None


@dataclass(frozen=True)
class _Recipient:
    dni: str
    nombre: str
    email: str


class NotificationDispatcher:
    """
    Persiste una notificación y envía el email correspondiente.

    La notificación se guarda siempre, en su propia transacción, antes de
    intentar el envío. Un fallo del transporte no deshace ese registro: se
    refleja en ``DispatchResult.delivered``.
    """

    def __init__(
        self,
        notificacion_repo: NotificacionRepo,
        client_directory: ClientDirectory,
        company_directory: CompanyDirectory,
        email_gateway: EmailGateway,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._notificacion_repo = notificacion_repo
        self._clients = client_directory
        self._companies = company_directory
        self._email_gateway = email_gateway
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def notify(
        self,
        recipient_kind: RecipientKind,
        recipient_key: str,
        mensaje: str,
        tipo: TipoNotificacion,
    ) -> DispatchResult:
        """
        Args:
            recipient_kind: CLIENTE o EMPRESARIO.
            recipient_key: DNI del cliente, o identificador fiscal de la empresa
                cuyo empresario recibe el aviso.
        """
        async with self._transaction_manager.start():
            recipient = await self._resolve(RecipientKind(recipient_kind), recipient_key)
            is_cliente = recipient_kind == RecipientKind.CLIENTE
            notificacion = await self._notificacion_repo.save(
                Notificacion(
                    mensaje=mensaje,
                    tipo=tipo,
                    dni_cliente=recipient.dni if is_cliente else None,
                    dni_empresario=None if is_cliente else recipient.dni,
                    fecha_alta=self._clock.now(),
                )
            )

        try:
            await self._email_gateway.send(
                to=recipient.email,
                subject=subject_for(tipo),
                html_body=render_notification_email(recipient.nombre, mensaje, tipo),
            )
        except EmailDeliveryError as exc:
            self._logger.warning(
                "Notification email not delivered",
                extra={
                    "id_notificacion": notificacion.id_notificacion,
                    "recipient": recipient.email,
                    "error_code": exc.code,
                },
            )
            return DispatchResult(notificacion=notificacion, delivered=False, error=exc)

        self._logger.info(
            "Notification dispatched",
            extra={
                "id_notificacion": notificacion.id_notificacion,
                "recipient_kind": RecipientKind(recipient_kind).value,
                "tipo": TipoNotificacion(tipo).value,
            },
        )
        return DispatchResult(notificacion=notificacion, delivered=True)

    async def notify_after_commit(
        self,
        recipient_kind: RecipientKind,
        recipient_key: str,
        mensaje: str,
        tipo: TipoNotificacion,
    ) -> DispatchResult | None:
        """
        Variante usada tras confirmar un cambio en el libro de reservas.

        El cambio ya está confirmado, así que un destinatario que ha desaparecido
        entre medias se registra en el log en lugar de propagarse al llamante.
        """
        try:
            return await self.notify(recipient_kind, recipient_key, mensaje, tipo)
        except DomainError as exc:
            self._logger.error(
                "Lifecycle notification skipped",
                extra={
                    "recipient_kind": RecipientKind(recipient_kind).value,
                    "recipient_key": recipient_key,
                    "error_code": exc.code,
                },
            )
            return None

    async def _resolve(self, recipient_kind: RecipientKind, recipient_key: str) -> _Recipient:
        if recipient_kind == RecipientKind.CLIENTE:
            cliente = await self._clients.find_full(recipient_key)
            if cliente is None:
                raise ClienteNotFoundError(recipient_key)
            return _Recipient(dni=cliente.dni, nombre=cliente.nombre_completo, email=cliente.email)

        empresa = await self._companies.find_full(recipient_key)
        if empresa is None:
            raise EmpresaNotFoundError(recipient_key)
        if empresa.empresario is None:
            raise InvalidRecipientError(
                f"La empresa {recipient_key} no tiene un empresario de contacto"
            )
        empresario = empresa.empresario
        return _Recipient(
            dni=empresario.dni,
            nombre=empresario.nombre_completo,
            email=empresario.email or empresa.email,
        )
