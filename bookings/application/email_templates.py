"""
Plantillas HTML de los emails de notificación.

Los emails reproducen el mensaje de la notificación dentro de un marco común
con los colores de SomPoble. El asunto depende del tipo de notificación.
"""

from html import escape

from bookings.domain.entities.notificacion import TipoNotificacion

BRAND = "SomPoble"

THEME = {
    "primary": "#1d4ed8",
    "background": "#f8fafc",
    "card_bg": "#ffffff",
    "text_primary": "#0f172a",
    "text_muted": "#64748b",
    "warning": "#f59e0b",
    "danger": "#ef4444",
}

SUBJECTS = {
    TipoNotificacion.INFORMACION: f"Información sobre su reserva - {BRAND}",
    TipoNotificacion.ADVERTENCIA: f"⚠️ Acción requerida - {BRAND}",
    TipoNotificacion.ERROR: f"Error en actualizar reserva - {BRAND}",
}

_ACCENTS = {
    TipoNotificacion.INFORMACION: THEME["primary"],
    TipoNotificacion.ADVERTENCIA: THEME["warning"],
    TipoNotificacion.ERROR: THEME["danger"],
}


def subject_for(tipo: TipoNotificacion) -> str:
    return SUBJECTS[TipoNotificacion(tipo)]


def render_notification_email(nombre: str, mensaje: str, tipo: TipoNotificacion) -> str:
    """HTML del email: saludo personalizado y el mensaje de la notificación."""
    accent = _ACCENTS[TipoNotificacion(tipo)]
    return f"""<!DOCTYPE html>
<html lang="es">
  <body style="margin:0;padding:24px;background:{THEME['background']};font-family:Arial,sans-serif;">
    <div style="max-width:560px;margin:0 auto;background:{THEME['card_bg']};border-top:4px solid {accent};border-radius:8px;padding:24px;">
      <h2 style="color:{THEME['text_primary']};margin-top:0;">{escape(BRAND)}</h2>
      <p style="color:{THEME['text_primary']};">Estimado/a {escape(nombre)},</p>
      <p style="color:{THEME['text_primary']};">{escape(mensaje)}</p>
      <p style="color:{THEME['text_muted']};font-size:12px;">Gracias por utilizar nuestro servicio.</p>
    </div>
  </body>
</html>
"""
