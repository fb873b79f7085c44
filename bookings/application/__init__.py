"""
Capa de Aplicación - Motor de Reservas.

Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso (admisión, ciclo de vida de reservas, notificaciones, recordatorios)
- interfaces/: Puertos (contratos para adaptadores)
- email_templates.py: Asuntos y cuerpo HTML de los emails
"""
