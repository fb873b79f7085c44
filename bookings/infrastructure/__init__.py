"""
Capa de Infraestructura - Motor de Reservas.

Implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, repositorios SQL, bloqueo de capacidad y reintentos
- in_memory/: Implementaciones in-memory para desarrollo y testing
- email/: Gateway SMTP
- scheduling/: Planificador diario de recordatorios
- circuit_breaker.py: Circuit breaker del envío de emails
"""
