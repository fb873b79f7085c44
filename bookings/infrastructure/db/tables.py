from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    MetaData,
    Numeric,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    Time,
    func,
)

metadata = MetaData()

# Directorios (sólo lectura para el motor de reservas)

clientes = Table(
    "clientes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("dni", String(20), nullable=False, unique=True),
    Column("nombre", String(100), nullable=False),
    Column("apellidos", String(150), nullable=False, default=""),
    Column("email", String(255), nullable=False),
    Column("telefono", String(30)),
)

empresarios = Table(
    "empresarios",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("dni", String(20), nullable=False, unique=True),
    Column("nombre", String(100), nullable=False),
    Column("apellidos", String(150), nullable=False, default=""),
    Column("email", String(255), nullable=False),
)

empresas = Table(
    "empresas",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("identificador_fiscal", String(20), nullable=False, unique=True),
    Column("nombre", String(150), nullable=False),
    Column("email", String(255), nullable=False),
    Column("dni_empresario", String(20)),
)

servicios = Table(
    "servicios",
    metadata,
    Column("id_servicio", Integer, primary_key=True, autoincrement=True),
    Column("nombre", String(150), nullable=False),
    Column("descripcion", String(500), nullable=False, default=""),
    Column("duracion", Integer, nullable=False, default=0),
    Column("precio", Numeric(10, 2), nullable=False, default=0),
    Column("limite_reservas", Integer, nullable=False),
    Column("identificador_fiscal_empresa", String(20), nullable=False),
)

horarios = Table(
    "horarios",
    metadata,
    Column("id_horario", Integer, primary_key=True, autoincrement=True),
    Column("id_servicio", Integer, nullable=False, index=True),
    Column("identificador_fiscal_empresa", String(20)),
    Column("dias_laborables", String(100), nullable=False),
    Column("horario_inicio", Time, nullable=False),
    Column("horario_fin", Time, nullable=False),
)

# Libro de reservas

reservas = Table(
    "reservas",
    metadata,
    Column("id_reserva", Integer, primary_key=True, autoincrement=True),
    Column("fecha_reserva", Date, nullable=False),
    Column("hora", Time, nullable=False),
    Column("estado", String(50), nullable=False),
    Column("dni_cliente", String(20), nullable=False, index=True),
    Column("identificador_fiscal_empresa", String(20), nullable=False, index=True),
    Column("id_servicio", Integer, nullable=False),
    Column("fecha_alta", DateTime, server_default=func.now()),
    Column("fecha_modificacion", DateTime, server_default=func.now(), onupdate=func.now()),
    Index("ix_reservas_servicio_fecha", "id_servicio", "fecha_reserva"),
)

# Una fila por (servicio, fecha): se bloquea para serializar las admisiones.
reserva_capacidad = Table(
    "reserva_capacidad",
    metadata,
    Column("id_servicio", Integer, nullable=False),
    Column("fecha", Date, nullable=False),
    Column("version", Integer, nullable=False, default=0),
    PrimaryKeyConstraint("id_servicio", "fecha", name="pk_reserva_capacidad"),
)

notificaciones = Table(
    "notificaciones",
    metadata,
    Column("id_notificacion", Integer, primary_key=True, autoincrement=True),
    Column("dni_cliente", String(20), index=True),
    Column("dni_empresario", String(20), index=True),
    Column("mensaje", Text, nullable=False),
    Column("tipo", String(20), nullable=False),
    Column("fecha_alta", DateTime, nullable=False),
)
