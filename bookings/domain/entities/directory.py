"""Registros de sólo lectura servidos por los directorios externos."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClienteRecord:
    dni: str
    nombre: str
    email: str
    apellidos: str = ""
    telefono: str | None = None

    @property
    def nombre_completo(self) -> str:
        return f"{self.nombre} {self.apellidos}".strip()


@dataclass(frozen=True)
class EmpresarioRecord:
    dni: str
    nombre: str
    email: str
    apellidos: str = ""

    @property
    def nombre_completo(self) -> str:
        return f"{self.nombre} {self.apellidos}".strip()


@dataclass(frozen=True)
class EmpresaRecord:
    identificador_fiscal: str
    nombre: str
    email: str
    empresario: EmpresarioRecord | None = None
