"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (frozen): los repositorios los cachean y los
  comparten entre llamadas sin miedo a mutaciones accidentales.

Nota:
- Estos modelos están indexados por *nombre* (lo que ve el usuario). El
  espejo indexado por ID que habla la API vive en `core.domain.wire`.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Workspace(BaseModel):
    """Agrupación raíz de Toggl (p.ej. "Company XY")."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="ID asignado por Toggl.")
    name: str = Field(..., description="Nombre visible del workspace.")


class Client(BaseModel):
    """Cliente (facturación) dentro de un workspace."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="ID asignado por Toggl.")
    name: str = Field(..., description="Nombre visible del cliente.")
    workspace: Workspace = Field(..., description="Workspace al que pertenece.")


class Project(BaseModel):
    """Proyecto dentro de un workspace, opcionalmente bajo un cliente."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="ID asignado por Toggl.")
    name: str = Field(..., description="Nombre visible del proyecto.")
    workspace: Workspace = Field(..., description="Workspace al que pertenece.")
    client: Client | None = Field(
        default=None,
        description="Cliente del proyecto (None si el proyecto no tiene cliente).",
    )

    @property
    def client_name(self) -> str:
        """Nombre del cliente o "" (así se compara en las búsquedas por nombre)."""

        return self.client.name if self.client is not None else ""


class TimeRecord(BaseModel):
    """Registro de tiempo tal y como lo ve el usuario (CSV, import/export).

    Reglas:
    - Se identifica por nombres, nunca por IDs.
    - `client_name` vacío significa "proyecto sin cliente".
    - `tags` conserva el orden de entrada.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Inicio del registro.")
    stop: datetime = Field(..., description="Fin del registro.")
    workspace_name: str = Field(..., description="Nombre del workspace.")
    project_name: str = Field(..., description="Nombre del proyecto.")
    client_name: str = Field(default="", description="Nombre del cliente (opcional).")
    description: str = Field(default="", description="Descripción libre.")
    tags: tuple[str, ...] = Field(default=(), description="Tags en orden de aparición.")
