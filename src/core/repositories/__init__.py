"""Repositorios con cache sobre la API de Toggl.

Por qué un paquete:
- Cada tipo de entidad (workspace, cliente, proyecto) tiene su propio
  repositorio, dueño exclusivo de su cache.
- El conversor y el repositorio de time records orquestan a los anteriores.
"""

from core.repositories.clients import ClientRepository
from core.repositories.model_converter import TogglModelConverter
from core.repositories.projects import ProjectRepository
from core.repositories.time_records import TimeRecordRepository
from core.repositories.workspaces import WorkspaceRepository

__all__ = [
    "ClientRepository",
    "ProjectRepository",
    "TimeRecordRepository",
    "TogglModelConverter",
    "WorkspaceRepository",
]
