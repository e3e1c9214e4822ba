"""Cliente de la API REST de Toggl.

Por qué un paquete:
- Agrupa un módulo por endpoint (workspaces, clients, projects, time entries).
- Todos comparten el `PacedRESTClient`, único punto de salida a la red.
"""

from adapters.toggl_api.api import TogglAPI, build_toggl_api
from adapters.toggl_api.rest_client import PacedRESTClient

__all__ = [
    "PacedRESTClient",
    "TogglAPI",
    "build_toggl_api",
]
