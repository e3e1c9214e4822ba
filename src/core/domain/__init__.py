"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni CSV: solo workspaces, clientes,
  proyectos y registros de tiempo.
"""
