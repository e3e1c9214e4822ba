"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan repositorios y adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones, y los tests
  sustituyen la API de Toggl por fakes en memoria.
"""
