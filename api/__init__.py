# --------------------------------------------------------------
# File: __init__.py
# Description: Paquete de servicios que hablan con el backend REST de votaciones.
# --------------------------------------------------------------
"""Inicializa el paquete `api`."""

__all__ = ["services"]
