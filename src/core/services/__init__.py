"""Servicios del Core (orquestación de escenarios)."""
