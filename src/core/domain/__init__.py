"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce la CLI ni la consola: solo principios, variantes y
  los reportes de lo que cada escenario imprimió.
"""
