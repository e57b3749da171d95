"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y los errores.
El dominio no conoce HTTP, CLI ni `dotnet`: solo conceptos del problema.
"""
