"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan los adaptadores concretos:
clientes de registro y ejecutor de comandos externos.
"""
