"""
controller - Comandos y despacho

Este paquete contiene:
- Dispatcher: Traduce verbos a comandos y códigos de salida
- Comandos por función (power, fan, perf, record, kbd, ...)
"""

from .dispatcher import Dispatcher

__all__ = ['Dispatcher']
