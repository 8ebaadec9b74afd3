"""Gastos Tracker - registro de gastos en lenguaje natural."""

__version__ = "0.1.0"
