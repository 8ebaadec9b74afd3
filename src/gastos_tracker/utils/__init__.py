"""Utilidades de texto, parsing, formato y datos iniciales."""
