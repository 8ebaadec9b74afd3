"""Parsers de mensajes de gastos."""

from gastos_tracker.parsers.expense_message_parser import ExpenseMessageParser


__all__ = ["ExpenseMessageParser"]
