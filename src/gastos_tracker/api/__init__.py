"""API REST de Gastos Tracker."""
