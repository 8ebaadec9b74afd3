"""
Constantes globales del sistema.

Este módulo centraliza los valores mágicos y thresholds usados
en la clasificación para facilitar ajustes y mantenimiento.
"""

# ============================================================================
# SCORING DE KEYWORDS
# ============================================================================

# Puntaje por tipo de coincidencia entre una palabra y una parte de keyword
SCORE_EXACT = 10
SCORE_SUBSTRING = 6
SCORE_FUZZY = 4

# Puntaje mínimo para considerar válida una clasificación
# Un solo match fuzzy alcanza si es la mejor señal
MIN_SCORE = 4

# Similitud Jaro-Winkler mínima (0.0 a 1.0) para un match fuzzy
FUZZY_SIMILARITY_THRESHOLD = 0.85

# Longitud mínima de una parte de keyword para ser comparada
MIN_KEYWORD_PART_LENGTH = 3

# Longitud mínima de ambos términos para substring y fuzzy
MIN_PARTIAL_MATCH_LENGTH = 4

# Las palabras de largo <= a este valor se descartan al tokenizar
MAX_DISCARDED_WORD_LENGTH = 2

# ============================================================================
# TAXONOMÍA
# ============================================================================

# Subcategorías genéricas excluidas del scoring principal
CATCH_ALL_SUBCATEGORIES = frozenset({"Otros no clasificados", "Gastos imprevistos"})

# ============================================================================
# PARSING DE MENSAJES
# ============================================================================

# Separador entre el gasto y la pista de medio de pago
PAYMENT_SEPARATOR = "."

# Descripción usada cuando el mensaje no trae texto después del monto
DEFAULT_DESCRIPTION = "Expense without description"

# ============================================================================
# FORMATO
# ============================================================================

CURRENCY_SYMBOL = "$"
