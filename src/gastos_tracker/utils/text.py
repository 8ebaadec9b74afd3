"""Normalización y tokenización de texto libre en español."""

import re
import unicodedata

from gastos_tracker.core.constants import MAX_DISCARDED_WORD_LENGTH


STOPWORDS_ES = frozenset(
    {
        "el", "la", "de", "del", "en", "y", "a", "para", "con", "por", "un", "una",
        "los", "las", "que", "es", "se", "lo", "al", "le", "su", "me", "mi",
    }
)

# Todo lo que no sea letra, dígito o espacio (el guion bajo cuenta como símbolo)
_NON_WORD_RE = re.compile(r"[^\w\s]|_")


def normalize_text(text: str | None) -> str:
    """
    Normaliza texto para comparación.

    - Lowercase
    - Quita acentos (á→a, ñ→n)
    - Reemplaza símbolos y puntuación por espacios
    - Colapsa espacios múltiples

    Examples:
        >>> normalize_text("Café  S.A.")
        'cafe s a'
        >>> normalize_text("")
        ''
    """
    if not text:
        return ""

    t = text.lower()

    # NFD decompose + strip combining marks
    t = unicodedata.normalize("NFD", t)
    t = "".join(c for c in t if unicodedata.category(c) != "Mn")

    t = _NON_WORD_RE.sub(" ", t)

    return " ".join(t.split())


def extract_words(text: str | None) -> list[str]:
    """
    Extrae las palabras significativas de un texto.

    Descarta stopwords y palabras de 2 letras o menos. Conserva el orden
    y los duplicados (la frecuencia cuenta para el scoring).

    Examples:
        >>> extract_words("Almuerzo en el restaurante de la esquina")
        ['almuerzo', 'restaurante', 'esquina']
    """
    return [
        word
        for word in normalize_text(text).split()
        if len(word) > MAX_DISCARDED_WORD_LENGTH and word not in STOPWORDS_ES
    ]
