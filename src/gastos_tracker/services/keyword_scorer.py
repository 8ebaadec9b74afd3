"""
Scoring de palabras de una descripción contra una lista de keywords.

Cada palabra aporta solo su mejor coincidencia:
- exacta: SCORE_EXACT
- una contiene a la otra: SCORE_SUBSTRING
- similitud Jaro-Winkler >= FUZZY_SIMILARITY_THRESHOLD: SCORE_FUZZY

El puntaje total es la suma por palabra, así una descripción que repite
palabras fuertes suma más, y los typos menores igual puntúan.
"""

from collections.abc import Iterable, Sequence

from rapidfuzz.distance import JaroWinkler

from gastos_tracker.core.constants import (
    FUZZY_SIMILARITY_THRESHOLD,
    MIN_KEYWORD_PART_LENGTH,
    MIN_PARTIAL_MATCH_LENGTH,
    SCORE_EXACT,
    SCORE_FUZZY,
    SCORE_SUBSTRING,
)
from gastos_tracker.utils.text import normalize_text


def keyword_parts(keywords: Iterable[str]) -> list[str]:
    """Partes comparables de las keywords normalizadas (3+ caracteres)."""
    return [
        part
        for keyword in keywords
        for part in normalize_text(keyword).split()
        if len(part) >= MIN_KEYWORD_PART_LENGTH
    ]


def match_score(word: str, part: str) -> int:
    """Puntaje de una palabra contra una parte de keyword."""
    if word == part:
        return SCORE_EXACT

    # Substring y fuzzy solo aplican si ambos tienen 4+ caracteres
    if len(word) < MIN_PARTIAL_MATCH_LENGTH or len(part) < MIN_PARTIAL_MATCH_LENGTH:
        return 0

    if part in word or word in part:
        return SCORE_SUBSTRING

    if JaroWinkler.normalized_similarity(word, part) >= FUZZY_SIMILARITY_THRESHOLD:
        return SCORE_FUZZY

    return 0


def score_keywords(words: Sequence[str], keywords: Iterable[str]) -> int:
    """
    Calcula el puntaje de las palabras de una descripción contra keywords.

    Args:
        words: Palabras ya tokenizadas (ver `extract_words`)
        keywords: Frases clave de una subcategoría o medio de pago

    Returns:
        Suma del mejor puntaje de cada palabra (0 si nada coincide)

    Examples:
        >>> score_keywords(["almuerzo", "restaurante"], ["restaurante", "parrilla"])
        10
        >>> score_keywords(["restaurant"], ["restaurante"])
        6
    """
    parts = keyword_parts(keywords)
    if not parts:
        return 0

    total = 0
    for word in words:
        total += max((match_score(word, part) for part in parts), default=0)
    return total


def best_match(
    words: Sequence[str],
    entries: Iterable[tuple[str, Iterable[str]]],
    excluded: Iterable[str] = (),
) -> tuple[str | None, int]:
    """
    Busca la entrada con mayor puntaje.

    Solo una mejora estricta reemplaza al candidato: ante empate gana
    la primera entrada en el orden recibido.

    Args:
        words: Palabras tokenizadas
        entries: Pares (nombre, keywords) en orden de prioridad
        excluded: Nombres que no participan del scoring

    Returns:
        (nombre, puntaje) del ganador, o (None, 0) si nadie puntúa
    """
    skip = set(excluded)
    best_name: str | None = None
    best_score = 0

    for name, keywords in entries:
        if name in skip:
            continue
        score = score_keywords(words, keywords)
        if score > best_score:
            best_name, best_score = name, score

    return best_name, best_score
