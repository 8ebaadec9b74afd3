"""Catálogo de sinónimos: subcategoría → keywords, de solo lectura."""

from collections.abc import Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from gastos_tracker.core.logging import get_logger
from gastos_tracker.utils.spanish_synonyms import SPANISH_SYNONYMS


logger = get_logger(__name__)


def _clean_keywords(name: str, raw: Any) -> tuple[str, ...]:
    """Convierte la lista cruda en tupla de strings; datos inválidos → vacío."""
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            logger.warning(f"Keywords inválidas para '{name}' ({type(raw).__name__}), se ignoran")
        return ()
    return tuple(k for k in raw if isinstance(k, str) and k.strip())


class SynonymCatalog(Mapping[str, tuple[str, ...]]):
    """
    Mapping inmutable de subcategoría a keywords.

    Conserva el orden de inserción, que define el desempate del clasificador.
    Las entradas con keywords ausentes o que no son lista quedan vacías.
    """

    def __init__(self, entries: Mapping[str, Any]) -> None:
        self._entries = MappingProxyType(
            {name: _clean_keywords(name, raw) for name, raw in entries.items()}
        )

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<SynonymCatalog(subcategorias={len(self)})>"


@lru_cache
def get_synonym_catalog() -> SynonymCatalog:
    """Catálogo incluido con la aplicación, cargado una sola vez por proceso."""
    catalog = SynonymCatalog(SPANISH_SYNONYMS)
    logger.info(f"Catálogo de sinónimos cargado: {len(catalog)} subcategorías")
    return catalog
