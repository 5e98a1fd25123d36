"""Helpers communs aux opérations d'édition (copie, bornes, échange adjacent)."""
import logging
from typing import Any

from ..core.schemas import PricingDocument, load_document

log = logging.getLogger(__name__)


class EditError(ValueError):
    """Opération inconnue ou paramètres invalides (couche hôte uniquement)."""


def copy_doc(doc: Any) -> PricingDocument:
    """Copy-on-write : chaque opération travaille sur une copie profonde."""
    return load_document(doc)


def in_range(items: list, index: Any) -> bool:
    # Index négatifs refusés : pas de wrap-around Python sur un état UI périmé
    ok = isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(items)
    if not ok:
        log.debug("Index hors bornes ignoré : %r (taille %d)", index, len(items))
    return ok


def swap_adjacent(items: list, index: int, direction: str) -> None:
    """Échange items[index] avec son voisin ; no-op en bordure ou direction inconnue."""
    if not in_range(items, index):
        return
    target = index - 1 if direction == "up" else index + 1 if direction == "down" else None
    if target is None or not 0 <= target < len(items):
        return
    items[index], items[target] = items[target], items[index]
