"""
Édition : opérations pures + registry par nom.

Usage direct :
    >>> from pricing_table.edit import set_tier_popular
    >>> doc = set_tier_popular(doc, 1, True)

Usage hôte (JSON) :
    >>> doc = apply_operation(doc, "rename_tier", {"index": 0, "name": "Starter"})
"""
import inspect
import logging
from typing import Any, Callable, Dict, Optional

from ..core.schemas import PricingDocument
from .base import EditError
from .tiers import (
    rename_tier, set_tier_price, set_tier_button, set_tier_popular,
    toggle_tier_feature, add_tier, delete_tier, reorder_tier,
)
from .categories import (
    add_category, rename_category, delete_category, reorder_category,
    add_feature, rename_feature, delete_feature, reorder_feature,
)
from .settings import set_currency, set_starting_year

log = logging.getLogger(__name__)

OPERATIONS: Dict[str, Callable[..., PricingDocument]] = {
    "rename_tier":         rename_tier,
    "set_tier_price":      set_tier_price,
    "set_tier_button":     set_tier_button,
    "set_tier_popular":    set_tier_popular,
    "toggle_tier_feature": toggle_tier_feature,
    "add_tier":            add_tier,
    "delete_tier":         delete_tier,
    "reorder_tier":        reorder_tier,
    "add_category":        add_category,
    "rename_category":     rename_category,
    "delete_category":     delete_category,
    "reorder_category":    reorder_category,
    "add_feature":         add_feature,
    "rename_feature":      rename_feature,
    "delete_feature":      delete_feature,
    "reorder_feature":     reorder_feature,
    "set_currency":        set_currency,
    "set_starting_year":   set_starting_year,
}


def apply_operation(doc: Any, op: str, params: Optional[Dict[str, Any]] = None) -> PricingDocument:
    """Applique une opération nommée. Lève EditError si le nom ou les paramètres sont invalides."""
    fn = OPERATIONS.get(op)
    if fn is None:
        log.warning("Opération inconnue : %r", op)
        raise EditError(f"Opération inconnue : {op!r}. Registry : {list(OPERATIONS)}")

    params = params or {}
    try:
        inspect.signature(fn).bind(doc, **params)
    except TypeError as e:
        raise EditError(f"Paramètres invalides pour {op!r} : {e}") from e
    return fn(doc, **params)


__all__ = [
    "EditError", "OPERATIONS", "apply_operation",
    "rename_tier", "set_tier_price", "set_tier_button", "set_tier_popular",
    "toggle_tier_feature", "add_tier", "delete_tier", "reorder_tier",
    "add_category", "rename_category", "delete_category", "reorder_category",
    "add_feature", "rename_feature", "delete_feature", "reorder_feature",
    "set_currency", "set_starting_year",
]
