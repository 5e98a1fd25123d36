"""Réglages du bloc : devise sélectionnée + année de départ."""
from typing import Any, Optional

from ..core.schemas import Currency, PricingDocument
from .base import copy_doc


def set_currency(doc: Any, currency: Any) -> PricingDocument:
    """Devise inconnue → no-op."""
    new = copy_doc(doc)
    parsed = Currency.parse(currency)
    if parsed is not None:
        new.currency = parsed
    return new


def set_starting_year(doc: Any, show: Optional[bool] = None, year: Optional[str] = None) -> PricingDocument:
    new = copy_doc(doc)
    if show is not None:
        new.show_starting_year = show is True
    if year is not None:
        new.starting_year = year
    return new
