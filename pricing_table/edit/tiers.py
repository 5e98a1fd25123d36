"""
Opérations sur les tiers : (document, params) → nouveau document.
Index hors bornes = no-op (copie inchangée).
"""
from typing import Any, Optional

from ..core.schemas import Currency, Direction, PricingDocument, Tier, new_id
from .base import copy_doc, in_range, swap_adjacent


def rename_tier(doc: Any, index: int, name: str) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.tiers, index):
        new.tiers[index].name = name
    return new


def set_tier_price(doc: Any, index: int, currency: Any, value: str) -> PricingDocument:
    """Remplace le prix affiché tel quel (chaîne opaque, aucune validation numérique)."""
    new = copy_doc(doc)
    kind = Currency.parse(currency)
    if kind is None or not in_range(new.tiers, index):
        return new
    if kind == Currency.CAD:
        new.tiers[index].price_cad = value
    else:
        new.tiers[index].price_usd = value
    return new


def set_tier_button(doc: Any, index: int, text: Optional[str] = None, url: Optional[str] = None) -> PricingDocument:
    new = copy_doc(doc)
    if not in_range(new.tiers, index):
        return new
    if text is not None:
        new.tiers[index].button_text = text
    if url is not None:
        new.tiers[index].button_url = url
    return new


def set_tier_popular(doc: Any, index: int, value: bool) -> PricingDocument:
    """Marquer un tier populaire retire le badge de tous les autres."""
    new = copy_doc(doc)
    if not in_range(new.tiers, index):
        return new
    value = value is True
    for i, tier in enumerate(new.tiers):
        if i == index:
            tier.is_popular = value
        elif value:
            tier.is_popular = False
    return new


def toggle_tier_feature(doc: Any, tier_index: int, feature_id: str, included: bool) -> PricingDocument:
    """Ajoute / retire un id de feature ; sémantique d'ensemble (pas de doublon)."""
    new = copy_doc(doc)
    if not in_range(new.tiers, tier_index):
        return new
    tier = new.tiers[tier_index]
    if included is True:
        if feature_id not in tier.features:
            tier.features.append(feature_id)
    else:
        tier.features = [f for f in tier.features if f != feature_id]
    return new


def add_tier(doc: Any) -> PricingDocument:
    new = copy_doc(doc)
    new.tiers.append(Tier(id=new_id(), name=f"Tier {len(new.tiers) + 1}"))
    return new


def delete_tier(doc: Any, index: int) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.tiers, index):
        del new.tiers[index]
    return new


def reorder_tier(doc: Any, index: int, direction: Direction) -> PricingDocument:
    new = copy_doc(doc)
    swap_adjacent(new.tiers, index, direction)
    return new
