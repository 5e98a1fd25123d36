"""Core : schéma des attributs + defaulter."""
from .schemas import (
    Currency,
    Direction,
    Feature,
    FeatureCategory,
    Tier,
    PricingDocument,
    load_document,
    missing_ids,
    new_id,
)
from .defaults import apply_defaults, starter_tiers, starter_categories, current_year

__all__ = [
    "Currency",
    "Direction",
    "Feature",
    "FeatureCategory",
    "Tier",
    "PricingDocument",
    "load_document",
    "missing_ids",
    "new_id",
    "apply_defaults",
    "starter_tiers",
    "starter_categories",
    "current_year",
]
