"""
Pricing Table v0.1 : tableau de prix comparatif (tiers × features, bascule USD/CAD).

Usage :
    >>> from pricing_table import apply_defaults, set_tier_popular, render_table
    >>> doc = apply_defaults({})
    >>> doc = set_tier_popular(doc, 1, True)
    >>> html = render_table(doc, currency="CAD")

Usage hôte (attributs JSON) :
    >>> doc = apply_operation(attributes, "rename_tier", {"index": 0, "name": "Starter"})
    >>> attributes = doc.to_attributes()
"""
__version__ = "0.1.0"

# ── Schéma + defaulter ──────────────────────────────────────────────────────
from .core import (
    Currency, Direction, Feature, FeatureCategory, Tier, PricingDocument,
    load_document, new_id, apply_defaults,
)

# ── Édition ─────────────────────────────────────────────────────────────────
from .edit import (
    EditError, OPERATIONS, apply_operation,
    rename_tier, set_tier_price, set_tier_button, set_tier_popular,
    toggle_tier_feature, add_tier, delete_tier, reorder_tier,
    add_category, rename_category, delete_category, reorder_category,
    add_feature, rename_feature, delete_feature, reorder_feature,
    set_currency, set_starting_year,
)

# ── Rendu ───────────────────────────────────────────────────────────────────
from .renderer import (
    ClassHooks, render_table, display_date,
    Control, ControlGroup, Panel, ControlSurface, render_controls, apply_control,
)

__all__ = [
    # schéma
    "Currency", "Direction", "Feature", "FeatureCategory", "Tier", "PricingDocument",
    "load_document", "new_id", "apply_defaults",
    # édition
    "EditError", "OPERATIONS", "apply_operation",
    "rename_tier", "set_tier_price", "set_tier_button", "set_tier_popular",
    "toggle_tier_feature", "add_tier", "delete_tier", "reorder_tier",
    "add_category", "rename_category", "delete_category", "reorder_category",
    "add_feature", "rename_feature", "delete_feature", "reorder_feature",
    "set_currency", "set_starting_year",
    # rendu
    "ClassHooks", "render_table", "display_date",
    "Control", "ControlGroup", "Panel", "ControlSurface", "render_controls", "apply_control",
]
