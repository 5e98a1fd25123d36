"""
Defaulter : remplit un document vide avec le contenu de démarrage.

Idempotent : la présence / non-vacuité des champs est vérifiée,
pas l'égalité profonde. Seule opération à effet de bord du cœur :
le document complété est transmis au callback `persist` de l'hôte.
"""
import logging
from datetime import date
from typing import Any, Callable, List, Optional

from .schemas import Feature, FeatureCategory, PricingDocument, Tier, load_document, missing_ids, new_id

log = logging.getLogger(__name__)

_STARTER_TIERS = [
    {"name": "Free",     "priceCAD": "$0",  "priceUSD": "$0",  "buttonText": "Get Started", "buttonUrl": "#", "isPopular": False},
    {"name": "Basic",    "priceCAD": "$10", "priceUSD": "$8",  "buttonText": "Get Started", "buttonUrl": "#", "isPopular": False},
    {"name": "Standard", "priceCAD": "$20", "priceUSD": "$16", "buttonText": "Get Started", "buttonUrl": "#", "isPopular": True},
    {"name": "Premium",  "priceCAD": "$30", "priceUSD": "$24", "buttonText": "Contact Us",  "buttonUrl": "#", "isPopular": False},
]

_STARTER_CATEGORIES = [
    ("Category 1", ["Feature 1", "Feature 2", "Feature 3", "Feature 4"]),
    ("Category 2", ["Feature 5"]),
]


def starter_tiers() -> List[Tier]:
    return [Tier(id=new_id(), features=[], **t) for t in _STARTER_TIERS]


def starter_categories() -> List[FeatureCategory]:
    return [
        FeatureCategory(
            id=new_id(),
            name=name,
            features=[Feature(id=new_id(), name=f) for f in features],
        )
        for name, features in _STARTER_CATEGORIES
    ]


def current_year() -> str:
    return str(date.today().year)


def apply_defaults(
    doc: Any,
    year: Optional[str] = None,
    persist: Optional[Callable[[PricingDocument], None]] = None,
) -> PricingDocument:
    """
    Retourne un document complet (nouvelle instance).

    Args:
        doc: PricingDocument ou dict d'attributs (éventuellement partiel / mal formé)
        year: année courante (défaut : date du jour), stockée dans fallbackCurrentYear
        persist: écriture vers le store de l'hôte, appelée seulement si quelque chose a changé
    """
    new = load_document(doc)
    changed = []

    if missing_ids(doc):
        changed.append("ids")
    if not new.tiers:
        new.tiers = starter_tiers()
        changed.append("tiers")
    if not new.feature_categories:
        new.feature_categories = starter_categories()
        changed.append("featureCategories")

    year = year or current_year()
    if new.fallback_current_year != year:
        new.fallback_current_year = year
        changed.append("fallbackCurrentYear")

    if changed:
        log.info("Valeurs par défaut appliquées : %s", ", ".join(changed))
        if persist is not None:
            persist(new)
    return new
