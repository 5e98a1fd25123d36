"""
Schémas Pydantic du tableau de prix.
Structure : PricingDocument → Tier[] + FeatureCategory[] → Feature[]

Les noms JSON (alias) sont ceux des attributs persistés par l'hôte :
priceUSD, isPopular, featureCategories… Les attributs Python sont en snake_case.

Lecture tolérante : un champ mal formé est traité comme absent et reçoit
sa valeur par défaut, le document n'est jamais rejeté.
"""
import logging
import uuid
from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

log = logging.getLogger(__name__)

Direction = Literal["up", "down"]


def new_id() -> str:
    """Identifiant stable (uuid4, 128 bits aléatoires)."""
    return str(uuid.uuid4())


def _text(v: Any, default: Optional[str]) -> Optional[str]:
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return default


def _records(v: Any, model: type) -> list:
    """
    Garde uniquement les entrées exploitables (dict ou instance du modèle).
    Les instances sont re-sérialisées : le document construit n'en partage aucune.
    """
    if not isinstance(v, (list, tuple)):
        return []
    return [
        item.model_dump(by_alias=True) if isinstance(item, model) else item
        for item in v
        if isinstance(item, (dict, model))
    ]


def _has_id(item: Any) -> bool:
    return not isinstance(item, dict) or bool(_text(item.get("id"), None))


class Currency(str, Enum):
    USD = "USD"
    CAD = "CAD"

    @classmethod
    def parse(cls, value: Any) -> Optional["Currency"]:
        """'cad', 'CAD', Currency.CAD → Currency.CAD ; tout le reste → None."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                return None
        return None


class _Attributes(BaseModel):
    # validate_assignment : les opérations d'édition passent par les mêmes coercitions que la lecture
    model_config = ConfigDict(populate_by_name=True, extra="ignore", validate_assignment=True)


class Feature(_Attributes):
    """Ligne du comparatif (capacité incluse ou non dans un tier)."""
    id: str = Field(default_factory=new_id)
    name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return _text(v, None) or new_id()

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v):
        return _text(v, "")


class FeatureCategory(_Attributes):
    """Groupe nommé de features, rendu comme une section du comparatif."""
    id: str = Field(default_factory=new_id)
    name: str = ""
    features: List[Feature] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return _text(v, None) or new_id()

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v):
        return _text(v, "")

    @field_validator("features", mode="before")
    @classmethod
    def _coerce_features(cls, v):
        return _records(v, Feature)


class Tier(_Attributes):
    """Colonne tarifaire. Sans `id`, un tier est identifié par sa position (format historique)."""
    id: Optional[str] = None
    name: str = ""
    price_usd: str = Field(default="$0", alias="priceUSD")
    price_cad: str = Field(default="$0", alias="priceCAD")
    button_text: str = Field(default="Get Started", alias="buttonText")
    button_url: str = Field(default="#", alias="buttonUrl")
    is_popular: bool = Field(default=False, alias="isPopular")
    features: List[str] = Field(default_factory=list, description="Ids des features incluses")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return _text(v, None) or None

    @field_validator("name", "price_usd", "price_cad", "button_text", "button_url", mode="before")
    @classmethod
    def _coerce_text(cls, v, info):
        return _text(v, cls.model_fields[info.field_name].default)

    @field_validator("is_popular", mode="before")
    @classmethod
    def _coerce_popular(cls, v):
        return v if isinstance(v, bool) else False

    @field_validator("features", mode="before")
    @classmethod
    def _coerce_features(cls, v):
        # Sémantique d'ensemble : doublons retirés, ordre d'apparition conservé
        if not isinstance(v, (list, tuple)):
            return []
        return list(dict.fromkeys(f for f in v if isinstance(f, str)))

    def price_for(self, currency: Optional[Currency]) -> str:
        return self.price_cad if currency == Currency.CAD else self.price_usd


class PricingDocument(_Attributes):
    """Attributs complets d'un bloc tableau de prix."""
    tiers: List[Tier] = Field(default_factory=list)
    feature_categories: List[FeatureCategory] = Field(default_factory=list, alias="featureCategories")
    currency: Optional[Currency] = None
    starting_year: Optional[str] = Field(default=None, alias="startingYear")
    show_starting_year: bool = Field(default=False, alias="showStartingYear")
    fallback_current_year: Optional[str] = Field(default=None, alias="fallbackCurrentYear")

    @field_validator("tiers", mode="before")
    @classmethod
    def _coerce_tiers(cls, v):
        return _records(v, Tier)

    @field_validator("feature_categories", mode="before")
    @classmethod
    def _coerce_categories(cls, v):
        return _records(v, FeatureCategory)

    @field_validator("currency", mode="before")
    @classmethod
    def _coerce_currency(cls, v):
        return Currency.parse(v)

    @field_validator("starting_year", "fallback_current_year", mode="before")
    @classmethod
    def _coerce_year(cls, v):
        return _text(v, None)

    @field_validator("show_starting_year", mode="before")
    @classmethod
    def _coerce_show(cls, v):
        return v if isinstance(v, bool) else False

    @model_validator(mode="after")
    def _single_popular(self):
        # Au plus un tier populaire : le premier rencontré gagne
        seen = False
        for i, tier in enumerate(self.tiers):
            if tier.is_popular:
                if seen:
                    self.tiers[i] = tier.model_copy(update={"is_popular": False})
                seen = True
        return self

    def feature_ids(self) -> set:
        return {f.id for c in self.feature_categories for f in c.features}

    def to_attributes(self) -> dict:
        """Enregistrement JSON (clés camelCase) à rendre à l'hôte."""
        return self.model_dump(by_alias=True, mode="json")


def missing_ids(raw: Any) -> bool:
    """
    Vrai si une catégorie ou une feature de l'enregistrement brut n'a pas d'id.
    `load_document` leur en génère un nouveau à chaque lecture : l'hôte doit
    persister le document pour que ces ids restent stables.
    """
    if not isinstance(raw, dict):
        return False
    key = "featureCategories" if "featureCategories" in raw else "feature_categories"
    for category in _records(raw.get(key), FeatureCategory):
        if not _has_id(category):
            return True
        if not all(_has_id(f) for f in _records(category.get("features"), Feature)):
            return True
    return False


def load_document(raw: Any) -> PricingDocument:
    """
    Construit un PricingDocument depuis un enregistrement quelconque.

    - PricingDocument → copie profonde (jamais d'alias avec l'entrée)
    - dict → validé avec tolérance (champs invalides = absents)
    - tout le reste → document vide
    """
    if isinstance(raw, PricingDocument):
        return raw.model_copy(deep=True)
    if not isinstance(raw, dict):
        return PricingDocument()
    try:
        return PricingDocument.model_validate(raw)
    except ValidationError as e:
        log.warning("Attributs illisibles, document vide utilisé : %s", e)
        return PricingDocument()
