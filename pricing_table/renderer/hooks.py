"""
Classes CSS exposées par le rendu HTML : surface de compatibilité pour le style externe.

Avec le préfixe par défaut "app-pricing" :
  app-pricing-table                         conteneur
  app-pricing-table-currency-toggle         bascule USD / CAD
  app-pricing-switch / app-pricing-slider   interrupteur de la bascule
  app-pricing-table-desktop-header          ligne d'en-tête des tiers
  app-pricing-table-tier                    cellule d'en-tête d'un tier
  app-pricing-popular-background            tier populaire (en-tête + cellules)
  app-pricing-table-tier-popular-badge      badge "Most Popular"
  app-pricing-table-tier-price(-money|-suffix|-cad|-usd)
  app-pricing-table-tier-button             CTA du tier
  app-pricing-table-tabs / -tab             navigation par catégorie
  app-pricing-table-tiers-tabs / -tier-tab  navigation par tier (mobile)
  app-pricing-table-desktop-features        grille des features
  app-pricing-table-feature-category(-name)
  app-pricing-table-feature-row / -feature-name
  app-pricing-table-checkmark               cellule inclus / absent
"""
from pydantic import BaseModel, ConfigDict, Field

from ..config import CLASS_PREFIX


class ClassHooks(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefix: str = Field(default=CLASS_PREFIX)

    def table(self, suffix: str = "") -> str:
        return f"{self.prefix}-table-{suffix}" if suffix else f"{self.prefix}-table"

    @property
    def switch(self) -> str:
        return f"{self.prefix}-switch"

    @property
    def slider(self) -> str:
        return f"{self.prefix}-slider"

    @property
    def popular_background(self) -> str:
        return f"{self.prefix}-popular-background"
