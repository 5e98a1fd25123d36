"""
Renderer HTML : tableau comparatif statique (en-têtes, grille de features, bascule de devise).

Fonction pure : même document + même devise → même HTML. Le paramètre `currency`
ne modifie jamais le document, il choisit seulement le prix visible.
"""
from html import escape
from typing import Any, Optional

from ..core.defaults import current_year
from ..core.schemas import Currency, FeatureCategory, Feature, PricingDocument, Tier, load_document
from .hooks import ClassHooks

POPULAR_BADGE  = "Most Popular"
FEATURES_LABEL = "Features"
PRICE_PERIOD   = "month"

CHECK_ICON = (
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="none" xmlns="http://www.w3.org/2000/svg">'
    '<path d="M5 13l4 4L19 7" stroke="#36ce3d" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" fill="none"/>'
    '</svg>'
)
HYPHEN_ICON = (
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="none" xmlns="http://www.w3.org/2000/svg">'
    '<path d="M5 13h14" stroke="#aaa" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" fill="none"/>'
    '</svg>'
)


def _e(value: Any) -> str:
    return escape(str(value), quote=True)


def selected_currency(doc: PricingDocument, currency: Any = None) -> Currency:
    """Devise demandée > devise du document > USD."""
    return Currency.parse(currency) or Currency.parse(doc.currency) or Currency.USD


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_table(
    doc: Any,
    currency: Any = None,
    hooks: Optional[ClassHooks] = None,
    legacy_prices: bool = False,
    css_class: Optional[str] = None,
) -> str:
    """
    Génère le HTML complet du tableau.

    Args:
        doc: PricingDocument ou dict d'attributs
        currency: "USD" | "CAD" : remplace la devise du document pour ce rendu seulement
        hooks: préfixe des classes CSS (défaut : PRICING_TABLE_CLASS_PREFIX)
        legacy_prices: affiche les deux prix ("$10 / $8 USD") au lieu de la devise choisie
        css_class: classe additionnelle sur le conteneur
    """
    doc = doc if isinstance(doc, PricingDocument) else load_document(doc)
    hooks = hooks or ClassHooks()
    cur = selected_currency(doc, currency)

    classes = [hooks.table()]
    if css_class:
        classes.append(css_class)

    return f"""<div class="{_e(" ".join(classes))}" data-currency="{cur.value}">
{render_currency_toggle(cur, hooks)}
{render_header(doc, cur, hooks, legacy_prices)}
{render_category_tabs(doc, hooks)}
{render_tier_tabs(doc, hooks)}
{render_features(doc, hooks)}
</div>"""


# ── Bascule de devise ───────────────────────────────────────────────────────

def render_currency_toggle(currency: Currency, hooks: ClassHooks) -> str:
    checked = " checked" if currency == Currency.CAD else ""
    return f"""<div class="{hooks.table("currency-toggle")}">
  <div>USD</div>
  <label class="{hooks.switch}">
    <input type="checkbox"{checked}>
    <span class="{hooks.slider}"></span>
  </label>
  <div>CAD</div>
</div>"""


# ── En-tête des tiers ───────────────────────────────────────────────────────

def _popular(tier: Tier, hooks: ClassHooks) -> str:
    return f" {hooks.popular_background}" if tier.is_popular else ""


def render_price(tier: Tier, currency: Currency, hooks: ClassHooks, legacy: bool = False) -> str:
    if legacy:
        return (f'<span class="{hooks.table("tier-price-cad")}">{_e(tier.price_cad)}</span>'
                f'<span class="{hooks.table("tier-price-usd")}"> / {_e(tier.price_usd)} USD</span>')

    # Les deux prix en data-* : la bascule côté client échange le texte sans toucher au document
    return (f'<span class="{hooks.table("tier-price-money")}"'
            f' data-price-usd="{_e(tier.price_usd)}" data-price-cad="{_e(tier.price_cad)}">'
            f'{_e(tier.price_for(currency))} '
            f'<span class="{hooks.table("tier-price-suffix")}">{currency.value} / {PRICE_PERIOD}</span></span>')


def render_tier_header(index: int, tier: Tier, currency: Currency, hooks: ClassHooks, legacy: bool = False) -> str:
    badge = f'<div class="{hooks.table("tier-popular-badge")}">{POPULAR_BADGE}</div>\n  ' if tier.is_popular else ""
    return f"""<div id="tier-{index}" class="{hooks.table("tier")}{_popular(tier, hooks)}">
  {badge}{_e(tier.name)}
  <div class="{hooks.table("tier-price")}">{render_price(tier, currency, hooks, legacy)}</div>
  <a href="{_e(tier.button_url)}" class="{hooks.table("tier-button")}">{_e(tier.button_text)}</a>
</div>"""


def render_header(doc: PricingDocument, currency: Currency, hooks: ClassHooks, legacy: bool = False) -> str:
    cells = "\n".join(render_tier_header(i, t, currency, hooks, legacy) for i, t in enumerate(doc.tiers))
    return f"""<div class="{hooks.table("desktop-header")}">
<div>{FEATURES_LABEL}</div>
{cells}
</div>"""


# ── Navigation ──────────────────────────────────────────────────────────────

def render_category_tabs(doc: PricingDocument, hooks: ClassHooks) -> str:
    tabs = "".join(
        f'<div class="{hooks.table("tab")}"><a href="#category-{_e(c.id)}">{_e(c.name)}</a></div>'
        for c in doc.feature_categories
    )
    return f'<div class="{hooks.table("tabs")}">{tabs}</div>'


def render_tier_tabs(doc: PricingDocument, hooks: ClassHooks) -> str:
    tabs = "".join(
        f'<div class="{hooks.table("tier-tab")}"><button type="button" data-tier="{i}">{_e(t.name)}</button></div>'
        for i, t in enumerate(doc.tiers)
    )
    return f'<div class="{hooks.table("tiers-tabs")}">{tabs}</div>'


# ── Grille des features ─────────────────────────────────────────────────────

def render_feature_row(feature: Feature, doc: PricingDocument, hooks: ClassHooks) -> str:
    cells = "".join(
        f'<div class="tier-checkmark-{i} {hooks.table("checkmark")}{_popular(tier, hooks)}">'
        f'{CHECK_ICON if feature.id in tier.features else HYPHEN_ICON}</div>'
        for i, tier in enumerate(doc.tiers)
    )
    return f"""<div class="{hooks.table("feature-row")}">
  <div class="{hooks.table("feature-name")}">{_e(feature.name)}</div>
  {cells}
</div>"""


def render_category(category: FeatureCategory, doc: PricingDocument, hooks: ClassHooks) -> str:
    rows = "\n".join(render_feature_row(f, doc, hooks) for f in category.features)
    return f"""<div class="{hooks.table("feature-category")}">
<div class="{hooks.table("feature-category-name")}"><div id="category-{_e(category.id)}">{_e(category.name)}</div></div>
{rows}
</div>"""


def render_features(doc: PricingDocument, hooks: ClassHooks) -> str:
    categories = "\n".join(render_category(c, doc, hooks) for c in doc.feature_categories)
    return f"""<div class="{hooks.table("desktop-features")}">
{categories}
</div>"""


# ── Année affichée ──────────────────────────────────────────────────────────

def display_date(doc: Any, year: Optional[str] = None) -> str:
    """ "2019–2026" si l'année de départ est activée et renseignée, sinon l'année courante."""
    doc = doc if isinstance(doc, PricingDocument) else load_document(doc)
    year = year or doc.fallback_current_year or current_year()
    if doc.show_starting_year and doc.starting_year:
        return f"{doc.starting_year}–{year}"
    return year
