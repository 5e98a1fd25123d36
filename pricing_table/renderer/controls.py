"""
Surface d'édition : projection du document en panneaux de contrôles.

Chaque contrôle porte l'opération d'édition qu'il déclenche (`op` + `params`) ;
pour les champs saisis, `value_param` nomme le paramètre qui reçoit la valeur
de l'utilisateur. L'hôte affiche les contrôles puis rappelle `apply_control`.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..core.schemas import Currency, PricingDocument, load_document
from ..edit import apply_operation
from .html import display_date

ControlKind = Literal["text", "toggle", "checkbox", "button", "label"]


class Control(BaseModel):
    kind: ControlKind
    label: str
    value: Any = None
    op: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)
    value_param: Optional[str] = None
    disabled: bool = False


class ControlGroup(BaseModel):
    key: str
    label: str
    controls: List[Control] = Field(default_factory=list)


class Panel(BaseModel):
    title: str
    groups: List[ControlGroup] = Field(default_factory=list)


class ControlSurface(BaseModel):
    panels: List[Panel] = Field(default_factory=list)

    def panel(self, title: str) -> Optional[Panel]:
        return next((p for p in self.panels if p.title == title), None)


def _move_buttons(op: str, params: dict, index: int, size: int) -> List[Control]:
    return [
        Control(kind="button", label="Move Up", op=op,
                params={**params, "direction": "up"}, disabled=index == 0),
        Control(kind="button", label="Move Down", op=op,
                params={**params, "direction": "down"}, disabled=index == size - 1),
    ]


# ── Panneaux ────────────────────────────────────────────────────────────────

def settings_panel(doc: PricingDocument) -> Panel:
    controls = [
        Control(kind="toggle", label="CAD", value=doc.currency == Currency.CAD,
                op="set_currency", value_param="currency"),
        Control(kind="toggle", label="Show starting year", value=doc.show_starting_year,
                op="set_starting_year", value_param="show"),
    ]
    if doc.show_starting_year:
        controls.append(Control(kind="text", label="Starting year", value=doc.starting_year or "",
                                op="set_starting_year", value_param="year"))
    controls.append(Control(kind="label", label="Preview", value=f"© {display_date(doc)}"))
    return Panel(title="Settings", groups=[ControlGroup(key="settings", label="Settings", controls=controls)])


def features_panel(doc: PricingDocument) -> Panel:
    groups = []
    n_cat = len(doc.feature_categories)
    for ci, category in enumerate(doc.feature_categories):
        controls = [
            Control(kind="text", label="Category Name:", value=category.name,
                    op="rename_category", params={"index": ci}, value_param="name"),
            Control(kind="button", label="Delete", op="delete_category", params={"index": ci}),
            *_move_buttons("reorder_category", {"index": ci}, ci, n_cat),
        ]
        n_feat = len(category.features)
        for fi, feature in enumerate(category.features):
            where = {"category_index": ci, "feature_index": fi}
            controls += [
                Control(kind="text", label=f"Feature {fi + 1}", value=feature.name,
                        op="rename_feature", params=where, value_param="name"),
                Control(kind="button", label="Delete", op="delete_feature", params=where),
                *_move_buttons("reorder_feature", where, fi, n_feat),
            ]
        controls.append(Control(kind="button", label="Add Feature", op="add_feature",
                                params={"category_index": ci}))
        groups.append(ControlGroup(key=f"category-{category.id}", label=category.name, controls=controls))

    groups.append(ControlGroup(key="categories", label="Categories", controls=[
        Control(kind="button", label="Add Category", op="add_category"),
    ]))
    return Panel(title="Features", groups=groups)


def tiers_panel(doc: PricingDocument) -> Panel:
    groups = []
    n_tiers = len(doc.tiers)
    for ti, tier in enumerate(doc.tiers):
        at = {"index": ti}
        controls = [
            Control(kind="text", label="Name:", value=tier.name,
                    op="rename_tier", params=at, value_param="name"),
            Control(kind="text", label="Price USD:", value=tier.price_usd,
                    op="set_tier_price", params={**at, "currency": "USD"}, value_param="value"),
            Control(kind="text", label="Price CAD:", value=tier.price_cad,
                    op="set_tier_price", params={**at, "currency": "CAD"}, value_param="value"),
            Control(kind="text", label="Button Label:", value=tier.button_text,
                    op="set_tier_button", params=at, value_param="text"),
            Control(kind="text", label="Button url:", value=tier.button_url,
                    op="set_tier_button", params=at, value_param="url"),
            Control(kind="toggle", label="Is Popular", value=tier.is_popular,
                    op="set_tier_popular", params=at, value_param="value"),
        ]
        for category in doc.feature_categories:
            controls.append(Control(kind="label", label=category.name))
            controls += [
                Control(kind="checkbox", label=feature.name, value=feature.id in tier.features,
                        op="toggle_tier_feature", params={"tier_index": ti, "feature_id": feature.id},
                        value_param="included")
                for feature in category.features
            ]
        controls += [
            *_move_buttons("reorder_tier", at, ti, n_tiers),
            Control(kind="button", label="Delete Tier", op="delete_tier", params=at),
        ]
        groups.append(ControlGroup(key=f"tier-{ti}", label=f"Tier {ti + 1}", controls=controls))

    groups.append(ControlGroup(key="tiers", label="Tiers", controls=[
        Control(kind="button", label="Add Tier", op="add_tier"),
    ]))
    return Panel(title="Tiers", groups=groups)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_controls(doc: Any) -> ControlSurface:
    doc = doc if isinstance(doc, PricingDocument) else load_document(doc)
    return ControlSurface(panels=[settings_panel(doc), features_panel(doc), tiers_panel(doc)])


def apply_control(doc: Any, control: Control, value: Any = None) -> PricingDocument:
    """Exécute l'opération d'un contrôle ; `value` est ignorée pour les boutons."""
    if control.op is None:
        return load_document(doc)
    params = dict(control.params)
    if control.value_param:
        if control.op == "set_currency" and isinstance(value, bool):
            value = "CAD" if value else "USD"
        params[control.value_param] = value
    return apply_operation(doc, control.op, params)
