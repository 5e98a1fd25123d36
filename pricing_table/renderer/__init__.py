"""Projection du document : HTML d'affichage + surface d'édition."""
from .hooks import ClassHooks
from .html import render_table, display_date, selected_currency, CHECK_ICON, HYPHEN_ICON
from .controls import Control, ControlGroup, Panel, ControlSurface, render_controls, apply_control

__all__ = [
    "ClassHooks",
    "render_table", "display_date", "selected_currency", "CHECK_ICON", "HYPHEN_ICON",
    "Control", "ControlGroup", "Panel", "ControlSurface", "render_controls", "apply_control",
]
