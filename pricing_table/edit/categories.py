"""
Opérations sur les catégories et leurs features.

La suppression d'une feature ne retire PAS son id des tiers : les références
orphelines sont ignorées au rendu.
"""
from typing import Any

from ..core.schemas import Direction, Feature, FeatureCategory, PricingDocument, new_id
from .base import copy_doc, in_range, swap_adjacent


# ── Catégories ──────────────────────────────────────────────────────────────

def add_category(doc: Any) -> PricingDocument:
    new = copy_doc(doc)
    n = len(new.feature_categories) + 1
    new.feature_categories.append(FeatureCategory(id=new_id(), name=f"Category {n}", features=[]))
    return new


def rename_category(doc: Any, index: int, name: str) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.feature_categories, index):
        new.feature_categories[index].name = name
    return new


def delete_category(doc: Any, index: int) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.feature_categories, index):
        del new.feature_categories[index]
    return new


def reorder_category(doc: Any, index: int, direction: Direction) -> PricingDocument:
    new = copy_doc(doc)
    swap_adjacent(new.feature_categories, index, direction)
    return new


# ── Features ────────────────────────────────────────────────────────────────

def add_feature(doc: Any, category_index: int) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.feature_categories, category_index):
        features = new.feature_categories[category_index].features
        features.append(Feature(id=new_id(), name=f"Feature {len(features) + 1}"))
    return new


def rename_feature(doc: Any, category_index: int, feature_index: int, name: str) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.feature_categories, category_index):
        features = new.feature_categories[category_index].features
        if in_range(features, feature_index):
            features[feature_index].name = name
    return new


def delete_feature(doc: Any, category_index: int, feature_index: int) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.feature_categories, category_index):
        features = new.feature_categories[category_index].features
        if in_range(features, feature_index):
            del features[feature_index]
    return new


def reorder_feature(doc: Any, category_index: int, feature_index: int, direction: Direction) -> PricingDocument:
    new = copy_doc(doc)
    if in_range(new.feature_categories, category_index):
        swap_adjacent(new.feature_categories[category_index].features, feature_index, direction)
    return new
