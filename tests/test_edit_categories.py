"""
Tests opérations catégories / features + registry apply_operation
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from pricing_table.core import Currency, apply_defaults
from pricing_table.edit import (
    EditError, OPERATIONS, apply_operation,
    add_category, add_feature, delete_category, delete_feature,
    rename_category, rename_feature, reorder_category, reorder_feature,
    set_currency, set_starting_year, toggle_tier_feature,
)


@pytest.fixture
def doc():
    return apply_defaults({}, year="2026")


def _names(d):
    return [c.name for c in d.feature_categories]


def _feature_names(d, ci=0):
    return [f.name for f in d.feature_categories[ci].features]


# ── Catégories ────────────────────────────────────────────────────────────

class TestCategories:
    def test_add_category(self, doc):
        new = add_category(doc)
        cat = new.feature_categories[-1]
        assert cat.name == "Category 3"
        assert cat.features == []
        assert cat.id not in {c.id for c in doc.feature_categories}

    def test_rename_category(self, doc):
        assert _names(rename_category(doc, 1, "Support")) == ["Category 1", "Support"]

    def test_delete_category(self, doc):
        assert _names(delete_category(doc, 0)) == ["Category 2"]
        assert delete_category(doc, 5) == doc

    def test_reorder_category(self, doc):
        assert _names(reorder_category(doc, 0, "down")) == ["Category 2", "Category 1"]
        assert _names(reorder_category(doc, 1, "up")) == ["Category 2", "Category 1"]

    def test_reorder_bordure_noop(self, doc):
        assert reorder_category(doc, 0, "up") == doc
        assert reorder_category(doc, 1, "down") == doc

    def test_reorder_direction_inconnue_noop(self, doc):
        assert reorder_category(doc, 0, "sideways") == doc

    def test_ids_stables_apres_reorder(self, doc):
        ids = [c.id for c in doc.feature_categories]
        assert [c.id for c in reorder_category(doc, 0, "down").feature_categories] == ids[::-1]


# ── Features ──────────────────────────────────────────────────────────────

class TestFeatures:
    def test_add_feature(self, doc):
        new = add_feature(doc, 1)
        assert _feature_names(new, 1) == ["Feature 5", "Feature 2"]
        assert new.feature_categories[1].features[-1].id

    def test_add_feature_categorie_absente_noop(self, doc):
        assert add_feature(doc, 7) == doc

    def test_rename_feature(self, doc):
        assert _feature_names(rename_feature(doc, 0, 2, "SSO"))[2] == "SSO"
        assert rename_feature(doc, 0, 10, "x") == doc

    def test_reorder_feature(self, doc):
        new = reorder_feature(doc, 0, 3, "up")
        assert _feature_names(new) == ["Feature 1", "Feature 2", "Feature 4", "Feature 3"]

    def test_reorder_feature_bordures(self, doc):
        assert reorder_feature(doc, 0, 0, "up") == doc
        assert reorder_feature(doc, 0, 3, "down") == doc
        assert reorder_feature(doc, 1, 0, "down") == doc

    def test_delete_feature(self, doc):
        assert _feature_names(delete_feature(doc, 0, 1)) == ["Feature 1", "Feature 3", "Feature 4"]

    def test_delete_feature_garde_reference_tier(self, doc):
        """Pas de suppression en cascade : l'id reste dans les tiers."""
        fid = doc.feature_categories[0].features[0].id
        with_ref = toggle_tier_feature(doc, 0, fid, True)
        new = delete_feature(with_ref, 0, 0)
        assert fid not in new.feature_ids()
        assert new.tiers[0].features == [fid]


# ── Réglages ──────────────────────────────────────────────────────────────

def test_set_currency(doc):
    assert set_currency(doc, "CAD").currency == Currency.CAD
    assert set_currency(doc, "JPY") == doc


def test_set_starting_year(doc):
    new = set_starting_year(doc, show=True, year="2019")
    assert (new.show_starting_year, new.starting_year) == (True, "2019")
    assert set_starting_year(new, show=False).starting_year == "2019"


# ── Registry ──────────────────────────────────────────────────────────────

class TestApplyOperation:
    def test_dispatch(self, doc):
        new = apply_operation(doc, "rename_tier", {"index": 0, "name": "Starter"})
        assert new.tiers[0].name == "Starter"

    def test_sans_params(self, doc):
        assert len(apply_operation(doc, "add_category").feature_categories) == 3

    def test_operation_inconnue(self, doc):
        with pytest.raises(EditError, match="inconnue"):
            apply_operation(doc, "drop_table")

    def test_params_invalides(self, doc):
        with pytest.raises(EditError):
            apply_operation(doc, "rename_tier", {"idx": 0})

    def test_edit_error_est_value_error(self):
        assert issubclass(EditError, ValueError)

    def test_registry_complet(self):
        assert {
            "rename_tier", "set_tier_price", "set_tier_popular", "toggle_tier_feature",
            "add_tier", "delete_tier", "add_category", "rename_category", "delete_category",
            "reorder_category", "add_feature", "delete_feature", "rename_feature", "reorder_feature",
        } <= set(OPERATIONS)
