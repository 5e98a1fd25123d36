"""
Tests opérations sur les tiers : copy-on-write, invariant "un seul populaire", bornes
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from pricing_table.core import apply_defaults, load_document
from pricing_table.edit import (
    add_tier, delete_tier, rename_tier, reorder_tier, set_tier_button,
    set_tier_popular, set_tier_price, toggle_tier_feature,
)


@pytest.fixture
def doc():
    return apply_defaults({}, year="2026")


def _popular_count(d):
    return sum(1 for t in d.tiers if t.is_popular)


# ── Champs simples ────────────────────────────────────────────────────────

def test_rename_tier(doc):
    new = rename_tier(doc, 0, "Starter")
    assert new.tiers[0].name == "Starter"
    assert doc.tiers[0].name == "Free"


def test_set_tier_price_verbatim(doc):
    new = set_tier_price(doc, 1, "CAD", "on request")
    assert new.tiers[1].price_cad == "on request"
    assert new.tiers[1].price_usd == "$8"
    new = set_tier_price(new, 1, "usd", "$9.99")
    assert new.tiers[1].price_usd == "$9.99"


def test_set_tier_price_devise_inconnue_noop(doc):
    assert set_tier_price(doc, 1, "EUR", "9€") == doc


def test_set_tier_button(doc):
    new = set_tier_button(doc, 3, text="Call us", url="/contact")
    assert (new.tiers[3].button_text, new.tiers[3].button_url) == ("Call us", "/contact")
    only_url = set_tier_button(doc, 3, url="/x")
    assert only_url.tiers[3].button_text == "Contact Us"


# ── Tier populaire ────────────────────────────────────────────────────────

class TestPopular:
    def test_un_seul_populaire(self, doc):
        new = set_tier_popular(doc, 0, True)
        assert [t.is_popular for t in new.tiers] == [True, False, False, False]
        assert _popular_count(new) == 1

    def test_false_retire_seulement_ce_tier(self, doc):
        new = set_tier_popular(doc, 2, False)
        assert _popular_count(new) == 0
        unchanged = set_tier_popular(doc, 0, False)
        assert [t.is_popular for t in unchanged.tiers] == [False, False, True, False]

    @pytest.mark.parametrize("index,value", [(0, True), (1, False), (2, True), (3, True), (9, True), (-1, True)])
    def test_invariant_toujours_respecte(self, doc, index, value):
        assert _popular_count(set_tier_popular(doc, index, value)) <= 1

    def test_document_source_intact(self, doc):
        set_tier_popular(doc, 0, True)
        assert doc.tiers[2].is_popular is True
        assert doc.tiers[0].is_popular is False


# ── Features d'un tier ────────────────────────────────────────────────────

class TestToggleFeature:
    def test_ajout_idempotent(self, doc):
        fid = doc.feature_categories[0].features[0].id
        once = toggle_tier_feature(doc, 0, fid, True)
        twice = toggle_tier_feature(once, 0, fid, True)
        assert once == twice
        assert once.tiers[0].features == [fid]

    def test_ajout_puis_retrait_restaure(self, doc):
        fid = doc.feature_categories[0].features[1].id
        base = toggle_tier_feature(doc, 1, doc.feature_categories[0].features[0].id, True)
        back = toggle_tier_feature(toggle_tier_feature(base, 1, fid, True), 1, fid, False)
        assert sorted(back.tiers[1].features) == sorted(base.tiers[1].features)

    def test_retrait_absent_noop(self, doc):
        assert toggle_tier_feature(doc, 0, "missing", False) == doc

    def test_id_inconnu_accepte(self, doc):
        new = toggle_tier_feature(doc, 0, "f1", True)
        assert new.tiers[0].features == ["f1"]

    def test_pas_d_alias_avec_la_source(self, doc):
        new = toggle_tier_feature(doc, 0, "f1", True)
        assert doc.tiers[0].features == []
        assert new.tiers[0].features is not doc.tiers[0].features


# ── Ajout / suppression / ordre ───────────────────────────────────────────

def test_add_tier_defaults(doc):
    new = add_tier(doc)
    tier = new.tiers[-1]
    assert len(new.tiers) == 5
    assert tier.name == "Tier 5"
    assert (tier.price_usd, tier.price_cad) == ("$0", "$0")
    assert (tier.button_text, tier.button_url) == ("Get Started", "#")
    assert tier.is_popular is False
    assert tier.features == []
    assert tier.id


def test_delete_tier_stable(doc):
    new = delete_tier(doc, 1)
    assert [t.name for t in new.tiers] == ["Free", "Standard", "Premium"]


def test_delete_tier_hors_bornes_noop(doc):
    assert delete_tier(doc, 4) == doc
    assert delete_tier(doc, -1) == doc


def test_reorder_tier(doc):
    assert [t.name for t in reorder_tier(doc, 1, "up").tiers] == ["Basic", "Free", "Standard", "Premium"]
    assert reorder_tier(doc, 3, "down") == doc
    assert reorder_tier(doc, 0, "up") == doc


def test_operations_sur_document_legacy():
    """Tiers sans id (format historique) : adressés par position."""
    legacy = load_document({"tiers": [{"name": "A"}, {"name": "B"}]})
    new = set_tier_popular(rename_tier(legacy, 1, "Bee"), 1, True)
    assert [(t.name, t.is_popular, t.id) for t in new.tiers] == [("A", False, None), ("Bee", True, None)]


def test_operations_acceptent_un_dict():
    new = rename_tier({"tiers": [{"name": "A"}]}, 0, "B")
    assert new.tiers[0].name == "B"


def test_dict_d_instances_non_modifie(doc):
    """Un dict qui contient des instances existantes reste copy-on-write."""
    new = rename_tier({"tiers": doc.tiers}, 0, "Mutated")
    assert new.tiers[0].name == "Mutated"
    assert doc.tiers[0].name == "Free"
    assert new.tiers[0] is not doc.tiers[0]


def test_valeurs_non_textuelles_converties(doc):
    assert rename_tier(doc, 0, 123).tiers[0].name == "123"
    assert set_tier_price(doc, 0, "USD", 9).tiers[0].price_usd == "9"
    assert rename_tier(doc, 0, None).tiers[0].name == ""


def test_popular_chaine_false(doc):
    new = set_tier_popular(doc, 0, "false")
    assert [t.is_popular for t in new.tiers] == [False, False, True, False]
