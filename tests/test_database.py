"""Tests store SQLite : CRUD blocs + réécriture des valeurs par défaut."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pricing_table.database import (
    db_create_block, db_get_block, db_list_blocks, db_save_attributes,
    init_db, jd, jo, load_block_document,
)
from pricing_table.edit import rename_tier
from pricing_table.models import PricingBlockDB
from pricing_table.renderer import CHECK_ICON, apply_control, render_controls, render_table


@pytest.fixture
def db(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'store.db'}")
    init_db(engine)
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


def test_jo_tolerant():
    assert jo("") == {}
    assert jo("{not json") == {}
    assert jo("[1, 2]") == {}
    assert jo(jd({"a": "é"})) == {"a": "é"}


def test_load_block_document_persiste_les_defaults(db):
    block = db_create_block(db, PricingBlockDB(attributes="{}"))
    doc = load_block_document(db, block)
    stored = jo(db_get_block(db, block.block_id).attributes)
    assert stored == doc.to_attributes()
    assert len(stored["tiers"]) == 4


def test_load_block_document_attributs_corrompus(db):
    block = db_create_block(db, PricingBlockDB(attributes="corrupted"))
    doc = load_block_document(db, block)
    assert len(doc.tiers) == 4


def test_ids_generes_stables_entre_lectures(db):
    raw = {"featureCategories": [{"name": "Cat", "features": [{"name": "F1"}, {"name": "F2"}]}]}
    block = db_create_block(db, PricingBlockDB(attributes=jd(raw)))
    first = load_block_document(db, block)
    second = load_block_document(db, db_get_block(db, block.block_id))
    assert [c.id for c in first.feature_categories] == [c.id for c in second.feature_categories]
    assert first.feature_ids() == second.feature_ids()


def test_checkbox_sur_bloc_sans_ids(db):
    raw = {
        "tiers": [{"name": "A"}],
        "featureCategories": [{"name": "Cat", "features": [{"name": "F1"}]}],
    }
    block = db_create_block(db, PricingBlockDB(attributes=jd(raw)))
    doc = load_block_document(db, block)
    box = [c for c in render_controls(doc).panel("Tiers").groups[0].controls if c.kind == "checkbox"][0]

    edited = apply_control(load_block_document(db, block), box, True)
    db_save_attributes(db, block, edited)
    html = render_table(load_block_document(db, db_get_block(db, block.block_id)))
    assert CHECK_ICON in html


def test_save_attributes(db):
    block = db_create_block(db, PricingBlockDB(title="Home"))
    doc = rename_tier(load_block_document(db, block), 0, "Starter")
    db_save_attributes(db, block, doc)
    assert jo(db_get_block(db, block.block_id).attributes)["tiers"][0]["name"] == "Starter"


def test_list_blocks(db):
    db_create_block(db, PricingBlockDB(title="A"))
    db_create_block(db, PricingBlockDB(title="B"))
    assert {b.title for b in db_list_blocks(db)} == {"A", "B"}
