"""SQLite : init + session + CRUD helpers des blocs"""
import json
import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .config import DB_PATH
from .core import PricingDocument, apply_defaults
from .models import Base, PricingBlockDB

log = logging.getLogger(__name__)

ENGINE       = create_engine(f"sqlite:///{DB_PATH}", connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=ENGINE)


def init_db(engine=None):
    engine = engine or ENGINE
    if engine is ENGINE:
        Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── JSON helpers ──
def jo(s: str) -> dict:
    try:
        data = json.loads(s or "{}")
    except json.JSONDecodeError:
        log.warning("Attributs JSON illisibles, ignorés")
        return {}
    return data if isinstance(data, dict) else {}

def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Blocs ──
def db_create_block(db: Session, obj: PricingBlockDB) -> PricingBlockDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_block(db: Session, block_id: str) -> Optional[PricingBlockDB]:
    return db.query(PricingBlockDB).filter_by(block_id=block_id).first()

def db_list_blocks(db: Session) -> List[PricingBlockDB]:
    return db.query(PricingBlockDB).order_by(PricingBlockDB.created_at.desc()).all()

def db_save_attributes(db: Session, block: PricingBlockDB, doc: PricingDocument) -> PricingBlockDB:
    block.attributes = jd(doc.to_attributes())
    db.commit(); db.refresh(block)
    log.info("Bloc %s enregistré", block.block_id)
    return block

def db_delete_block(db: Session, block: PricingBlockDB):
    db.delete(block); db.commit()


def load_block_document(db: Session, block: PricingBlockDB) -> PricingDocument:
    """Lit les attributs d'un bloc ; le defaulter réécrit le bloc s'il l'a complété."""
    return apply_defaults(
        jo(block.attributes),
        persist=lambda doc: db_save_attributes(db, block, doc),
    )
