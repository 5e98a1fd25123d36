"""
Router FastAPI : endpoints tableau de prix.

Sans stockage (l'hôte garde le document) :
POST /pricing-table/normalize  → attributs → attributs complétés
POST /pricing-table/render     → attributs → HTMLResponse (?currency=USD|CAD&legacy=false)
POST /pricing-table/controls   → attributs → surface d'édition
POST /pricing-table/edit       → {document, op, params} → attributs
GET  /pricing-table/schema     → JSON schema du document + opérations disponibles

Blocs persistés (SQLite) :
POST   /pricing-table/blocks                → création
GET    /pricing-table/blocks                → liste
GET    /pricing-table/blocks/{id}           → attributs (complétés + réécrits si besoin)
POST   /pricing-table/blocks/{id}/edit      → {op, params} → attributs
GET    /pricing-table/blocks/{id}/render    → HTMLResponse
DELETE /pricing-table/blocks/{id}
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from .core import PricingDocument, apply_defaults, load_document
from .database import (
    db_create_block, db_delete_block, db_get_block, db_list_blocks,
    db_save_attributes, get_db, jd, load_block_document,
)
from .edit import OPERATIONS, EditError, apply_operation
from .models import BlockCreate, DocumentEditInput, EditInput, PricingBlockDB
from .renderer import render_controls, render_table

log = logging.getLogger(__name__)
router = APIRouter(prefix="/pricing-table", tags=["pricing_table"])


def _edit(doc: Any, op: str, params: Dict[str, Any]) -> PricingDocument:
    try:
        return apply_operation(doc, op, params)
    except EditError as e:
        raise HTTPException(422, str(e))


def _block_or_404(db: Session, block_id: str) -> PricingBlockDB:
    block = db_get_block(db, block_id)
    if not block:
        raise HTTPException(404, "Bloc introuvable")
    return block


# ── Sans stockage ──────────────────────────────────────────────────────────────

@router.post("/normalize", summary="Complète un document avec les valeurs par défaut")
def normalize(attributes: Dict[str, Any] = Body(default_factory=dict)) -> dict:
    return apply_defaults(attributes).to_attributes()


@router.post("/render", response_class=HTMLResponse, summary="Rend le tableau en HTML")
def render(
    attributes: Dict[str, Any] = Body(default_factory=dict),
    currency: Optional[str] = None,
    legacy: bool = False,
) -> HTMLResponse:
    """La devise passée en query ne modifie pas le document, seulement le prix visible."""
    return HTMLResponse(render_table(load_document(attributes), currency=currency, legacy_prices=legacy))


@router.post("/controls", summary="Surface d'édition du document")
def controls(attributes: Dict[str, Any] = Body(default_factory=dict)) -> dict:
    return render_controls(load_document(attributes)).model_dump()


@router.post("/edit", summary="Applique une opération d'édition")
def edit(data: DocumentEditInput) -> dict:
    return _edit(data.document, data.op, data.params).to_attributes()


@router.get("/schema", summary="JSON schema du document + opérations")
def schema() -> dict:
    return {
        "document":   PricingDocument.model_json_schema(by_alias=True),
        "operations": sorted(OPERATIONS),
    }


# ── Blocs persistés ────────────────────────────────────────────────────────────

def _block_out(block: PricingBlockDB, doc: PricingDocument) -> dict:
    return {
        "block_id":   block.block_id,
        "title":      block.title,
        "attributes": doc.to_attributes(),
        "updated_at": block.updated_at.isoformat() if block.updated_at else None,
    }


@router.post("/blocks", status_code=201)
def create_block(data: BlockCreate, db: Session = Depends(get_db)) -> dict:
    block = db_create_block(db, PricingBlockDB(title=data.title, attributes=jd(data.attributes)))
    log.info("Bloc créé : %s", block.block_id)
    return _block_out(block, load_block_document(db, block))


@router.get("/blocks")
def list_blocks(db: Session = Depends(get_db)) -> list:
    return [{"block_id": b.block_id, "title": b.title} for b in db_list_blocks(db)]


@router.get("/blocks/{block_id}")
def get_block(block_id: str, db: Session = Depends(get_db)) -> dict:
    block = _block_or_404(db, block_id)
    return _block_out(block, load_block_document(db, block))


@router.post("/blocks/{block_id}/edit")
def edit_block(block_id: str, data: EditInput, db: Session = Depends(get_db)) -> dict:
    block = _block_or_404(db, block_id)
    doc = _edit(load_block_document(db, block), data.op, data.params)
    db_save_attributes(db, block, doc)
    return _block_out(block, doc)


@router.get("/blocks/{block_id}/render", response_class=HTMLResponse)
def render_block(block_id: str, currency: Optional[str] = None, db: Session = Depends(get_db)) -> HTMLResponse:
    block = _block_or_404(db, block_id)
    return HTMLResponse(render_table(load_block_document(db, block), currency=currency))


@router.delete("/blocks/{block_id}")
def delete_block(block_id: str, db: Session = Depends(get_db)) -> dict:
    db_delete_block(db, _block_or_404(db, block_id))
    return {"ok": True}
