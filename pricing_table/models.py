"""
Data models : bloc tableau de prix persisté
SQLAlchemy (SQLite) + schémas Pydantic v2 d'entrée API
"""
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

import sqlalchemy as sa
from pydantic import BaseModel, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class PricingBlockDB(Base):
    __tablename__ = "pricing_blocks"
    block_id:   Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title:      Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    attributes: Mapped[str]           = mapped_column(sa.Text, default="{}")
    created_at: Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ── PYDANTIC SCHEMAS ────────────────────────────────────────────────────

class BlockCreate(BaseModel):
    title:      Optional[str]  = None
    attributes: Dict[str, Any] = Field(default_factory=dict)


class EditInput(BaseModel):
    op:     str
    params: Dict[str, Any] = Field(default_factory=dict)


class DocumentEditInput(EditInput):
    """Édition sans stockage : l'hôte fournit le document et reçoit le nouveau."""
    document: Dict[str, Any] = Field(default_factory=dict)
