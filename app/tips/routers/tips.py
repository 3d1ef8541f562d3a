"""
Tip store API endpoints.

GET    /api/tips              list the current user's tips
GET    /api/tips/range        tips between ?start= and ?end=
GET    /api/tips/{id}         get one tip
POST   /api/tips              record a confirmed tip
PUT    /api/tips/{id}         partial update
DELETE /api/tips/{id}         delete a tip
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.config import settings
from app.tips.database import get_db
from app.tips.models.tip import TipModel
from app.tips.schemas import Tip, TipCreate, TipUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


def _wall_clock(value: datetime) -> datetime:
    # Tips are kept as the local time printed on the receipt
    return value.replace(tzinfo=None)


def _parse_bound(name: str, raw: Optional[str]) -> datetime:
    if not raw:
        raise HTTPException(status_code=400, detail="Missing start or end date")
    try:
        return _wall_clock(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date format for {name}")


def _get_or_404(db: Session, tip_id: int) -> TipModel:
    row = (
        db.query(TipModel)
        .filter(TipModel.id == tip_id, TipModel.user_id == settings.DEMO_USER_ID)
        .first()
    )
    if not row:
        logger.warning("Tip not found: %s", tip_id)
        raise HTTPException(status_code=404, detail="Tip not found")
    return row


def create_sample_tips(db: Session) -> List[TipModel]:
    """Seed the demo user with a handful of tips."""
    samples = [
        (24.50, "cash", datetime(2025, 3, 20, 12, 0), "Lunch shift"),
        (35.75, "credit_card", datetime(2025, 3, 21, 18, 30), "Dinner shift"),
        (18.25, "venmo", datetime(2025, 3, 22, 9, 15), "Breakfast shift"),
        (42.00, "cash", datetime(2025, 3, 22, 20, 0), "Evening shift"),
        (31.50, "credit_card", datetime(2025, 3, 23, 14, 45), "Afternoon shift"),
    ]
    created = [
        TipModel(
            user_id=settings.DEMO_USER_ID,
            amount=amount,
            source=source,
            occurred_at=occurred_at,
            notes=notes,
        )
        for amount, source, occurred_at, notes in samples
    ]
    db.add_all(created)
    db.commit()
    return created


# ── GET /api/tips ────────────────────────────────────────────────────────
@router.get("/tips", response_model=List[Tip])
def list_tips(db: Session = Depends(get_db)):
    rows = (
        db.query(TipModel)
        .filter(TipModel.user_id == settings.DEMO_USER_ID)
        .order_by(TipModel.occurred_at.desc())
        .all()
    )
    logger.info("Found %d tips", len(rows))
    return rows


# ── GET /api/tips/range ──────────────────────────────────────────────────
@router.get("/tips/range", response_model=List[Tip])
def list_tips_in_range(
    start: Optional[str] = None,
    end: Optional[str] = None,
    db: Session = Depends(get_db),
):
    start_at = _parse_bound("start", start)
    end_at = _parse_bound("end", end)
    return (
        db.query(TipModel)
        .filter(
            TipModel.user_id == settings.DEMO_USER_ID,
            TipModel.occurred_at >= start_at,
            TipModel.occurred_at <= end_at,
        )
        .order_by(TipModel.occurred_at.asc())
        .all()
    )


# ── GET /api/tips/{tip_id} ───────────────────────────────────────────────
@router.get("/tips/{tip_id}", response_model=Tip)
def get_tip(tip_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, tip_id)


# ── POST /api/tips ───────────────────────────────────────────────────────
@router.post("/tips", response_model=Tip, status_code=201)
def create_tip(req: TipCreate, db: Session = Depends(get_db)):
    record = TipModel(
        user_id=settings.DEMO_USER_ID,
        amount=req.amount,
        source=req.source,
        occurred_at=_wall_clock(req.occurred_at or datetime.now()),
        notes=req.notes,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Stored tip %s (%.2f, %s)", record.id, record.amount, record.source)
    return record


# ── PUT /api/tips/{tip_id} ───────────────────────────────────────────────
@router.put("/tips/{tip_id}", response_model=Tip)
def update_tip(tip_id: int, req: TipUpdate, db: Session = Depends(get_db)):
    row = _get_or_404(db, tip_id)
    changes = req.model_dump(exclude_unset=True)
    for key, value in changes.items():
        if value is None and key != "notes":
            continue
        if key == "occurred_at":
            value = _wall_clock(value)
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    logger.info("Updated tip %s: %s", tip_id, sorted(changes))
    return row


# ── DELETE /api/tips/{tip_id} ────────────────────────────────────────────
@router.delete("/tips/{tip_id}")
def delete_tip(tip_id: int, db: Session = Depends(get_db)):
    row = _get_or_404(db, tip_id)
    db.delete(row)
    db.commit()
    logger.info("Deleted tip %s", tip_id)
    return {"message": "Tip deleted", "tip_id": tip_id}
