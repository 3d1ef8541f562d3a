"""
Pydantic v2 models shared by the scan pipeline and the tip store.
"""
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

TipSource = Literal["cash", "venmo", "credit_card", "other"]
TIP_SOURCES: tuple[str, ...] = get_args(TipSource)


# ---------------------------------------------------------------------------
# Extraction output
# ---------------------------------------------------------------------------

class Candidate(BaseModel):
    """An unconfirmed tip pulled out of one receipt section."""
    amount: Optional[str] = Field(
        None, description="Two-decimal amount text, e.g. '12.50'; None if not found"
    )
    occurred_at: datetime = Field(
        ..., description="Recovered date/time, or the extraction time when absent"
    )
    date_recovered: bool = Field(
        False, description="True when occurred_at was read from the receipt text"
    )
    source: TipSource = "cash"
    notes: str = ""


class OCRResult(BaseModel):
    text: str
    confidence: float = Field(..., description="Mean word confidence, 0-100")


# ---------------------------------------------------------------------------
# Tips
# ---------------------------------------------------------------------------

class TipCreate(BaseModel):
    amount: float = Field(..., gt=0)
    source: TipSource = "cash"
    occurred_at: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def _round_amount(cls, v: float) -> float:
        return round(v, 2)


class TipUpdate(BaseModel):
    amount: Optional[float] = Field(None, gt=0)
    source: Optional[TipSource] = None
    occurred_at: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def _round_amount(cls, v: Optional[float]) -> Optional[float]:
        return round(v, 2) if v is not None else v


class Tip(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    amount: float
    source: TipSource
    occurred_at: datetime
    notes: Optional[str] = None


# ---------------------------------------------------------------------------
# API request / response envelopes
# ---------------------------------------------------------------------------

class ScanTextRequest(BaseModel):
    texts: list[str] = Field(..., description="Recognized text, one entry per image")


class ScanResult(BaseModel):
    index: int
    candidates: list[Candidate] = Field(default_factory=list)


class ImageScanResult(ScanResult):
    filename: str = ""
    confidence: Optional[float] = None
    error: Optional[str] = None
