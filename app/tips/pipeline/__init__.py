"""
Receipt scan pipeline.

Orchestrates: split into sections → find tip amount → find date → candidates.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from app.tips.pipeline.amounts import find_tip_amount
from app.tips.pipeline.dates import find_occurred_at
from app.tips.pipeline.segmenter import split_sections
from app.tips.schemas import Candidate

logger = logging.getLogger(__name__)


def _scan_section(text: str, now: datetime) -> Optional[Candidate]:
    amount = find_tip_amount(text)
    occurred_at = find_occurred_at(text, now)
    if amount is None and occurred_at is None:
        return None
    return Candidate(
        amount=amount,
        occurred_at=occurred_at or now,
        date_recovered=occurred_at is not None,
    )


def extract_candidates(
    raw_text: str, now: Optional[datetime] = None
) -> list[Candidate]:
    """Turn the recognized text of one image into tip candidates.

    One candidate per receipt section that names a tip or a date, in the
    order the sections appear. If no section yields anything the whole text
    is scanned once more as a single unit. Every candidate is returned for
    the user to confirm or discard.
    """
    now = now or datetime.now()

    sections = split_sections(raw_text)
    logger.debug("Split text into %d section(s)", len(sections))

    candidates: list[Candidate] = []
    for idx, section in enumerate(sections, 1):
        candidate = _scan_section(section, now)
        if candidate is None:
            logger.debug("Section %d: nothing found", idx)
            continue
        candidates.append(candidate)

    if not candidates:
        logger.debug("No section matched, scanning the whole text")
        candidate = _scan_section(raw_text, now)
        if candidate is not None:
            candidates.append(candidate)

    logger.info(
        "Extracted %d candidate(s) from %d section(s)", len(candidates), len(sections)
    )
    return candidates
