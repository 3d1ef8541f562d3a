"""
Receipt segmenter.

Splits OCR text from a batch photo into sections that each look like one
printed receipt.
"""
from __future__ import annotations

import re

# Any one of these marks a boundary between receipts:
#   - three or more blank lines
#   - a rule of three or more '*', '-' or '='
#   - a TOTAL line followed by blank lines (the TOTAL line itself is consumed)
SECTION_BREAK = re.compile(
    r"\n(?:[ \t]*\n){3,}"
    r"|\*{3,}"
    r"|-{3,}"
    r"|={3,}"
    r"|\bTOTAL\b[^\n]*\n(?:[ \t]*\n)+",
    re.IGNORECASE,
)


def split_sections(raw_text: str) -> list[str]:
    """Return the receipt sections of *raw_text* in order of appearance.

    Never returns an empty list: when no non-blank section survives the split
    the whole trimmed text is returned as the only section.
    """
    sections = [part.strip() for part in SECTION_BREAK.split(raw_text)]
    sections = [s for s in sections if s]
    if not sections:
        return [raw_text.strip()]
    return sections
