"""
Receipt scan API endpoints.

POST /api/scan/text     extract tip candidates from already recognized text
POST /api/scan/images   OCR uploaded receipt images, then extract candidates

Nothing is stored here; the client confirms candidates through /api/tips.
"""
from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from app.config import settings
from app.tips.pipeline import extract_candidates
from app.tips.schemas import ImageScanResult, ScanResult, ScanTextRequest
from app.tips.services.ocr import OCREngine, OCRError, get_ocr_engine

logger = logging.getLogger(__name__)
router = APIRouter()

SCAN_FAILED = "Could not read this receipt. Try again with a clearer image."


# ── POST /api/scan/text ──────────────────────────────────────────────────
@router.post("/scan/text", response_model=list[ScanResult])
def scan_text(req: ScanTextRequest):
    logger.info("Scan text: %d document(s)", len(req.texts))
    return [
        ScanResult(index=idx, candidates=extract_candidates(text))
        for idx, text in enumerate(req.texts)
    ]


# ── POST /api/scan/images ────────────────────────────────────────────────
async def _scan_one(
    idx: int, filename: str, data: bytes, ocr: OCREngine
) -> ImageScanResult:
    try:
        result = await run_in_threadpool(ocr.recognize, data)
    except OCRError as e:
        logger.warning("OCR failed for %s: %s", filename, e)
        return ImageScanResult(index=idx, filename=filename, error=SCAN_FAILED)

    candidates = await run_in_threadpool(extract_candidates, result.text)
    return ImageScanResult(
        index=idx,
        filename=filename,
        confidence=result.confidence,
        candidates=candidates,
    )


@router.post("/scan/images", response_model=list[ImageScanResult])
async def scan_images(
    files: list[UploadFile] = File(...),
    ocr: OCREngine = Depends(get_ocr_engine),
):
    max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
    uploads: list[tuple[str, bytes]] = []
    for upload in files:
        name = upload.filename or "receipt"
        if upload.content_type not in settings.ALLOWED_UPLOAD_TYPES:
            raise HTTPException(
                status_code=400,
                detail=f"Unsupported file type for {name}: {upload.content_type}",
            )
        data = await upload.read()
        if len(data) > max_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"{name} is larger than {settings.MAX_UPLOAD_MB}MB",
            )
        uploads.append((name, data))

    logger.info("Scan images: %d file(s)", len(uploads))
    # gather keeps results in upload order
    return await asyncio.gather(
        *(_scan_one(idx, name, data, ocr) for idx, (name, data) in enumerate(uploads))
    )
