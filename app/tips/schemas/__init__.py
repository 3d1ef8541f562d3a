from app.tips.schemas.base import (  # noqa: F401
    TIP_SOURCES,
    Candidate,
    ImageScanResult,
    OCRResult,
    ScanResult,
    ScanTextRequest,
    Tip,
    TipCreate,
    TipSource,
    TipUpdate,
)
