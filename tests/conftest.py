"""
Shared pytest fixtures: in-memory SQLite + FastAPI TestClient.
"""
import os

# Keep the app's startup hook away from the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SEED_SAMPLE_TIPS", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.tips.database import Base, get_db  # noqa: E402
from app.tips.models import TipModel  # noqa: E402,F401  register model
from app.tips.schemas import OCRResult  # noqa: E402
from app.tips.services.ocr import OCRError, get_ocr_engine  # noqa: E402

# StaticPool ensures all connections share the same in-memory database
_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_Session = sessionmaker(autocommit=False, autoflush=False, bind=_ENGINE)


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.create_all(bind=_ENGINE)
    yield
    Base.metadata.drop_all(bind=_ENGINE)


@pytest.fixture()
def db():
    session = _Session()
    try:
        yield session
    finally:
        session.close()


class FakeOCR:
    """Returns canned text keyed by image bytes; unknown images fail."""

    def __init__(self, texts: dict[bytes, str]):
        self.texts = texts
        self.calls: list[bytes] = []

    def recognize(self, image_data: bytes) -> OCRResult:
        self.calls.append(image_data)
        if image_data not in self.texts:
            raise OCRError("unreadable")
        return OCRResult(text=self.texts[image_data], confidence=87.5)


@pytest.fixture()
def fake_ocr():
    return FakeOCR({})


@pytest.fixture()
def client(db, fake_ocr):
    def _override():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = _override
    app.dependency_overrides[get_ocr_engine] = lambda: fake_ocr
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
