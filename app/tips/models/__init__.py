from app.tips.models.tip import TipModel  # noqa: F401
