"""API module for the decision engine."""

from .server import app, create_app
from .models import AnalysisRequest, ScoreRequest

__all__ = ["app", "create_app", "AnalysisRequest", "ScoreRequest"]
