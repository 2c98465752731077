"""FastAPI application exposing the decision engine."""

import logging
import os
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException

from .. import __version__
from ..engine import DecisionEngine
from ..models import Option
from ..scoring.confidence import assess_confidence
from ..utils import load_config, setup_logging
from .models import (
    AnalysisRequest,
    ApiResponse,
    ConfidenceRequest,
    EmotionRequest,
    HealthResponse,
    OptionModel,
    OptionsRequest,
    PatternsRequest,
    PrioritiesRequest,
    QuestionsRequest,
    ScoreRequest,
)

logger = logging.getLogger('decision_intel')

CONFIG_ENV = 'DECISION_INTEL_CONFIG'


def _options(models: List[OptionModel]) -> List[Option]:
    return [m.to_option() for m in models]


def _find_option(options: List[Option], option_id: str) -> Option:
    for option in options:
        if option.id == option_id:
            return option
    raise HTTPException(status_code=400, detail=f"Unknown winner option id: {option_id}")


def create_app(config: Optional[Dict] = None) -> FastAPI:
    """Build the API around a fresh engine.

    Args:
        config: Full configuration dictionary

    Returns:
        FastAPI application
    """
    config = config or {}
    engine = DecisionEngine(config)

    app = FastAPI(
        title="Decision Intelligence API",
        description="Weighted option scoring with rule-based emotional and cognitive-bias analysis"
    )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", version=__version__)

    @app.post("/score", response_model=ApiResponse)
    async def score(request: ScoreRequest):
        """Rank options by weighted score."""
        result = engine.score(_options(request.options), [p.to_priority() for p in request.priorities])
        body = result.to_dict()
        body['recommendation'] = engine.scorer.recommendation_text(result)
        return ApiResponse(status="success", result=body)

    @app.post("/emotions", response_model=ApiResponse)
    async def emotions(request: EmotionRequest):
        """Detect emotions in free text."""
        return ApiResponse(status="success", result=[e.to_dict() for e in engine.detect_emotions(request.text)])

    @app.post("/emotions/options", response_model=ApiResponse)
    async def option_emotions(request: OptionsRequest):
        """Emotional analysis for each option."""
        analyses = engine.analyze_option_emotions(_options(request.options))
        return ApiResponse(status="success", result=[a.to_dict() for a in analyses])

    @app.post("/patterns", response_model=ApiResponse)
    async def patterns(request: PatternsRequest):
        """Cognitive patterns for a ranked decision."""
        options = _options(request.options)
        _find_option(options, request.winnerId)
        analyses = engine.analyze_option_emotions(options)
        found = engine.detect_cognitive_patterns(options, analyses, request.winnerId)
        return ApiResponse(status="success", result=[p.to_dict() for p in found])

    @app.post("/priorities/suggest", response_model=ApiResponse)
    async def suggest_priorities(request: PrioritiesRequest):
        """Priority template for the decision text."""
        return ApiResponse(status="success", result=engine.recommend_priorities(request.decision).to_dict())

    @app.post("/questions", response_model=ApiResponse)
    async def questions(request: QuestionsRequest):
        """Devil's-advocate questions for the winner."""
        options = _options(request.options)
        winner = _find_option(options, request.winnerId)
        found = engine.generate_challenge_questions(request.decision, options, winner)
        return ApiResponse(status="success", result=[q.to_dict() for q in found])

    @app.post("/analysis", response_model=ApiResponse)
    async def analysis(request: AnalysisRequest):
        """Full evaluation: ranking, emotions, patterns, questions and report."""
        options = _options(request.options)
        priorities = [p.to_priority() for p in request.priorities]

        try:
            evaluation = engine.evaluate(request.decision, options, priorities)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        body = evaluation.to_dict()
        logger.info(f"Analysis complete for '{request.decision}' (winner: {body['winnerId']})")
        return ApiResponse(status="success", result=body)

    @app.post("/confidence", response_model=ApiResponse)
    async def confidence(request: ConfidenceRequest):
        """Interpret the user's confidence in the result."""
        return ApiResponse(status="success", result=assess_confidence(request.score).to_dict())

    return app


def _load_app_config() -> Dict:
    config_path = os.environ.get(CONFIG_ENV, 'config.yaml')
    if not os.path.exists(config_path):
        logger.warning(f"Config file {config_path} not found, using defaults")
        return {}
    config = load_config(config_path)
    setup_logging(config.get('logging'))
    return config


app = create_app(_load_app_config())


def main():
    """Run the API server with settings from the configured YAML file."""
    import uvicorn

    config_path = os.environ.get(CONFIG_ENV, 'config.yaml')
    config = load_config(config_path) if os.path.exists(config_path) else {}
    api_config = config.get('api', {})
    uvicorn.run(
        "decision_intel.api.server:app",
        host=api_config.get('host', '0.0.0.0'),
        port=api_config.get('port', 8000),
        reload=False
    )
