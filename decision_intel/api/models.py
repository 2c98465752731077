"""Pydantic models for API requests and responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, conint

from ..models import Option, Priority

Rating = conint(ge=1, le=5)


class PriorityModel(BaseModel):
    """Priority as sent by the client."""
    id: str
    label: str
    description: str = ''
    value: int = Field(3, ge=1, le=5)

    def to_priority(self) -> Priority:
        return Priority(id=self.id, label=self.label, description=self.description, value=self.value)


class OptionModel(BaseModel):
    """Option as sent by the client."""
    id: str
    name: str
    emotionalText: str = ''
    imageUrl: Optional[str] = None
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    scores: Dict[str, Rating] = Field(default_factory=dict)

    def to_option(self) -> Option:
        return Option(
            id=self.id,
            name=self.name,
            emotional_text=self.emotionalText,
            image_url=self.imageUrl,
            pros=list(self.pros),
            cons=list(self.cons),
            scores=dict(self.scores)
        )


class EmotionRequest(BaseModel):
    """Free text to scan for emotions."""
    text: str = ''


class OptionsRequest(BaseModel):
    """Options whose reflections should be analysed."""
    options: List[OptionModel]


class ScoreRequest(BaseModel):
    """Options and priorities to rank."""
    options: List[OptionModel]
    priorities: List[PriorityModel]


class PatternsRequest(BaseModel):
    """Options plus the id of the winning one."""
    options: List[OptionModel]
    winnerId: str


class PrioritiesRequest(BaseModel):
    """Decision text to suggest priorities for."""
    decision: str


class QuestionsRequest(BaseModel):
    """Decision, its options and the winner's id."""
    decision: str
    options: List[OptionModel]
    winnerId: str


class AnalysisRequest(BaseModel):
    """Full decision to analyse; the top-scored option is the winner."""
    decision: str
    options: List[OptionModel]
    priorities: List[PriorityModel]


class ConfidenceRequest(BaseModel):
    """Self-reported confidence on a 1-10 scale."""
    score: int = Field(7, ge=1, le=10)


class HealthResponse(BaseModel):
    """Service health."""
    status: str
    version: str


class ApiResponse(BaseModel):
    """Envelope for every engine result."""
    status: str
    result: Any
