from pydantic import BaseModel, Field
from typing import Dict, Literal, Optional


class EvaluateRequest(BaseModel):
    mode: Literal["single", "compare"] = Field(default="single")
    name: str = Field(default="", description="Candidate name (option A in compare mode)")
    name_b: Optional[str] = Field(default=None, description="Second candidate, compare mode only")


class NameSignalsModel(BaseModel):
    long: bool
    short: bool
    imagery: bool
    generic: bool
    spelling: bool
    trendy: bool
    caution_count: int = Field(ge=0, le=4)


class NameFeedback(BaseModel):
    normalized_name: str
    memorability: str
    clarity: str
    practical: str
    gutcheck: str
    tier: str
    caution_count: int
    signals: NameSignalsModel


class EvaluateResponse(BaseModel):
    mode: Literal["single", "compare"]
    a: NameFeedback
    b: Optional[NameFeedback] = None
    comparison_summary: Optional[str] = None
    preferred_name: str = Field(description="Name the next-step links were built from")
    links: Dict[str, str] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
