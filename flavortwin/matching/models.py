from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .config import DEFAULT_MATCH_CONFIG


class Nutrients(BaseModel):
    energy: float = Field(default=450.0, ge=0.0, description="kcal")
    protein: float = Field(default=25.0, ge=0.0, description="grams")
    carbs: float = Field(default=45.0, ge=0.0, description="grams")


DEFAULT_NUTRIENTS = Nutrients()


class Dish(BaseModel):
    name: str = Field(..., min_length=1)
    ingredients: list[str] = Field(..., min_length=1)
    cuisine: str = "Unknown"
    continent: str = "Global"
    sub_region: str = "Gastronomic Universe"
    nutrients: Nutrients | None = None
    image: str | None = None

    @property
    def key(self) -> str:
        return self.name.lower()


class Score(BaseModel):
    """Unrounded similarity components, each in [0, 1]."""

    flavor_sim: float
    nut_match: float
    total: float


class MatchResult(BaseModel):
    dish: Dish
    similarity: int = Field(..., ge=0, le=100)
    flavor_sim: int = Field(..., ge=0, le=100)
    nut_match: int = Field(..., ge=0, le=100)
    shared_traits: list[str]
    explanation: str
    flavor_profile: dict[str, float] = Field(default_factory=dict)


class SourceProfile(BaseModel):
    dish: Dish
    raw_vector: dict[str, float]
    display_vector: dict[str, float]
    dominant: str | None = None
    subtle: str | None = None


class MatchStage(str, Enum):
    locating_source = "Locating source recipe"
    parsing_detail = "Parsing recipe detail"
    mapping_dimensions = "Mapping flavor dimensions"
    scanning_catalog = "Scanning catalog for flavor resonance"
    finalizing = "Finalizing match"


class ResolutionOrigin(str, Enum):
    catalog = "catalog"
    provider = "provider"


class TwinRequest(BaseModel):
    dish: str = Field(..., min_length=1, max_length=200, description="Free-text dish name")
    k: int = Field(default=DEFAULT_MATCH_CONFIG.default_k, ge=1, le=DEFAULT_MATCH_CONFIG.max_k)


class TwinResponse(BaseModel):
    source: SourceProfile
    twins: list[MatchResult]
    total_candidates: int
    origin: ResolutionOrigin
    stages: list[str] = Field(default_factory=list)
    message: str | None = None


class VectorRequest(BaseModel):
    ingredients: list[str] = Field(default_factory=list)


class VectorResponse(BaseModel):
    raw: dict[str, float]
    display: dict[str, float]
    bounded: dict[str, float]
    dominant: str | None = None
    subtle: str | None = None
    matches: dict[str, list[str]]
