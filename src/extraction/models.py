"""Data models for insights extracted from a transcript."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Gemini returns (and the API serves) camelCase keys; attributes stay snake_case.
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)


class CarouselSlide(CamelModel):
    """One panel of a carousel outline. Passed through untouched."""

    title: str
    content: str


class Insight(CamelModel):
    """A single scored insight.

    Sub-scores are nominally 1-10 but are not range-checked; numeric strings
    such as ``"6"`` are coerced, while NaN and infinities are rejected.
    ``total_score`` is derived by :func:`src.extraction.ranker.rank` and any
    value supplied by the model is discarded before validation.
    """

    # Merged with CamelModel's config.
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    summary: str
    suggested_hook: str
    category: str
    informative_score: float
    inspiring_score: float
    viral_score: float
    linkedin_score: float
    carousel_slides: list[CarouselSlide]
    total_score: float = 0.0
