"""Score and order insights for display."""

from __future__ import annotations

from collections.abc import Iterable

from src.extraction.models import Insight


def total_score(insight: Insight) -> float:
    """Arithmetic mean of the four sub-scores.

    Out-of-range sub-scores are averaged as-is; no clamping is applied.
    """
    return (
        insight.informative_score
        + insight.inspiring_score
        + insight.viral_score
        + insight.linkedin_score
    ) / 4


def rank(insights: Iterable[Insight]) -> list[Insight]:
    """Recompute ``total_score`` for every insight and sort best-first.

    Any incoming ``total_score`` is overwritten. Insights with equal totals
    keep their original relative order. Inputs are not mutated; the returned
    list holds updated copies.

    Args:
        insights: Decoded insights, in the order the model returned them.

    Returns:
        A new list sorted by ``total_score`` descending.
    """
    scored = [
        (index, insight.model_copy(update={"total_score": total_score(insight)}))
        for index, insight in enumerate(insights)
    ]
    scored.sort(key=lambda pair: (-pair[1].total_score, pair[0]))
    return [insight for _, insight in scored]
