"""Tests for insight scoring and ordering."""

from __future__ import annotations

import pytest

from src.extraction.models import CarouselSlide, Insight
from src.extraction.ranker import rank, total_score


def make_insight(
    insight_id: str,
    informative: float,
    inspiring: float,
    viral: float,
    linkedin: float,
    total: float = 0.0,
    slides: list[CarouselSlide] | None = None,
) -> Insight:
    """Build a minimal insight with the given sub-scores."""
    return Insight(
        id=insight_id,
        summary=f"Summary {insight_id}",
        suggested_hook=f"Hook {insight_id}",
        category="Test",
        informative_score=informative,
        inspiring_score=inspiring,
        viral_score=viral,
        linkedin_score=linkedin,
        total_score=total,
        carousel_slides=slides or [],
    )


class TestTotalScore:
    def test_mean_of_sub_scores(self) -> None:
        assert total_score(make_insight("i1", 8, 6, 4, 10)) == 7

    def test_fractional_mean(self) -> None:
        assert total_score(make_insight("i1", 7, 8, 8, 8)) == pytest.approx(7.75)

    def test_out_of_range_scores_are_not_clamped(self) -> None:
        """Scores outside 1-10 are averaged as-is."""
        assert total_score(make_insight("odd", 0, 15, -3, 12)) == 6


class TestRank:
    def test_empty(self) -> None:
        assert rank([]) == []

    def test_sorted_descending(self) -> None:
        low = make_insight("low", 2, 2, 2, 2)
        high = make_insight("high", 10, 10, 10, 10)
        mid = make_insight("mid", 5, 5, 5, 5)

        result = rank([low, high, mid])

        assert [i.id for i in result] == ["high", "mid", "low"]
        assert [i.total_score for i in result] == [10, 5, 2]

    def test_preserves_length(self) -> None:
        insights = [make_insight(str(n), n % 10, 3, 4, 5) for n in range(25)]
        assert len(rank(insights)) == len(insights)

    def test_overwrites_supplied_total(self) -> None:
        """A totalScore coming from the model is never trusted."""
        result = rank([make_insight("liar", 1, 1, 1, 1, total=99)])
        assert result[0].total_score == 1

    def test_every_total_is_the_mean(self) -> None:
        insights = [
            make_insight("a", 3, 9, 4, 7, total=1),
            make_insight("b", 10, 2, 6, 5, total=50),
            make_insight("c", 1, 1, 8, 8),
        ]
        for insight in rank(insights):
            expected = (
                insight.informative_score
                + insight.inspiring_score
                + insight.viral_score
                + insight.linkedin_score
            ) / 4
            assert insight.total_score == expected

    def test_ties_keep_input_order(self) -> None:
        insights = [
            make_insight("tie-1", 5, 5, 5, 5),
            make_insight("top", 9, 9, 9, 9),
            make_insight("tie-2", 4, 6, 5, 5),
            make_insight("tie-3", 6, 4, 5, 5),
            make_insight("bottom", 1, 1, 1, 1),
            make_insight("tie-4", 5, 5, 6, 4),
        ]

        result = rank(insights)

        assert [i.id for i in result] == ["top", "tie-1", "tie-2", "tie-3", "tie-4", "bottom"]

    def test_duplicate_ids_preserved(self) -> None:
        result = rank([make_insight("dup", 2, 2, 2, 2), make_insight("dup", 8, 8, 8, 8)])
        assert [i.id for i in result] == ["dup", "dup"]
        assert [i.total_score for i in result] == [8, 2]

    def test_other_fields_pass_through(self) -> None:
        slides = [
            CarouselSlide(title="Slide 3", content="c"),
            CarouselSlide(title="Slide 1", content="a"),
        ]
        original = make_insight("x", 6, 7, 8, 9, slides=slides)

        ranked = rank([original])[0]

        assert ranked.carousel_slides == slides
        assert ranked.summary == original.summary
        assert ranked.suggested_hook == original.suggested_hook
        assert ranked.category == original.category

    def test_inputs_not_mutated(self) -> None:
        original = make_insight("x", 4, 4, 4, 4, total=0)
        rank([original])
        assert original.total_score == 0

    def test_accepts_any_iterable(self) -> None:
        result = rank(make_insight(str(n), n, n, n, n) for n in (1, 3, 2))
        assert [i.id for i in result] == ["3", "2", "1"]
