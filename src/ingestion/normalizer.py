"""Transcript normalizer: strip WebVTT structural noise so only spoken words remain."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteRule:
    """A single whole-text substitution applied during normalization."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# ``[^\S\n]`` is horizontal whitespace only, so no rule ever crosses a line break.
# re.ASCII keeps ``\d`` and ``\b`` to ASCII digits / word characters.
_LINE_FLAGS = re.MULTILINE | re.ASCII

WEBVTT_HEADER = RewriteRule("webvtt_header", re.compile(r"^WEBVTT.*$", _LINE_FLAGS))

NOTE_LINE = RewriteRule("note_line", re.compile(r"^NOTE\b.*$", _LINE_FLAGS))

CUE_SEQUENCE_NUMBER = RewriteRule(
    "cue_sequence_number",
    re.compile(r"^[^\S\n]*\d+[^\S\n]*$", _LINE_FLAGS),
)

# The dot between seconds and milliseconds must stay escaped: an unescaped ``.``
# would also accept e.g. ``00:01:23X456``.
TIMESTAMP_RANGE = RewriteRule(
    "timestamp_range",
    re.compile(
        r"\d{2}:\d{2}:\d{2}\.\d{3} --> \d{2}:\d{2}:\d{2}\.\d{3}.*",
        re.ASCII,
    ),
)

EXCESS_BLANK_LINES = RewriteRule("excess_blank_lines", re.compile(r"\n{3,}"), "\n\n")

# Order matters: per-line removals run before blank-line collapsing so that
# emptied lines join the runs that get collapsed.
RULES: tuple[RewriteRule, ...] = (
    WEBVTT_HEADER,
    NOTE_LINE,
    CUE_SEQUENCE_NUMBER,
    TIMESTAMP_RANGE,
    EXCESS_BLANK_LINES,
)


def normalize(text: str, rules: tuple[RewriteRule, ...] = RULES) -> str:
    """Clean a transcript so only spoken text is sent to the model.

    Removes the ``WEBVTT`` header line (with any metadata on the same line),
    single-line ``NOTE`` comments, cue sequence numbers and
    ``HH:MM:SS.mmm --> HH:MM:SS.mmm`` timestamp lines (including trailing cue
    settings), then collapses 3+ newlines to a single blank line and trims
    the result.

    Plain-text and Markdown transcripts contain none of these artifacts and
    come back trimmed but otherwise unchanged. Malformed timestamps are left
    in place. Never raises.

    Args:
        text: Decoded transcript text.
        rules: Rewrite rules to apply, in order.

    Returns:
        The cleaned transcript.
    """
    for rule in rules:
        text = rule.apply(text)
    return text.strip()
