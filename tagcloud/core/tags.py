# tagcloud/core/tags.py
"""
Turn student growth-tag states into word-cloud input.
A state is a mapping with tagName, level (0-10), sentiment (POSITIVE / NEGATIVE)
and optionally totalObservations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from tagcloud.core.config import GROWTH_LEVEL_SCALE, TOP_WORDS_DEFAULT
from tagcloud.core.sizing import clean_value
from tagcloud.core.types import Sentiment, WordDatum


@dataclass(frozen=True)
class GrowthTagWord:
    """A growth tag as a word, with how often it was observed."""
    word: WordDatum
    frequency: int = 0


def normalize_sentiment(raw: Any) -> Sentiment | None:
    """'POSITIVE' / 'positive' -> 'positive'; anything unknown is neutral (None)."""
    s = str(raw or "").strip().lower()
    if s == "positive":
        return "positive"
    if s == "negative":
        return "negative"
    return None


def state_to_word(state: Mapping[str, Any]) -> GrowthTagWord:
    text = str(state.get("tagName") or state.get("text") or "")
    level = clean_value(state.get("level", 0))
    try:
        frequency = int(state.get("totalObservations") or 0)
    except (TypeError, ValueError):
        frequency = 0
    word = WordDatum(
        text=text,
        value=float(math.floor(level * GROWTH_LEVEL_SCALE + 0.5)),
        sentiment=normalize_sentiment(state.get("sentiment")),
    )
    return GrowthTagWord(word=word, frequency=frequency)


def words_from_growth_states(states: Iterable[Mapping[str, Any]] | None) -> list[GrowthTagWord]:
    """Convert states and sort by value descending (stable)."""
    if not states:
        return []
    out = [state_to_word(s) for s in states]
    return sorted(out, key=lambda g: -g.word.value)


def split_by_sentiment(tags: Iterable[GrowthTagWord]) -> tuple[list[GrowthTagWord], list[GrowthTagWord]]:
    """(positive, negative); neutral tags are in neither list."""
    positive: list[GrowthTagWord] = []
    negative: list[GrowthTagWord] = []
    for t in tags:
        if t.word.sentiment == "positive":
            positive.append(t)
        elif t.word.sentiment == "negative":
            negative.append(t)
    return positive, negative


def top_words(tags: list[GrowthTagWord], n: int = TOP_WORDS_DEFAULT) -> list[GrowthTagWord]:
    """First n tags of an already sorted list."""
    return tags[: max(0, n)]
