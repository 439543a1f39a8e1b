# -*- coding: utf-8 -*-
"""Closed value sets for facial features and conversation topics."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar


class HairColor(str, Enum):
    BLACK = "black"
    BROWN = "brown"
    BLONDE = "blonde"
    RED = "red"
    GRAY = "gray"


class HairLength(str, Enum):
    BALD = "bald"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class EyeColor(str, Enum):
    BLACK = "black"
    BROWN = "brown"
    BLUE = "blue"
    GREEN = "green"


class FacialHair(str, Enum):
    MUSTACHE = "mustache"
    BEARD = "beard"


class Topic(str, Enum):
    """Things a person can like or dislike. Declaration order is display order."""

    FASHION = "fashion"
    FOOD = "food"
    SPORTS = "sports"
    TRAVEL = "travel"
    MOVIES = "movies"
    BOOKS = "books"
    POLITICS = "politics"
    WEATHER = "weather"
    TELEVISION = "television"
    MUSIC = "music"
    FAMILY = "family"
    CARS = "cars"
    COMEDY = "comedy"


FeatureT = TypeVar("FeatureT", bound=Enum)


def parse_feature(enum_cls: type[FeatureT], raw: str) -> FeatureT:
    """Map a case-insensitive string onto a member of ``enum_cls``."""
    value = str(raw).strip().lower()
    for member in enum_cls:
        if member.value == value:
            return member
    allowed = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"Invalid {enum_cls.__name__} '{raw}' (expected one of: {allowed})")


def sorted_topics(topics) -> list[Topic]:
    """Return topics in display order."""
    order = list(Topic)
    return sorted(topics, key=order.index)
