# -*- coding: utf-8 -*-
"""Person tag allocation."""

from __future__ import annotations

from peoplekeeper.models.people_model import PeopleModel


class TagAllocator:
    """Hand out strictly increasing person tags for one app session.

    Tags are never reused: deleting a person, or undoing the addition of
    one, does not release its tag.
    """

    def __init__(self, last_tag: int = 0) -> None:
        if last_tag < 0:
            raise ValueError(f"last_tag must be >= 0, got {last_tag}")
        self._last_tag = int(last_tag)

    @classmethod
    def for_model(cls, model: PeopleModel) -> TagAllocator:
        return cls(last_tag=model.max_tag())

    @property
    def last_tag(self) -> int:
        return self._last_tag

    def next_tag(self) -> int:
        self._last_tag += 1
        return self._last_tag
