"""Общие фикстуры тестов."""
from __future__ import annotations

import pytest

from identicon.controllers.identicon_controller import IdenticonController


class SequenceRandom:
    """Детерминированный источник: отдаёт заданные значения по кругу и считает обращения."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def controller():
    return IdenticonController()


@pytest.fixture
def sequence_random():
    return SequenceRandom
