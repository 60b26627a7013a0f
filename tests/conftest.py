from __future__ import annotations

import pytest

from tetrus.game import GameGrid


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(10, 20)
