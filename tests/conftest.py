from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Enters at pin 7 and leaves through pin 0: keeps walking towards (+1, +1)
DIAGONAL = [(7, 0), (1, 2), (3, 4), (5, 6), (8, 9), (10, 11)]
# Enters at pin 7 and leaves through pin 6: turns straight back to the center
BACK_TO_CENTER = [(6, 7), (0, 1), (2, 3), (4, 5), (8, 9), (10, 11)]


@pytest.fixture
def diagonal():
    return list(DIAGONAL)


@pytest.fixture
def back_to_center():
    return list(BACK_TO_CENTER)
