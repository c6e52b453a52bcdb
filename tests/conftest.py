import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (constants, particlefx, ...)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordedGradient:
    def __init__(self, x, y, radius):
        self.x = x
        self.y = y
        self.radius = radius
        self.stops = []

    def add_color_stop(self, offset, color):
        self.stops.append((offset, color))


class RecordingCanvas:
    """Stand-in for particlefx.canvas.Canvas that records draw calls."""

    def __init__(self, width=500, height=500):
        self.width = width
        self.height = height
        self.global_alpha = 1.0
        self.calls = []

    def clear_rect(self, x, y, w, h):
        self.calls.append(("clear_rect", x, y, w, h))

    def create_radial_gradient(self, x, y, radius):
        return RecordedGradient(x, y, radius)

    def fill_circle(self, x, y, radius, gradient):
        self.calls.append(("fill_circle", x, y, radius, self.global_alpha, gradient))

    def present(self):
        self.calls.append(("present",))

    def fills(self):
        return [c for c in self.calls if c[0] == "fill_circle"]


class FixedRng:
    """rng whose random() always returns the same value."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def still_rng():
    # 0.5 * scatter - scatter / 2 == 0 -> no jitter
    return FixedRng(0.5)


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    import pygame

    pygame.init()
    yield
    pygame.quit()
