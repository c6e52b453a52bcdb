import math
import random


def js_round(value):
    """Round half toward positive infinity (0.5 -> 1, -0.5 -> 0)."""
    return math.floor(value + 0.5)


class Vec2:
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def add(self, other):
        # returns a new vector; callers accumulate by reassignment
        return self + other

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def length(self):
        return math.hypot(self.x, self.y)

    def copy(self):
        return Vec2(self.x, self.y)

    @staticmethod
    def get_random(gravity, scatter, rng=None):
        """
        Lateral jitter for a particle pushed along `gravity`.

        Samples r = round(u * scatter - scatter / 2) with u uniform in [0, 1)
        and returns gravity rotated by 90 degrees and scaled by r, so the
        noise is always perpendicular to the drift direction.
        """
        rng = rng or random
        r = js_round(rng.random() * scatter - scatter / 2)
        return Vec2(-gravity.y * r, gravity.x * r)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x:.2f}, {self.y:.2f})"
