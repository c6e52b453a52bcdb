from functools import lru_cache

import numpy as np
import pygame

import constants


class RadialGradient:
    def __init__(self, x, y, radius):
        self.x = x
        self.y = y
        self.radius = radius
        self.stops = []

    def add_color_stop(self, offset, color):
        """color is (r, g, b, a) with a in [0, 1]"""
        r, g, b, a = color
        self.stops.append((float(offset), (int(r), int(g), int(b), float(a))))
        self.stops.sort(key=lambda s: s[0])

    def key(self):
        return tuple(self.stops)


def render_radial_gradient(radius, stops):
    """
    Rasterize a radial gradient into a (2r, 2r) RGBA surface.

    Each channel is linearly interpolated between the color stops over the
    distance from the center normalized to [0, 1]; pixels outside the
    circle are fully transparent.
    """
    size = max(1, int(radius) * 2)
    ys, xs = np.mgrid[0:size, 0:size]
    dist = np.hypot(xs + 0.5 - size / 2.0, ys + 0.5 - size / 2.0) / float(radius)

    offsets = [s[0] for s in stops]
    rgba = np.zeros((size, size, 4), dtype=np.float64)
    for channel in range(4):
        values = [s[1][channel] for s in stops]
        if channel == 3:
            values = [v * 255.0 for v in values]
        rgba[..., channel] = np.interp(dist, offsets, values)
    rgba[dist > 1.0, 3] = 0.0

    pixels = np.ascontiguousarray(np.clip(rgba, 0, 255).astype(np.uint8))
    return pygame.image.frombuffer(pixels.tobytes(), (size, size), "RGBA").copy()


@lru_cache(maxsize=constants.SPRITE_CACHE_SIZE)
def cached_sprite(radius, stops):
    """Sprites keyed by (radius, stops); least recently used radii are evicted."""
    return render_radial_gradient(radius, stops)


class Canvas:
    def __init__(self, surface, background=constants.BACKGROUND_COLOR):
        self.surface = surface
        self.background = background
        self._global_alpha = 1.0

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    @property
    def global_alpha(self):
        return self._global_alpha

    @global_alpha.setter
    def global_alpha(self, value):
        self._global_alpha = min(1.0, max(0.0, float(value)))

    def clear_rect(self, x, y, w, h):
        self.surface.fill(self.background, pygame.Rect(int(x), int(y), int(w), int(h)))

    def create_radial_gradient(self, x, y, radius):
        return RadialGradient(x, y, radius)

    def fill_circle(self, x, y, radius, gradient):
        if radius <= 0 or not gradient.stops:
            return
        sprite = cached_sprite(int(radius), gradient.key())
        sprite.set_alpha(int(round(self._global_alpha * 255)))
        self.surface.blit(sprite, (int(round(x - sprite.get_width() / 2)), int(round(y - sprite.get_height() / 2))))

    def present(self):
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
