import constants
from .Vec2 import Vec2


class Particle:
    def __init__(self, canvas, pos, gravity, particle_size, scatter):
        self.canvas = canvas
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        # shared with the owning system; Vec2 is never mutated in place
        self.gravity = gravity
        self.initial_size = int(particle_size)
        self.size = int(particle_size)
        self.scatter = float(scatter)

    @property
    def alive(self):
        return self.size > 0

    def update(self, rng=None):
        if self.size <= 0:
            return
        self.size -= 1
        self.pos = self.pos + self.gravity + Vec2.get_random(self.gravity, self.scatter, rng)

    def draw(self):
        if self.size <= 0:
            return
        x, y = self.pos.x, self.pos.y
        gradient = self.canvas.create_radial_gradient(x, y, self.size)
        for offset, color in constants.PARTICLE_GRADIENT_STOPS:
            gradient.add_color_stop(offset, color)

        self.canvas.global_alpha = self.size / self.initial_size
        self.canvas.fill_circle(x, y, self.size, gradient)

    def __repr__(self):
        return f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), size={self.size}/{self.initial_size}, scatter={self.scatter})"

    def __str__(self):
        return self.__repr__()
