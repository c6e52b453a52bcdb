import constants
from .Particle import Particle
from .Vec2 import Vec2, js_round


class ParticleSystem:
    def __init__(self, canvas, coords, gravity, max_amount, creation_amount,
                 particle_size, scatter, is_controllable=False, rng=None):
        self.canvas = canvas
        self.coords = coords.copy() if isinstance(coords, Vec2) else Vec2(coords[0], coords[1])
        self.gravity = gravity
        self.max_amount = int(max_amount)
        self.creation_amount = int(creation_amount)
        self.is_controllable = bool(is_controllable)
        self.rng = rng
        self.particles = []

        # Use setters to apply the clamps
        self._particle_size = constants.MIN_PARTICLE_SIZE
        self._scatter = constants.MIN_SCATTER
        self.particle_size = particle_size
        self.scatter = scatter

    @classmethod
    def from_config(cls, canvas, config, rng=None):
        return cls(
            canvas,
            coords=config.coords,
            gravity=config.gravity,
            max_amount=config.max_amount,
            creation_amount=config.creation_amount,
            particle_size=config.particle_size,
            scatter=config.scatter,
            is_controllable=config.is_controllable,
            rng=rng,
        )

    @property
    def particle_size(self):
        return self._particle_size

    @particle_size.setter
    def particle_size(self, value):
        self._particle_size = max(constants.MIN_PARTICLE_SIZE, int(js_round(value)))

    @property
    def scatter(self):
        return self._scatter

    @scatter.setter
    def scatter(self, value):
        self._scatter = max(constants.MIN_SCATTER, float(value))

    def update(self):
        self.particles = [p for p in self.particles if p.size > 0]

        # all or nothing: a batch that would overflow the cap is skipped
        if len(self.particles) + self.creation_amount <= self.max_amount:
            for _ in range(self.creation_amount):
                self.particles.append(self._spawn())

        for p in self.particles:
            p.update(self.rng)

    def _spawn(self):
        return Particle(
            self.canvas,
            pos=self.coords.copy(),
            gravity=self.gravity,
            particle_size=self.particle_size,
            scatter=self.scatter,
        )

    def draw(self):
        for p in self.particles:
            p.draw()

    def move_to(self, x, y):
        self.coords = Vec2(x, y)

    def __repr__(self):
        return (f"ParticleSystem(coords={self.coords!r}, gravity={self.gravity!r}, "
                f"particles={len(self.particles)}/{self.max_amount}, size={self.particle_size}, "
                f"scatter={self.scatter:.3f}, controllable={self.is_controllable})")
