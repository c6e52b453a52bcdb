import logging

import pygame

import constants
from .config import EmitterConfig, WorldConfig
from .emitter import ParticleSystem

logger = logging.getLogger(__name__)


class ControllableConflictError(ValueError):
    """Raised when a second controllable emitter is added to a world."""


class World:
    def __init__(self, canvas, config=None, rng=None):
        self.canvas = canvas
        # clear area follows the wrapped surface unless configured otherwise
        self.config = config or WorldConfig(width=canvas.width, height=canvas.height)
        self.rng = rng

        self.particle_systems = []
        self.controllable = None

        self.frame = 0
        self.paused = False
        self.running = False

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height

    @property
    def particle_count(self):
        return sum(len(s.particles) for s in self.particle_systems)

    def add_particle_system(self, config=None, **params):
        """
        Create an emitter bound to this world's canvas and append it.

        Accepts an EmitterConfig or the same fields as keyword arguments.
        Returns the new ParticleSystem.
        """
        if config is None:
            config = EmitterConfig(**params)
        if config.is_controllable and self.controllable is not None:
            raise ControllableConflictError(
                f"world already has a controllable emitter at {self.controllable.coords!r}")

        system = ParticleSystem.from_config(self.canvas, config, rng=self.rng)
        self.particle_systems.append(system)
        if system.is_controllable:
            self.controllable = system
        logger.info("Added emitter %d: %r", len(self.particle_systems), system)
        return system

    # --- Run loop ---
    def start(self, max_frames=None, on_frame=None):
        """
        Run the animation loop until stop() is called, a quit event arrives,
        or `max_frames` frames have been produced.
        """
        clock = pygame.time.Clock()
        self.running = True
        logger.info("Starting run loop at %d fps with %d emitters", self.config.fps, len(self.particle_systems))
        frames = 0
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break

            self.tick()
            if on_frame is not None:
                on_frame(self)
            self.canvas.present()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.running = False
            else:
                clock.tick(self.config.fps)
        logger.info("Run loop stopped after %d frames", self.frame)

    def stop(self):
        self.running = False

    def tick(self):
        if not self.paused:
            self.update_world()
        self.draw_world()
        self.frame += 1

    def update_world(self):
        for system in self.particle_systems:
            system.update()

    def draw_world(self):
        self.canvas.clear_rect(0, 0, self.width, self.height)
        for system in self.particle_systems:
            system.draw()

    # --- Input ---
    def handle_event(self, event, mods=None):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.MOUSEMOTION:
            mx, my = event.pos
            self.on_pointer_move(mx, my)
        elif event.type == pygame.MOUSEWHEEL:
            if mods is None:
                mods = pygame.key.get_mods()
            self.on_wheel(event.y * constants.WHEEL_DELTA_PER_NOTCH,
                          modifier_a=bool(mods & pygame.KMOD_SHIFT),
                          modifier_b=bool(mods & pygame.KMOD_ALT))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.paused = not self.paused
            elif event.key == pygame.K_ESCAPE:
                self.stop()

    def on_pointer_move(self, x, y):
        system = self.controllable
        if system is None:
            logger.debug("Pointer move to (%s, %s) ignored: no controllable emitter", x, y)
            return
        system.move_to(x, y)

    def on_wheel(self, delta, modifier_a=False, modifier_b=False):
        """
        Tune the controllable emitter with a wheel delta (+120 per notch up).

        modifier_a changes the spawn radius by delta / 100 (min 1, integer),
        modifier_b changes scatter by delta / 1000 (min 0). Both may apply.
        """
        system = self.controllable
        if system is None:
            logger.debug("Wheel delta %s ignored: no controllable emitter", delta)
            return
        if modifier_a:
            system.particle_size = max(constants.MIN_PARTICLE_SIZE,
                                       system.particle_size - delta / constants.PARTICLE_SIZE_WHEEL_SCALE)
        if modifier_b:
            system.scatter = max(constants.MIN_SCATTER,
                                 system.scatter - delta / constants.SCATTER_WHEEL_SCALE)
        if modifier_a or modifier_b:
            logger.debug("Wheel %s -> size=%d scatter=%.3f", delta, system.particle_size, system.scatter)
