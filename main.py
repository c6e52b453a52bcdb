import logging

import pygame
from constants import ENABLE_CONTROL_PANEL, FPS, HEIGHT, LOG_FILE, LOG_LEVEL, WIDTH
from particlefx.canvas import Canvas
from particlefx.config import WorldConfig, default_emitters
from particlefx.world import World
from utils import setup_logging

from multiprocessing import Process, Manager
import gui_controller as gui_ctrl

logger = logging.getLogger(__name__)


def setup_emitters(world, emitters=None):
    """Register the stock emitters (or `emitters`) with the world."""
    for config in emitters if emitters is not None else default_emitters():
        world.add_particle_system(config)
    return world


def publish_state(world, shared):
    system = world.controllable
    if system is not None:
        shared['particle_size'] = system.particle_size
        shared['scatter'] = system.scatter
    shared['paused'] = world.paused
    shared['frame'] = world.frame
    shared['particle_count'] = world.particle_count


def apply_shared_controls(world, shared):
    """
    Apply requests written by the control panel, then publish the live
    values back. Called once per frame, between ticks.
    """
    system = world.controllable
    if shared.get('controls_dirty', False):
        if system is not None:
            if shared.get('particle_size_request') is not None:
                system.particle_size = shared['particle_size_request']
            if shared.get('scatter_request') is not None:
                system.scatter = shared['scatter_request']
        shared['particle_size_request'] = None
        shared['scatter_request'] = None
        shared['controls_dirty'] = False
    if shared.get('toggle_pause', False):
        world.paused = not world.paused
        shared['toggle_pause'] = False
    if shared.get('__exit__', False):
        world.stop()
    publish_state(world, shared)


def main():
    setup_logging(LOG_LEVEL, LOG_FILE)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Particle Emitters")

    world = World(Canvas(screen), WorldConfig(width=WIDTH, height=HEIGHT, fps=FPS))
    setup_emitters(world)

    on_frame = None
    _gui_proc = None
    _shared = None
    if ENABLE_CONTROL_PANEL:
        # spawn DearPyGui controller process (protected inside main)
        _mgr = Manager()
        _shared = _mgr.dict()
        _shared['controls_dirty'] = False
        _shared['particle_size_request'] = None
        _shared['scatter_request'] = None
        _shared['toggle_pause'] = False
        _shared['__exit__'] = False
        publish_state(world, _shared)
        _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
        _gui_proc.start()
        on_frame = lambda w: apply_shared_controls(w, _shared)

    try:
        world.start(on_frame=on_frame)
    finally:
        # cleanup: signal GUI to exit and join
        if _gui_proc is not None:
            try:
                _shared['__exit__'] = True
            except (EOFError, OSError, BrokenPipeError):
                logger.warning("Control panel already gone")
            _gui_proc.join(timeout=1.0)
        pygame.quit()


if __name__ == "__main__":
    main()
