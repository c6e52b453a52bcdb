import logging
import random

from main import apply_shared_controls, publish_state, setup_emitters
from particlefx.world import World
from utils import setup_logging


def make_world(canvas):
    return setup_emitters(World(canvas, rng=random.Random(0)))


def test_setup_emitters_registers_stock_scene(canvas):
    world = make_world(canvas)
    assert len(world.particle_systems) == 4
    assert world.controllable is world.particle_systems[0]


def test_publish_state(canvas):
    world = make_world(canvas)
    world.tick()
    shared = {}
    publish_state(world, shared)
    assert shared == {
        'particle_size': 50,
        'scatter': 1.5,
        'paused': False,
        'frame': 1,
        'particle_count': 4,
    }


def test_apply_shared_controls_applies_requests_with_clamps(canvas):
    world = make_world(canvas)
    shared = {'controls_dirty': True, 'particle_size_request': 0, 'scatter_request': 3.25}
    apply_shared_controls(world, shared)
    assert world.controllable.particle_size == 1
    assert world.controllable.scatter == 3.25
    assert shared['controls_dirty'] is False
    assert shared['particle_size_request'] is None
    assert shared['particle_size'] == 1
    assert shared['scatter'] == 3.25


def test_apply_shared_controls_ignores_clean_requests(canvas):
    world = make_world(canvas)
    shared = {'controls_dirty': False, 'particle_size_request': 10}
    apply_shared_controls(world, shared)
    assert world.controllable.particle_size == 50


def test_apply_shared_controls_pause_and_exit(canvas):
    world = make_world(canvas)
    world.running = True
    shared = {'toggle_pause': True}
    apply_shared_controls(world, shared)
    assert world.paused
    assert shared['toggle_pause'] is False
    assert shared['paused'] is True

    shared['__exit__'] = True
    apply_shared_controls(world, shared)
    assert not world.running


def test_setup_logging_replaces_handlers(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "particlefx.log"
    try:
        setup_logging("debug", str(log_file))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("particlefx.world").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

        setup_logging("info")
        assert len(root.handlers) == 1
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
