from gui_controller import _make_callbacks, _status_line


def test_callbacks_write_requests():
    shared = {}
    size_cb, scatter_cb, pause_cb, exit_cb = _make_callbacks(shared)
    size_cb("size_slider", 42, None)
    assert shared['particle_size_request'] == 42
    assert shared['controls_dirty'] is True

    scatter_cb("scatter_slider", 2.5, None)
    assert shared['scatter_request'] == 2.5

    pause_cb()
    exit_cb()
    assert shared['toggle_pause'] is True
    assert shared['__exit__'] is True


def test_scatter_callback_ignores_garbage():
    shared = {}
    _, scatter_cb, _, _ = _make_callbacks(shared)
    scatter_cb("scatter_slider", "abc", None)
    assert 'scatter_request' not in shared


def test_status_line():
    assert _status_line({'frame': 12, 'particle_count': 200, 'paused': True}) == "frame=12, particles=200, paused"
    assert _status_line({}) == "frame=0, particles=0, running"
