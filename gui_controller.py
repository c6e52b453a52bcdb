import time
import dearpygui.dearpygui as dpg

def _make_callbacks(shared):
    def size_cb(sender, app_data, user_data):
        shared['particle_size_request'] = int(app_data)
        shared['controls_dirty'] = True
    def scatter_cb(sender, app_data, user_data):
        try:
            shared['scatter_request'] = float(app_data)
            shared['controls_dirty'] = True
        except (TypeError, ValueError):
            pass
    def pause_cb():
        shared['toggle_pause'] = True
    def exit_cb():
        shared['__exit__'] = True
    return size_cb, scatter_cb, pause_cb, exit_cb

def _status_line(shared):
    state = "paused" if shared.get('paused', False) else "running"
    return f"frame={shared.get('frame', 0)}, particles={shared.get('particle_count', 0)}, {state}"

def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes requests into `shared`, reads
    the live emitter values the main process publishes back.
    """
    dpg.create_context()

    size_cb, scatter_cb, pause_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Emitter Controls", tag="controls_window", width=380, height=220):
        dpg.add_text("Controllable emitter")
        dpg.add_spacer()
        dpg.add_text("Particle size (shift + wheel)")
        dpg.add_slider_int(label="Size", tag="size_slider", default_value=int(shared.get('particle_size', 50)),
                           min_value=1, max_value=200, callback=size_cb)
        dpg.add_text("Scatter (alt + wheel)")
        dpg.add_slider_float(label="Scatter", tag="scatter_slider", default_value=float(shared.get('scatter', 1.5)),
                             min_value=0.0, max_value=10.0, callback=scatter_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Emitter Controls', width=400, height=260)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            dpg.set_value("status_text", _status_line(shared))
            # follow wheel edits made in the main window
            if not shared.get('controls_dirty', False):
                dpg.set_value("size_slider", int(shared.get('particle_size', 50)))
                dpg.set_value("scatter_slider", float(shared.get('scatter', 1.5)))
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
