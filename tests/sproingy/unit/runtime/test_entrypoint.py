from __future__ import annotations

import numpy as np

from sproingy.api.input_events import KeyEvent
from sproingy.runtime import entrypoint
from sproingy.runtime.config import load_viewer_config
from sproingy.runtime.window_frontend import QUIT_ACTION


class _FakeWindow:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def create_surface(self) -> str:
        return "surface"

    def physical_size(self) -> tuple[int, int]:
        return (960, 720)

    def set_draw_handler(self, handler) -> None:
        self.calls.append("set_draw_handler")

    def request_draw(self) -> None:
        self.calls.append("request_draw")

    def run_loop(self) -> None:
        self.calls.append("run_loop")


def test_build_session_uses_dots_and_axis_settings() -> None:
    config = load_viewer_config(
        env={
            "SPROINGY_DOTS_COUNT": "12",
            "SPROINGY_DOTS_SEED": "3",
            "SPROINGY_DOTS_SIZE_LPX": "6",
            "SPROINGY_AXIS_ZOOM_DIVISOR": "20",
        }
    )

    session = entrypoint.build_session(config, 480, 360)

    (layer,) = session.layers
    assert len(layer) == 12
    assert layer.size_lpx == 6.0
    assert session.axes.x.scale == 24.0
    np.testing.assert_array_equal(layer.coords, entrypoint.demo_dots(12, 3))


def test_build_input_binds_escape_to_quit() -> None:
    config = load_viewer_config(env={})
    session = entrypoint.build_session(config, 480, 360)

    input_controller, drag_controller = entrypoint.build_input(config, session)

    assert drag_controller.draggers == [session.axes]
    input_controller.consume_window_input_events([KeyEvent("key_down", "escape")])
    frame = input_controller.build_input_frame(frame_index=0)
    assert frame.just_started_actions == frozenset({QUIT_ACTION})


def test_run_wires_window_renderer_and_session(monkeypatch) -> None:
    window = _FakeWindow()
    window_kwargs: dict[str, object] = {}
    renderer_args: list[tuple[object, object]] = []

    def fake_create_window(**kwargs):
        window_kwargs.update(kwargs)
        return window

    class _Renderer:
        def __init__(self, surface, *, clear_rgba) -> None:
            renderer_args.append((surface, clear_rgba))

    monkeypatch.setattr(entrypoint, "create_rendercanvas_window", fake_create_window)
    monkeypatch.setattr(entrypoint, "WgpuRenderer", _Renderer)
    config = load_viewer_config(env={"SPROINGY_WINDOW_TITLE": "Dots", "SPROINGY_DOTS_COUNT": "5"})

    entrypoint.run(config)

    assert window_kwargs["title"] == "Dots"
    assert (window_kwargs["width"], window_kwargs["height"]) == (480, 360)
    assert renderer_args == [("surface", config.render.clear_rgba)]
    assert window.calls == ["set_draw_handler", "request_draw", "run_loop"]
