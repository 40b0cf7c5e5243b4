"""Rendercanvas/GLFW-backed window layer implementation."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from sproingy.api.input_events import PRIMARY_BUTTON, KeyEvent, PointerEvent, WheelEvent
from sproingy.api.window import (
    InputEvent,
    SurfaceHandle,
    WindowCloseEvent,
    WindowEvent,
    WindowPort,
    WindowResizeEvent,
)
from sproingy.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable

_LOG = logging.getLogger(__name__)

_POINTER_ALIASES: dict[str, tuple[str, ...]] = {
    "pointer_down": ("pointer_down", "mouse_down"),
    "pointer_move": ("pointer_move", "mouse_move"),
    "pointer_up": ("pointer_up", "mouse_up"),
}


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas backend loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    """Stop rendercanvas backend loop when supported."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()


@dataclass(slots=True)
class RenderCanvasWindow(WindowPort):
    """Window-layer adapter over an existing rendercanvas canvas."""

    canvas: Any
    backend: str = "rendercanvas.glfw"
    trace_events: bool = False
    _events: deque[WindowEvent] = field(default_factory=deque)
    _input_events: deque[InputEvent] = field(default_factory=deque)
    _rc_auto: Any | None = field(default=None, repr=False)
    _pixel_ratio: float = field(default=1.0, repr=False)

    def __post_init__(self) -> None:
        if self._rc_auto is None:
            try:
                import rendercanvas.auto as rc_auto
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(_LOG, "rendercanvas_auto_unavailable")
                rc_auto = None
            self._rc_auto = rc_auto
        self._bind_window_events()

    def create_surface(self) -> SurfaceHandle:
        return SurfaceHandle(surface_id=f"{id(self.canvas)}", backend=self.backend, provider=self.canvas)

    def poll_events(self) -> tuple[WindowEvent, ...]:
        drained = tuple(self._events)
        self._events.clear()
        return drained

    def poll_input_events(self) -> tuple[InputEvent, ...]:
        drained = tuple(self._input_events)
        self._input_events.clear()
        return drained

    def pixel_ratio(self) -> float:
        getter = getattr(self.canvas, "get_pixel_ratio", None)
        if callable(getter):
            ratio = getter()
            if isinstance(ratio, (int, float)) and ratio > 0:
                return float(ratio)
        return self._pixel_ratio

    def physical_size(self) -> tuple[int, int]:
        """Return the surface size in device pixels."""
        getter = getattr(self.canvas, "get_physical_size", None)
        if callable(getter):
            size = getter()
            if isinstance(size, (tuple, list)) and len(size) >= 2:
                return (max(1, int(size[0])), max(1, int(size[1])))
        getter = getattr(self.canvas, "get_logical_size", None)
        if callable(getter):
            size = getter()
            if isinstance(size, (tuple, list)) and len(size) >= 2:
                ratio = self.pixel_ratio()
                return (max(1, int(size[0] * ratio)), max(1, int(size[1] * ratio)))
        raise RuntimeError("canvas does not report its size")

    def set_draw_handler(self, handler: Callable[[], None]) -> None:
        request_draw = getattr(self.canvas, "request_draw", None)
        if callable(request_draw):
            request_draw(handler)

    def request_draw(self) -> None:
        request_draw = getattr(self.canvas, "request_draw", None)
        if callable(request_draw):
            try:
                request_draw()
            except TypeError:
                return

    def close(self) -> None:
        self.stop_loop()
        closer = getattr(self.canvas, "close", None)
        if callable(closer):
            closer()

    def run_loop(self) -> None:
        if self._rc_auto is None:
            return
        run_backend_loop(self._rc_auto)

    def stop_loop(self) -> None:
        if self._rc_auto is None:
            return
        stop_backend_loop(self._rc_auto)

    def _bind_window_events(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            return
        self._try_add_event_handler(add_handler, self._on_resize, "resize")
        self._try_add_event_handler(add_handler, self._on_close, "close")
        self._try_add_event_handler(add_handler, self._on_pointer_down, "pointer_down")
        self._try_add_event_handler(add_handler, self._on_pointer_move, "pointer_move")
        self._try_add_event_handler(add_handler, self._on_pointer_up, "pointer_up")
        self._try_add_event_handler(add_handler, self._on_pointer_down, "mouse_down")
        self._try_add_event_handler(add_handler, self._on_pointer_move, "mouse_move")
        self._try_add_event_handler(add_handler, self._on_pointer_up, "mouse_up")
        self._try_add_event_handler(add_handler, self._on_key_down, "key_down")
        self._try_add_event_handler(add_handler, self._on_key_up, "key_up")
        self._try_add_event_handler(add_handler, self._on_char, "char")
        self._try_add_event_handler(add_handler, self._on_wheel, "wheel")
        if self.trace_events:
            self._try_add_event_handler(add_handler, self._on_any_event, "*")

    def _on_resize(self, event: object) -> None:
        size = _event_value(event, "size")
        lw: object | None = None
        lh: object | None = None
        if isinstance(size, (tuple, list)) and len(size) >= 2:
            lw, lh = size[0], size[1]
        else:
            lw = _event_value(event, "width")
            lh = _event_value(event, "height")
            if not isinstance(lw, (int, float)) or not isinstance(lh, (int, float)):
                logical_size = _event_value(event, "logical_size")
                if isinstance(logical_size, (tuple, list)) and len(logical_size) >= 2:
                    lw, lh = logical_size[0], logical_size[1]
                else:
                    return
        if not isinstance(lw, (int, float)) or not isinstance(lh, (int, float)):
            return
        ratio_raw = _event_value(event, "pixel_ratio", 1.0)
        dpi_scale = float(ratio_raw) if isinstance(ratio_raw, (int, float)) and ratio_raw > 0 else 1.0
        self._pixel_ratio = dpi_scale
        self._events.append(
            WindowResizeEvent(
                logical_width=float(lw),
                logical_height=float(lh),
                physical_width=max(1, int(float(lw) * dpi_scale)),
                physical_height=max(1, int(float(lh) * dpi_scale)),
                dpi_scale=dpi_scale,
            )
        )
        self.request_draw()

    def _on_close(self, event: object) -> None:
        _ = event
        self._events.append(WindowCloseEvent())
        self.request_draw()

    def _on_pointer_down(self, event: object) -> None:
        self._queue_input(_parse_pointer_event(event, expected_type="pointer_down"))

    def _on_pointer_move(self, event: object) -> None:
        self._queue_input(_parse_pointer_event(event, expected_type="pointer_move"))

    def _on_pointer_up(self, event: object) -> None:
        self._queue_input(_parse_pointer_event(event, expected_type="pointer_up"))

    def _on_key_down(self, event: object) -> None:
        self._queue_input(_parse_key_event(event, expected_type="key_down"))

    def _on_key_up(self, event: object) -> None:
        self._queue_input(_parse_key_event(event, expected_type="key_up"))

    def _on_char(self, event: object) -> None:
        self._queue_input(_parse_char_event(event))

    def _on_wheel(self, event: object) -> None:
        self._queue_input(_parse_wheel_event(event))

    def _queue_input(self, parsed: InputEvent | None) -> None:
        if parsed is None:
            return
        self._input_events.append(parsed)
        self.request_draw()

    def _try_add_event_handler(self, add_handler: Any, handler: Any, event_type: str) -> None:
        try:
            add_handler(handler, event_type)
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(_LOG, "window_event_type_unsupported type=%s", event_type)

    def _on_any_event(self, event: object) -> None:
        event_type = str(_event_value(event, "event_type", ""))
        if event_type in {"before_draw", "animate"}:
            return
        _LOG.debug("window_event type=%s payload=%r", event_type, event)


def create_rendercanvas_window(
    canvas: Any | None = None,
    *,
    width: int = 480,
    height: int = 360,
    title: str = "Sproingy",
    update_mode: str = "ondemand",
    max_fps: float = 240.0,
    vsync: bool = True,
    trace_events: bool = False,
) -> RenderCanvasWindow:
    """Create window adapter over an existing or newly created rendercanvas canvas."""
    if canvas is not None:
        return RenderCanvasWindow(canvas=canvas, trace_events=trace_events)
    try:
        import rendercanvas.auto as rc_auto
    except RECOVERABLE_RUNTIME_ERRORS as exc:
        raise RuntimeError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw."
        ) from exc
    canvas_cls = getattr(rc_auto, "RenderCanvas", None)
    if canvas_cls is None:
        raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
    try:
        canvas = canvas_cls(
            size=(int(width), int(height)),
            title=title,
            update_mode=update_mode,
            max_fps=float(max_fps),
            vsync=bool(vsync),
        )
    except TypeError:
        canvas = canvas_cls(size=(int(width), int(height)), title=title)
    _LOG.info("window_created backend=%s size=%dx%d", type(canvas).__name__, width, height)
    return RenderCanvasWindow(canvas=canvas, trace_events=trace_events, _rc_auto=rc_auto)


def _parse_pointer_event(event: object, *, expected_type: str) -> PointerEvent | None:
    raw_type = str(_event_value(event, "event_type", "")).strip().lower()
    if raw_type not in _POINTER_ALIASES.get(expected_type, (expected_type,)):
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    button = _event_value(event, "button", 0)
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        return None
    if not isinstance(button, int) or isinstance(button, bool):
        button = 0
    if expected_type in {"pointer_down", "pointer_up"} and int(button) == 0:
        button = PRIMARY_BUTTON
    return PointerEvent(expected_type, float(x), float(y), int(button))  # type: ignore[arg-type]


def _parse_key_event(event: object, *, expected_type: str) -> KeyEvent | None:
    if str(_event_value(event, "event_type", "")) != expected_type:
        return None
    key = _event_value(event, "key")
    if not isinstance(key, str):
        return None
    return KeyEvent(expected_type, key)  # type: ignore[arg-type]


def _parse_char_event(event: object) -> KeyEvent | None:
    if str(_event_value(event, "event_type", "")) != "char":
        return None
    value = _event_value(event, "data")
    if not isinstance(value, str):
        return None
    return KeyEvent("char", value)


def _parse_wheel_event(event: object) -> WheelEvent | None:
    if str(_event_value(event, "event_type", "")) != "wheel":
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    dy = _event_value(event, "dy")
    if (
        not isinstance(x, (int, float))
        or not isinstance(y, (int, float))
        or not isinstance(dy, (int, float))
    ):
        return None
    return WheelEvent(float(x), float(y), float(dy))


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)
