"""Public contracts shared by the viewer subsystems."""

from sproingy.api.dragger import Dragger, PixelPoint, Zoomer
from sproingy.api.input_events import PRIMARY_BUTTON, KeyEvent, PointerEvent, WheelEvent
from sproingy.api.render import RenderAPI, ViewSnapshot
from sproingy.api.window import (
    InputEvent,
    SurfaceHandle,
    WindowCloseEvent,
    WindowEvent,
    WindowPort,
    WindowResizeEvent,
)

__all__ = [
    "Dragger",
    "InputEvent",
    "KeyEvent",
    "PRIMARY_BUTTON",
    "PixelPoint",
    "PointerEvent",
    "RenderAPI",
    "SurfaceHandle",
    "ViewSnapshot",
    "WheelEvent",
    "WindowCloseEvent",
    "WindowEvent",
    "WindowPort",
    "WindowResizeEvent",
    "Zoomer",
]
