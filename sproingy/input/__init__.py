"""Input capture and gesture dispatch."""

from sproingy.input.drag_controller import DragController, lpx_to_px
from sproingy.input.input_controller import InputController, InputFrame

__all__ = ["DragController", "InputController", "InputFrame", "lpx_to_px"]
