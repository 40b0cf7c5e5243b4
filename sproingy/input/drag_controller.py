"""Routes pointer gestures to draggable objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sproingy.api.dragger import Dragger, PixelPoint, Zoomer
from sproingy.api.input_events import PRIMARY_BUTTON, PointerEvent, WheelEvent
from sproingy.plot.zoom import wheel_zoom_factor

logger = logging.getLogger(__name__)


def lpx_to_px(x: float, y: float, pixel_ratio: float = 1.0) -> PixelPoint:
    """Convert a logical pointer position to device pixels (pixel centers)."""
    ratio = float(pixel_ratio)
    return (ratio * float(x) + 0.5, ratio * float(y) + 0.5)


class DragController:
    """Owns the ordered draggers and the single active-gesture slot.

    A press is offered to the draggers in order; the first whose hit-test
    accepts it becomes :attr:`active_dragger` until the matching release.
    Each ``on_*`` method returns whether view state may have changed.
    """

    def __init__(
        self,
        draggers: Sequence[Dragger] = (),
        *,
        wheel_zoom_step: float = 1.1,
        trace: bool = False,
    ) -> None:
        self.draggers: list[Dragger] = list(draggers)
        self.active_dragger: Dragger | None = None
        self._wheel_zoom_step = float(wheel_zoom_step)
        self._trace = trace

    @property
    def gesture_active(self) -> bool:
        return self.active_dragger is not None

    def on_pointer_down(self, mouse_px: PixelPoint, button: int = PRIMARY_BUTTON) -> bool:
        if button != PRIMARY_BUTTON or self.active_dragger is not None:
            return False
        for dragger in self.draggers:
            if dragger.can_handle_press(mouse_px):
                self.active_dragger = dragger
                break
        if self.active_dragger is None:
            return False
        self.active_dragger.handle_press(mouse_px)
        if self._trace:
            logger.debug(
                "drag_press x=%.1f y=%.1f dragger=%s",
                mouse_px[0],
                mouse_px[1],
                type(self.active_dragger).__name__,
            )
        return True

    def on_pointer_move(self, mouse_px: PixelPoint) -> bool:
        if self.active_dragger is None:
            return False
        self.active_dragger.handle_drag(mouse_px)
        return True

    def on_pointer_up(self, mouse_px: PixelPoint) -> bool:
        dragger = self.active_dragger
        self.active_dragger = None
        if dragger is None:
            return False
        dragger.handle_release(mouse_px)
        if self._trace:
            logger.debug("drag_release x=%.1f y=%.1f", mouse_px[0], mouse_px[1])
        return True

    def on_wheel(self, mouse_px: PixelPoint, dy: float) -> bool:
        """Zoom the first hit zoomer by the vertical delta ``dy``; ``dx`` has no effect."""
        if self.active_dragger is not None or dy == 0.0:
            return False
        factor = wheel_zoom_factor(dy, self._wheel_zoom_step)
        for dragger in self.draggers:
            if isinstance(dragger, Zoomer) and dragger.can_handle_press(mouse_px):
                dragger.handle_zoom(mouse_px, factor)
                if self._trace:
                    logger.debug(
                        "wheel_zoom x=%.1f y=%.1f factor=%.4f", mouse_px[0], mouse_px[1], factor
                    )
                return True
        return False

    def cancel(self) -> None:
        """Drop the active gesture without a final release update."""
        self.active_dragger = None

    def dispatch(
        self,
        events: Iterable[PointerEvent | WheelEvent],
        *,
        pixel_ratio: float = 1.0,
    ) -> bool:
        """Feed logical-pixel window events through the gesture state machine."""
        changed = False
        for event in events:
            mouse_px = lpx_to_px(event.x, event.y, pixel_ratio)
            if isinstance(event, WheelEvent):
                changed = self.on_wheel(mouse_px, float(event.dy)) or changed
            elif event.event_type == "pointer_down":
                changed = self.on_pointer_down(mouse_px, int(event.button)) or changed
            elif event.event_type == "pointer_move":
                changed = self.on_pointer_move(mouse_px) or changed
            elif event.event_type == "pointer_up":
                changed = self.on_pointer_up(mouse_px) or changed
        return changed
