"""Per-frame glue between the window, input dispatch and renderer."""

from __future__ import annotations

import logging

from sproingy.api.render import RenderAPI
from sproingy.api.window import WindowCloseEvent, WindowPort, WindowResizeEvent
from sproingy.input.drag_controller import DragController
from sproingy.input.input_controller import InputController, InputFrame
from sproingy.runtime.session import PlotSession

QUIT_ACTION = "quit"

logger = logging.getLogger(__name__)


class PlotWindowFrontend:
    """Frontend adapter over window/event loop and renderer APIs."""

    def __init__(
        self,
        renderer: RenderAPI,
        window: WindowPort,
        input_controller: InputController,
        drag_controller: DragController,
        session: PlotSession,
    ) -> None:
        self._renderer = renderer
        self._window = window
        self._input = input_controller
        self._drag = drag_controller
        self._session = session
        self._frame_index = 0
        self._closed = False

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def is_closed(self) -> bool:
        return self._closed

    def run(self) -> None:
        self._window.set_draw_handler(self.draw_frame)
        self._window.request_draw()
        self._window.run_loop()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._drag.cancel()
        logger.info("viewer_closing frames=%d", self._frame_index)
        self._renderer.close()
        self._window.close()

    def draw_frame(self) -> None:
        if self._closed:
            return
        self._process_window_events()
        if self._closed:
            return
        frame = self._build_input_frame()
        changed = self._dispatch_input_frame(frame)
        if self._closed:
            return
        self._renderer.render(
            self._session.view_snapshot(pixel_ratio=self._window.pixel_ratio()),
            self._session.layers,
        )
        self._frame_index += 1
        if changed:
            self._window.request_draw()

    def _process_window_events(self) -> None:
        for event in self._window.poll_events():
            if isinstance(event, WindowResizeEvent):
                self._session.resize(event.physical_width, event.physical_height)
                self._renderer.reconfigure(event)
                logger.debug(
                    "window_resize logical=%.0fx%.0f physical=%dx%d dpi=%.2f",
                    event.logical_width,
                    event.logical_height,
                    event.physical_width,
                    event.physical_height,
                    event.dpi_scale,
                )
                continue
            if isinstance(event, WindowCloseEvent):
                self.close()
                return

    def _build_input_frame(self) -> InputFrame:
        window_raw_input = self._window.poll_input_events()
        if window_raw_input:
            self._input.consume_window_input_events(window_raw_input)
        return self._input.build_input_frame(frame_index=self._frame_index)

    def _dispatch_input_frame(self, frame: InputFrame) -> bool:
        if QUIT_ACTION in frame.just_started_actions:
            self.close()
            return False
        return self._drag.dispatch(
            frame.pointer_and_wheel_events(),
            pixel_ratio=self._window.pixel_ratio(),
        )
