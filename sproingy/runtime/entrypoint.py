"""Composition of window, renderer, input and session for one viewer run."""

from __future__ import annotations

import logging

from sproingy.input.drag_controller import DragController
from sproingy.input.input_controller import InputController
from sproingy.rendering.dots import DotsLayer, demo_dots
from sproingy.rendering.wgpu_renderer import WgpuRenderer
from sproingy.runtime.config import ViewerConfig, get_viewer_config
from sproingy.runtime.session import PlotSession
from sproingy.runtime.window_frontend import QUIT_ACTION, PlotWindowFrontend
from sproingy.window.rendercanvas_glfw import create_rendercanvas_window

logger = logging.getLogger(__name__)


def build_session(config: ViewerConfig, width_px: int, height_px: int) -> PlotSession:
    """Create the session with the demo dots layer sized to the surface."""
    dots = DotsLayer(
        coords=demo_dots(config.dots.count, config.dots.seed),
        size_lpx=config.dots.size_lpx,
        rgba=config.dots.rgba,
    )
    return PlotSession.create(
        width_px,
        height_px,
        layers=[dots],
        zoom_divisor=config.axis.zoom_divisor,
        tie_frac=config.axis.tie_frac,
    )


def build_input(config: ViewerConfig, session: PlotSession) -> tuple[InputController, DragController]:
    input_controller = InputController(trace=config.input.trace_enabled)
    input_controller.bind_action_key_down("escape", QUIT_ACTION)
    drag_controller = DragController(
        session.draggers,
        wheel_zoom_step=config.axis.wheel_zoom_step,
        trace=config.input.trace_enabled,
    )
    return input_controller, drag_controller


def run(config: ViewerConfig | None = None) -> None:
    """Open the viewer window and block until it closes."""
    config = config if config is not None else get_viewer_config()
    window = create_rendercanvas_window(
        width=config.window.width,
        height=config.window.height,
        title=config.window.title,
        max_fps=config.render.max_fps,
        vsync=config.render.vsync,
        trace_events=config.window.events_trace_enabled,
    )
    renderer = WgpuRenderer(window.create_surface(), clear_rgba=config.render.clear_rgba)
    width_px, height_px = window.physical_size()
    session = build_session(config, width_px, height_px)
    input_controller, drag_controller = build_input(config, session)
    frontend = PlotWindowFrontend(
        renderer=renderer,
        window=window,
        input_controller=input_controller,
        drag_controller=drag_controller,
        session=session,
    )
    logger.info(
        "viewer_started viewport_px=%dx%d dots=%d",
        width_px,
        height_px,
        sum(len(layer) for layer in session.layers),
    )
    frontend.run()
