"""Window subsystem runtime adapters."""

from sproingy.window.rendercanvas_glfw import RenderCanvasWindow, create_rendercanvas_window

__all__ = ["RenderCanvasWindow", "create_rendercanvas_window"]
