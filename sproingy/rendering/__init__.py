"""Dot layers and the wgpu renderer."""

from sproingy.rendering.dots import DotsLayer, as_coords, demo_dots

__all__ = ["DotsLayer", "as_coords", "demo_dots"]
