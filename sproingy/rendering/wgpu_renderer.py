"""wgpu renderer drawing dot layers through the axis-bounds projection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from sproingy.api.render import ViewSnapshot
from sproingy.api.window import SurfaceHandle, WindowResizeEvent
from sproingy.plot.interval import Interval
from sproingy.rendering.dots import RGBA, DotsLayer

logger = logging.getLogger(__name__)

DOTS_UNIFORM_SIZE = 48
_INSTANCE_STRIDE = 8
_MIN_INSTANCE_CAPACITY = 4096


class WgpuInitError(RuntimeError):
    """Renderer backend initialization failure with structured details."""

    def __init__(self, message: str, *, details: dict[str, object]) -> None:
        super().__init__(message)
        self.details = details


def pack_dots_uniform(
    x_bounds: Interval,
    y_bounds: Interval,
    *,
    viewport_px: tuple[float, float],
    size_px: float,
    rgba: RGBA,
) -> bytes:
    """Pack the dots shader uniform (std140-compatible, 48 bytes)."""
    values = np.array(
        [
            x_bounds.min,
            y_bounds.min,
            x_bounds.span,
            y_bounds.span,
            viewport_px[0],
            viewport_px[1],
            size_px,
            0.0,
            *rgba,
        ],
        dtype=np.float32,
    )
    return values.tobytes()


def dots_instance_data(coords: np.ndarray) -> bytes:
    """Return per-instance vertex bytes: one float32 (x, y) pair per dot."""
    return np.ascontiguousarray(coords, dtype=np.float32).reshape(-1, 2).tobytes()


def instance_capacity(required_bytes: int) -> int:
    capacity = _MIN_INSTANCE_CAPACITY
    while capacity < required_bytes:
        capacity *= 2
    return capacity


@dataclass(slots=True)
class _LayerResources:
    uniform_buffer: Any
    bind_group: Any
    instance_buffer: Any | None = None
    instance_capacity: int = 0
    instance_count: int = 0


class WgpuRenderer:
    """Clears the surface and draws each dot as an instanced, round quad."""

    def __init__(
        self,
        surface: SurfaceHandle,
        *,
        clear_rgba: RGBA = (0.3, 0.3, 0.3, 1.0),
        wgpu_module: Any | None = None,
    ) -> None:
        self._clear_rgba = clear_rgba
        if wgpu_module is None:
            try:
                import wgpu as wgpu_module
            except ImportError as exc:
                raise WgpuInitError(
                    "wgpu dependency unavailable",
                    details={"exception_type": exc.__class__.__name__, "exception_message": str(exc)},
                ) from exc
        self._wgpu = wgpu_module
        self._layers: dict[int, _LayerResources] = {}
        try:
            self._adapter = self._wgpu.gpu.request_adapter_sync(power_preference="high-performance")
            if self._adapter is None:
                raise WgpuInitError("wgpu adapter request returned None", details={})
            self._device = self._adapter.request_device_sync(label="sproingy.wgpu.device")
            self._context = self._init_canvas_context(surface)
            self._format = self._context.get_preferred_format(self._adapter)
            self._configure_context()
            self._pipeline = self._create_pipeline()
        except WgpuInitError:
            raise
        except Exception as exc:
            raise WgpuInitError(
                "wgpu backend initialization failed",
                details={
                    "surface_backend": surface.backend,
                    "exception_type": exc.__class__.__name__,
                    "exception_message": str(exc),
                },
            ) from exc
        logger.info("wgpu_renderer_ready format=%s", self._format)

    def render(self, view: ViewSnapshot, layers: Sequence[DotsLayer]) -> None:
        texture_view = self._context.get_current_texture().create_view()
        encoder = self._device.create_command_encoder(label="sproingy.wgpu.frame")
        render_pass = encoder.begin_render_pass(
            color_attachments=[
                {
                    "view": texture_view,
                    "clear_value": self._clear_rgba,
                    "load_op": "clear",
                    "store_op": "store",
                }
            ]
        )
        try:
            for layer in layers:
                self._draw_layer(render_pass, view, layer)
        finally:
            render_pass.end()
        self._device.queue.submit([encoder.finish()])

    def reconfigure(self, event: WindowResizeEvent) -> None:
        logger.debug(
            "wgpu_reconfigure physical=%dx%d dpi=%.2f",
            event.physical_width,
            event.physical_height,
            event.dpi_scale,
        )
        self._configure_context()

    def close(self) -> None:
        for resources in self._layers.values():
            for buffer in (resources.instance_buffer, resources.uniform_buffer):
                destroy = getattr(buffer, "destroy", None)
                if callable(destroy):
                    destroy()
        self._layers.clear()

    def _draw_layer(self, render_pass: Any, view: ViewSnapshot, layer: DotsLayer) -> None:
        resources = self._layer_resources(layer)
        if layer.coords_modified:
            self._upload_coords(resources, layer)
        self._device.queue.write_buffer(
            resources.uniform_buffer,
            0,
            pack_dots_uniform(
                view.x_bounds,
                view.y_bounds,
                viewport_px=(float(view.viewport_px[0]), float(view.viewport_px[1])),
                size_px=float(layer.size_lpx) * float(view.pixel_ratio),
                rgba=layer.rgba,
            ),
        )
        if resources.instance_count == 0 or resources.instance_buffer is None:
            return
        render_pass.set_pipeline(self._pipeline)
        render_pass.set_bind_group(0, resources.bind_group)
        render_pass.set_vertex_buffer(0, resources.instance_buffer)
        render_pass.draw(6, resources.instance_count)

    def _layer_resources(self, layer: DotsLayer) -> _LayerResources:
        resources = self._layers.get(id(layer))
        if resources is not None:
            return resources
        usage = self._wgpu.BufferUsage
        uniform_buffer = self._device.create_buffer(
            size=DOTS_UNIFORM_SIZE, usage=usage.UNIFORM | usage.COPY_DST
        )
        bind_group = self._device.create_bind_group(
            layout=self._pipeline.get_bind_group_layout(0),
            entries=[
                {
                    "binding": 0,
                    "resource": {"buffer": uniform_buffer, "offset": 0, "size": DOTS_UNIFORM_SIZE},
                }
            ],
        )
        resources = _LayerResources(uniform_buffer=uniform_buffer, bind_group=bind_group)
        self._layers[id(layer)] = resources
        return resources

    def _upload_coords(self, resources: _LayerResources, layer: DotsLayer) -> None:
        data = dots_instance_data(layer.coords)
        if len(data) > resources.instance_capacity:
            usage = self._wgpu.BufferUsage
            capacity = instance_capacity(len(data))
            resources.instance_buffer = self._device.create_buffer(
                size=capacity, usage=usage.VERTEX | usage.COPY_DST
            )
            resources.instance_capacity = capacity
            logger.debug("dots_instance_buffer_grown capacity=%d", capacity)
        if data:
            self._device.queue.write_buffer(resources.instance_buffer, 0, data)
        resources.instance_count = len(data) // _INSTANCE_STRIDE
        layer.coords_modified = False

    def _init_canvas_context(self, surface: SurfaceHandle) -> Any:
        get_context = getattr(surface.provider, "get_context", None)
        if not callable(get_context):
            raise WgpuInitError(
                "surface provider does not expose get_context('wgpu')",
                details={"surface_backend": surface.backend},
            )
        return get_context("wgpu")

    def _configure_context(self) -> None:
        self._context.configure(device=self._device, format=self._format, alpha_mode="opaque")

    def _create_pipeline(self) -> Any:
        shader = self._device.create_shader_module(code=_DOTS_WGSL)
        return self._device.create_render_pipeline(
            layout="auto",
            vertex={
                "module": shader,
                "entry_point": "vs_main",
                "buffers": [
                    {
                        "array_stride": _INSTANCE_STRIDE,
                        "step_mode": "instance",
                        "attributes": [
                            {"shader_location": 0, "offset": 0, "format": "float32x2"},
                        ],
                    }
                ],
            },
            primitive={"topology": "triangle-list"},
            fragment={
                "module": shader,
                "entry_point": "fs_main",
                "targets": [
                    {
                        "format": self._format,
                        "blend": {
                            "color": {
                                "src_factor": "src-alpha",
                                "dst_factor": "one-minus-src-alpha",
                                "operation": "add",
                            },
                            "alpha": {
                                "src_factor": "one",
                                "dst_factor": "one-minus-src-alpha",
                                "operation": "add",
                            },
                        },
                    }
                ],
            },
        )


# Pixel y grows downward, so bounds.min maps to the top edge.
_DOTS_WGSL = """
struct DotsUniform {
    xy_bounds: vec4<f32>,
    viewport_px: vec2<f32>,
    size_px: f32,
    _pad: f32,
    rgba: vec4<f32>,
};

@group(0) @binding(0) var<uniform> u: DotsUniform;

struct VsOut {
    @builtin(position) position: vec4<f32>,
    @location(0) corner: vec2<f32>,
};

@vertex
fn vs_main(@builtin(vertex_index) vertex_index: u32, @location(0) coord: vec2<f32>) -> VsOut {
    var corners = array<vec2<f32>, 6>(
        vec2<f32>(-1.0, -1.0),
        vec2<f32>(1.0, -1.0),
        vec2<f32>(1.0, 1.0),
        vec2<f32>(-1.0, -1.0),
        vec2<f32>(1.0, 1.0),
        vec2<f32>(-1.0, 1.0),
    );
    let corner = corners[vertex_index];
    let frac = (coord - u.xy_bounds.xy) / u.xy_bounds.zw;
    let center = vec2<f32>(2.0 * frac.x - 1.0, 1.0 - 2.0 * frac.y);
    var out: VsOut;
    out.position = vec4<f32>(center + corner * u.size_px / u.viewport_px, 0.0, 1.0);
    out.corner = corner;
    return out;
}

@fragment
fn fs_main(input: VsOut) -> @location(0) vec4<f32> {
    let r2 = dot(input.corner, input.corner);
    if (r2 > 1.0) {
        discard;
    }
    return u.rgba;
}
"""
