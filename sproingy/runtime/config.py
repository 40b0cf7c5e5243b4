"""Centralized runtime configuration ownership for the viewer."""

from __future__ import annotations

import math
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from sproingy.plot.axis import DEFAULT_TIE_FRAC, DEFAULT_ZOOM_DIVISOR

RGBA = tuple[float, float, float, float]

_DEFAULT_CLEAR_RGBA: RGBA = (0.3, 0.3, 0.3, 1.0)
_DEFAULT_DOTS_RGBA: RGBA = (0.85, 0.35, 0.1, 1.0)


@dataclass(frozen=True, slots=True)
class WindowConfig:
    width: int
    height: int
    title: str
    events_trace_enabled: bool


@dataclass(frozen=True, slots=True)
class RenderConfig:
    vsync: bool
    max_fps: float
    clear_rgba: RGBA


@dataclass(frozen=True, slots=True)
class DotsConfig:
    size_lpx: float
    rgba: RGBA
    count: int
    seed: int


@dataclass(frozen=True, slots=True)
class AxisConfig:
    zoom_divisor: float
    tie_frac: float
    wheel_zoom_step: float


@dataclass(frozen=True, slots=True)
class InputConfig:
    trace_enabled: bool


@dataclass(frozen=True, slots=True)
class LogConfig:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    window: WindowConfig
    render: RenderConfig
    dots: DotsConfig
    axis: AxisConfig
    input: InputConfig
    log: LogConfig


_VIEWER_CONFIG: ContextVar[ViewerConfig | None] = ContextVar("sproingy_viewer_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if not math.isfinite(value):
        value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _rgba(name: str, default: RGBA, *, env: Mapping[str, str] | None = None) -> RGBA:
    raw = _text(name, "", env=env)
    if not raw:
        return default
    parts = [item.strip() for item in raw.split(",") if item.strip()]
    if len(parts) not in {3, 4}:
        return default
    try:
        values = [min(1.0, max(0.0, float(item))) for item in parts]
    except ValueError:
        return default
    if len(values) == 3:
        values.append(1.0)
    return (values[0], values[1], values[2], values[3])


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with viewer-prefixed override."""
    value = _raw("SPROINGY_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_viewer_config(*, env: Mapping[str, str] | None = None) -> ViewerConfig:
    scope_env = env
    tie_frac = _float("SPROINGY_AXIS_TIE_FRAC", DEFAULT_TIE_FRAC, env=scope_env)
    if not 0.0 <= tie_frac <= 1.0:
        tie_frac = DEFAULT_TIE_FRAC
    file_path = _text("SPROINGY_LOG_FILE", "", env=scope_env)
    console_format = _text("SPROINGY_LOG_FORMAT", "text", env=scope_env).lower()
    if console_format not in {"text", "json"}:
        console_format = "text"

    return ViewerConfig(
        window=WindowConfig(
            width=_int("SPROINGY_WINDOW_WIDTH", 480, minimum=1, env=scope_env),
            height=_int("SPROINGY_WINDOW_HEIGHT", 360, minimum=1, env=scope_env),
            title=_text("SPROINGY_WINDOW_TITLE", "Sproingy", env=scope_env),
            events_trace_enabled=_flag("SPROINGY_WINDOW_EVENTS_TRACE_ENABLED", False, env=scope_env),
        ),
        render=RenderConfig(
            vsync=_flag("SPROINGY_RENDER_VSYNC", True, env=scope_env),
            max_fps=_float("SPROINGY_RENDER_MAX_FPS", 240.0, minimum=1.0, env=scope_env),
            clear_rgba=_rgba("SPROINGY_RENDER_CLEAR_RGBA", _DEFAULT_CLEAR_RGBA, env=scope_env),
        ),
        dots=DotsConfig(
            size_lpx=_float("SPROINGY_DOTS_SIZE_LPX", 15.0, minimum=1.0, env=scope_env),
            rgba=_rgba("SPROINGY_DOTS_RGBA", _DEFAULT_DOTS_RGBA, env=scope_env),
            count=_int("SPROINGY_DOTS_COUNT", 500, minimum=0, env=scope_env),
            seed=_int("SPROINGY_DOTS_SEED", 0, env=scope_env),
        ),
        axis=AxisConfig(
            zoom_divisor=_float(
                "SPROINGY_AXIS_ZOOM_DIVISOR", DEFAULT_ZOOM_DIVISOR, minimum=1e-6, env=scope_env
            ),
            tie_frac=tie_frac,
            wheel_zoom_step=_float("SPROINGY_WHEEL_ZOOM_STEP", 1.1, minimum=1.0, env=scope_env),
        ),
        input=InputConfig(
            trace_enabled=_flag("SPROINGY_INPUT_TRACE_ENABLED", False, env=scope_env),
        ),
        log=LogConfig(
            level_name=resolve_log_level_name(env=scope_env),
            console_format=console_format,
            file_path=file_path or None,
        ),
    )


def initialize_viewer_config(*, env: Mapping[str, str] | None = None) -> ViewerConfig:
    config = load_viewer_config(env=env)
    _VIEWER_CONFIG.set(config)
    return config


def set_viewer_config(config: ViewerConfig) -> ViewerConfig:
    _VIEWER_CONFIG.set(config)
    return config


def get_viewer_config() -> ViewerConfig:
    config = _VIEWER_CONFIG.get()
    if config is not None:
        return config
    return initialize_viewer_config()
