"""Normalized input events delivered by the window layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PointerEventType = Literal["pointer_down", "pointer_move", "pointer_up"]
KeyEventType = Literal["key_down", "key_up", "char"]

PRIMARY_BUTTON = 1


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Pointer press/move/release at a position in logical pixels."""

    event_type: PointerEventType
    x: float
    y: float
    button: int = 0


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Key press/release (``value`` is the key name) or typed char."""

    event_type: KeyEventType
    value: str


@dataclass(frozen=True, slots=True)
class WheelEvent:
    """Wheel scroll at a position in logical pixels; ``dy > 0`` scrolls toward the user.

    Horizontal scroll (``dx``) is not carried: the viewer only zooms on vertical wheel motion.
    """

    x: float
    y: float
    dy: float
