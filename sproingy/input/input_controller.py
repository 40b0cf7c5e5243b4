"""Queued window input and key-to-action resolution."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from sproingy.api.input_events import KeyEvent, PointerEvent, WheelEvent
from sproingy.api.window import InputEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InputFrame:
    """Input drained for one frame, in arrival order."""

    frame_index: int
    events: tuple[InputEvent, ...]
    just_started_actions: frozenset[str]

    def pointer_and_wheel_events(self) -> tuple[PointerEvent | WheelEvent, ...]:
        return tuple(event for event in self.events if isinstance(event, (PointerEvent, WheelEvent)))


class InputController:
    """Collect normalized window input for polling by the frame loop.

    Pointer, wheel and key events share one queue so that a press is always
    seen before the drags and release that follow it.
    """

    def __init__(self, *, trace: bool = False) -> None:
        self._events: deque[InputEvent] = deque()
        self._pressed_keys: set[str] = set()
        self._key_action_bindings: dict[str, str] = {}
        self._trace = trace

    def consume_window_input_events(self, events: Iterable[InputEvent]) -> None:
        """Ingest normalized raw input events produced by window layer polling."""
        for raw in events:
            if not isinstance(raw, (PointerEvent, KeyEvent, WheelEvent)):
                continue
            self._events.append(raw)
            if self._trace:
                logger.debug("input_queued event=%r", raw)

    def bind_action_key_down(self, key_name: str, action_name: str) -> None:
        """Bind normalized key-down to logical action."""
        normalized = key_name.strip().lower()
        if not normalized:
            raise ValueError("key_name must not be empty")
        self._key_action_bindings[normalized] = action_name

    def drain_events(self) -> list[InputEvent]:
        """Return and clear all queued events."""
        items = list(self._events)
        self._events.clear()
        return items

    def build_input_frame(self, *, frame_index: int) -> InputFrame:
        """Build one immutable per-frame view and consume queued raw events."""
        events = tuple(self.drain_events())
        just_started_actions: set[str] = set()
        for event in events:
            if not isinstance(event, KeyEvent):
                continue
            norm = str(event.value).strip().lower()
            if not norm:
                continue
            if event.event_type == "key_down":
                # Auto-repeat key_down events do not restart an action.
                if norm not in self._pressed_keys:
                    action = self._key_action_bindings.get(norm)
                    if action is not None:
                        just_started_actions.add(action)
                self._pressed_keys.add(norm)
            elif event.event_type == "key_up":
                self._pressed_keys.discard(norm)
        return InputFrame(
            frame_index=frame_index,
            events=events,
            just_started_actions=frozenset(just_started_actions),
        )
