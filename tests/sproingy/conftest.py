from __future__ import annotations

from types import SimpleNamespace

import pytest


class FakeCanvas:
    def __init__(self) -> None:
        self.handlers: dict[str, list] = {}
        self.draw_functions: list[object] = []
        self.request_draw_calls = 0
        self.closed = 0

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def request_draw(self, draw_function=None) -> None:
        self.request_draw_calls += 1
        if draw_function is not None:
            self.draw_functions.append(draw_function)

    def close(self) -> None:
        self.closed += 1

    def emit(self, event_type: str, **payload) -> None:
        event = {"event_type": event_type, **payload}
        for handler in self.handlers.get(event_type, []):
            handler(event)

    def emit_obj(self, event_type: str, **payload) -> None:
        event = SimpleNamespace(event_type=event_type, **payload)
        for handler in self.handlers.get(event_type, []):
            handler(event)


class FakeLoop:
    def __init__(self) -> None:
        self.ran = 0
        self.stopped = 0

    def run(self) -> None:
        self.ran += 1

    def stop(self) -> None:
        self.stopped += 1


@pytest.fixture
def fake_canvas() -> FakeCanvas:
    return FakeCanvas()


@pytest.fixture
def fake_rc_auto() -> SimpleNamespace:
    return SimpleNamespace(loop=FakeLoop())
