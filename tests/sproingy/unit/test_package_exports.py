from __future__ import annotations

import importlib

PACKAGES = (
    "sproingy",
    "sproingy.api",
    "sproingy.input",
    "sproingy.plot",
    "sproingy.rendering",
    "sproingy.window",
)


def test_package_exports_resolve() -> None:
    for name in PACKAGES:
        module = importlib.import_module(name)
        for exported in module.__all__:
            assert getattr(module, exported) is not None, f"{name}.{exported}"


def test_api_exports_protocols_and_events() -> None:
    api = importlib.import_module("sproingy.api")
    assert {"Dragger", "Zoomer", "PointerEvent", "WheelEvent", "WindowPort"} <= set(api.__all__)
