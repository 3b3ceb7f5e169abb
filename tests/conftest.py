"""Shared test fixtures."""

from __future__ import annotations

import pytest

from zeplin_cli.models import Asset, AssetContent, Layer, Rect


def make_layer(x, y, width, height, name=None, children=(), **kwargs) -> Layer:
    """Build a layer from a rect shorthand."""
    return Layer(rect=Rect(x, y, width, height), name=name, layers=list(children), **kwargs)


def png(density, url=None) -> AssetContent:
    return AssetContent(url=url or f"https://cdn.test/a@{density}x.png", format="png", density=density)


def svg(url="https://cdn.test/a.svg") -> AssetContent:
    return AssetContent(url=url, format="svg")


def make_asset(name, *contents) -> Asset:
    return Asset(display_name=name, contents=list(contents))


class ScriptedChooser:
    """Fake chooser: records every prompt and answers with a fixed 1-based index."""

    def __init__(self, answer: int = 1):
        self.answer = answer
        self.calls = []

    def __call__(self, message, options):
        self.calls.append((message, options))
        return options[self.answer - 1][1]


def refuse_to_choose(message, options):
    raise AssertionError(f"chooser should not be called: {message}")


# Screen version payload as returned by the API
VERSION_PAYLOAD = {
    "width": 375,
    "height": 812,
    "density_scale": 2,
    "background_color": {"r": 255, "g": 255, "b": 255, "a": 1},
    "layers": [
        {
            "type": "group",
            "name": "Header",
            "rect": {"x": 0, "y": 0, "width": 375, "height": 60},
            "opacity": 1,
            "fills": [{"type": "color", "color": {"r": 0, "g": 0, "b": 0, "a": 0.5}}],
            "layers": [
                {
                    "type": "text",
                    "name": "Title",
                    "rect": {"x": 16, "y": 20, "width": 100, "height": 20},
                    "content": "Hello",
                    "text_styles": [
                        {
                            "range": {"location": 0, "length": 5},
                            "style": {
                                "font_family": "Pretendard",
                                "postscript_name": "Pretendard-Bold",
                                "font_size": 16,
                                "font_weight": 700,
                                "line_height": 24,
                                "color": {"r": 17, "g": 17, "b": 17, "a": 1},
                            },
                        }
                    ],
                }
            ],
        }
    ],
    "assets": [
        {
            "display_name": "ic_close",
            "layer_name": "Close",
            "contents": [
                {"url": "https://cdn.test/close.svg", "format": "svg"},
                {"url": "https://cdn.test/close@2x.png", "format": "png", "density": 2},
            ],
        }
    ],
    "links": [
        {
            "rect": {"x": 0, "y": 0, "width": 40, "height": 40},
            "destination": {"name": "Detail", "type": "screen"},
        }
    ],
}


@pytest.fixture
def version_payload() -> dict:
    return VERSION_PAYLOAD


@pytest.fixture
def chooser() -> ScriptedChooser:
    return ScriptedChooser()
