"""Tests for clock palettes and the shared color contract."""

import logging

import pytest

from deckclock.clock import ArcArmRenderer, SegmentDigitRenderer
from deckclock.clock.palette import AnalogPalette, DigitalPalette

DIGITAL_DEFAULTS = {"lineOn": "#FF0000", "lineOff": "#5A0000", "background": "#200000"}
ANALOG_DEFAULTS = {
    "hour": "#efefef",
    "minute": "#cccccc",
    "second": "#ff9933",
    "stroke": "#cccccc",
    "background": "#000000",
}


def test_digital_defaults():
    assert DigitalPalette().snapshot() == DIGITAL_DEFAULTS


def test_analog_defaults():
    assert AnalogPalette().snapshot() == ANALOG_DEFAULTS


def test_construct_by_role_name():
    palette = DigitalPalette(lineOn="#00FF00")
    assert palette.line_on == "#00FF00"
    assert palette.line_off == "#5A0000"


def test_merge_overwrites_only_given_roles():
    palette = DigitalPalette()
    palette.merge({"lineOn": "X"})

    assert palette.snapshot() == {**DIGITAL_DEFAULTS, "lineOn": "X"}


@pytest.mark.parametrize("bad", ["not an object", None, 42, ["lineOn", "#fff"]])
def test_merge_ignores_non_mappings(bad):
    palette = AnalogPalette()
    before = palette.snapshot()

    palette.merge(bad)

    assert palette.snapshot() == before


def test_unknown_roles_are_kept():
    palette = DigitalPalette()
    palette.merge({"glow": "#123456"})

    assert palette.snapshot()["glow"] == "#123456"
    assert palette.line_on == "#FF0000"


def test_colors_not_validated():
    palette = AnalogPalette()
    palette.merge({"hour": "definitely-not-a-color"})
    assert palette.hour == "definitely-not-a-color"


def test_reset_restores_defaults_and_drops_extras():
    palette = DigitalPalette()
    palette.merge({"lineOn": "#000000", "glow": "#fff"})

    palette.reset()

    assert palette.snapshot() == DIGITAL_DEFAULTS


@pytest.mark.parametrize(
    "renderer_cls,defaults",
    [(SegmentDigitRenderer, DIGITAL_DEFAULTS), (ArcArmRenderer, ANALOG_DEFAULTS)],
)
def test_renderer_color_contract(recording_surface, renderer_cls, defaults):
    renderer = renderer_cls(recording_surface)
    assert renderer.get_colors() == defaults

    role = next(iter(defaults))
    renderer.set_colors({role: "X"})
    assert renderer.get_colors() == {**defaults, role: "X"}

    renderer.set_colors("not an object")
    assert renderer.get_colors() == {**defaults, role: "X"}

    renderer.reset_colors()
    assert renderer.get_colors() == defaults


def test_get_colors_returns_a_copy(recording_surface):
    renderer = SegmentDigitRenderer(recording_surface)

    colors = renderer.get_colors()
    colors["lineOn"] = "#ABCDEF"

    assert renderer.get_colors()["lineOn"] == "#FF0000"


def test_ignored_update_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="deckclock"):
        DigitalPalette().merge("nope")

    assert "Ignoring palette update of type str" in caplog.text


def test_merge_accepts_field_names():
    palette = DigitalPalette()
    palette.merge({"line_on": "#00FF00"})

    assert palette.line_on == "#00FF00"
    assert palette.snapshot() == {**DIGITAL_DEFAULTS, "lineOn": "#00FF00"}
