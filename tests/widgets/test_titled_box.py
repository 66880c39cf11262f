"""Tests for the TitledBox widget."""

from __future__ import annotations

import logging

import pytest
from markupsafe import Markup

from titledbox.core.colors import Color
from titledbox.core.errors import InvalidDimension, InvalidStyleValue, WidgetLifecycleError
from titledbox.core.models import FontInfo, StyleDefaults, TitledBoxConfig
from titledbox.widgets.elements import Label, Table
from titledbox.widgets.titled_box import TitledBox, render_titled_box


def _assert_untouched(box: TitledBox) -> None:
    assert box.outer_table == Table()
    assert box.inner_table == Table()
    assert box.title_label == Label()


@pytest.mark.parametrize("title", [None, ""])
def test_box_without_title_is_hidden(defaults, title):
    box = TitledBox(defaults=defaults, title=title)

    assert box.configure() is False
    assert box.visible is False
    assert box.render("ignored") == Markup("")
    _assert_untouched(box)


def test_box_without_title_skips_invalid_colors(defaults):
    box = TitledBox(defaults=defaults, title="", border_color="notacolor", padding=-1)

    assert box.configure() is False
    _assert_untouched(box)


def test_default_box_applies_every_style(defaults):
    box = TitledBox(
        defaults=defaults,
        title="Info",
        text_color="black",
        back_color="wheat",
        padding=2,
        border_color="gray",
        border_width=1,
    )

    assert box.configure() is True

    assert box.outer_table.background_color == Color(128, 128, 128)
    assert box.outer_table.cell_spacing == 1
    assert box.inner_table.cell_padding == 2
    assert box.inner_table.background_color == Color(245, 222, 179)
    assert box.title_label.text == "Info"
    assert box.title_label.fore_color == Color(0, 0, 0)
    assert box.title_label.font == FontInfo(name="Verdana", bold=True, size="13pt")


def test_default_box_renders_nested_tables(defaults):
    box = TitledBox(defaults=defaults, title="Info")
    box.configure()

    html = box.render("Body text")

    assert 'cellspacing="1"' in html
    assert 'cellpadding="2"' in html
    assert "background-color:gray;" in html
    assert "background-color:wheat;" in html
    assert "color:black;font-family:Verdana;font-size:13pt;font-weight:bold;" in html
    assert ">Info</span>" in html
    assert "Body text" in html
    assert html.count("<table") == 2


def test_hex_border_color_resolves_to_red(defaults):
    box = TitledBox(defaults=defaults, title="Alert", border_color="#FF0000")
    box.configure()

    assert box.outer_table.background_color == Color(255, 0, 0)
    assert box.inner_table.background_color == Color(245, 222, 179)
    assert box.outer_table.cell_spacing == 1
    assert box.inner_table.cell_padding == 2
    assert "background-color:#FF0000;" in box.render()


def test_invalid_color_fails_without_mutating_children(defaults):
    box = TitledBox(defaults=defaults, title="Broken", back_color="notacolor")

    with pytest.raises(InvalidStyleValue) as excinfo:
        box.configure()

    assert excinfo.value.field == "back_color"
    assert excinfo.value.value == "notacolor"
    _assert_untouched(box)
    with pytest.raises(WidgetLifecycleError):
        box.render()


def test_invalid_text_color_is_checked_before_border(defaults):
    box = TitledBox(defaults=defaults, title="Broken", text_color="notacolor", border_color="#FF0000")

    with pytest.raises(InvalidStyleValue):
        box.configure()

    assert box.outer_table.background_color is None


@pytest.mark.parametrize(
    "field, value",
    [("padding", -1), ("border_width", -3), ("padding", "2"), ("border_width", True), ("padding", 1.5)],
)
def test_invalid_dimension_fails_without_mutating_children(defaults, field, value):
    box = TitledBox(defaults=defaults, title="Broken", **{field: value})

    with pytest.raises(InvalidDimension) as excinfo:
        box.configure()

    assert excinfo.value.field == field
    _assert_untouched(box)


def test_zero_dimensions_are_allowed(defaults):
    box = TitledBox(defaults=defaults, title="Flat", padding=0, border_width=0)

    assert box.configure() is True
    assert 'cellspacing="0"' in box.render()


def test_configure_is_idempotent(defaults):
    box = TitledBox(defaults=defaults, title="Info", border_color="navy", padding=4)

    box.configure()
    first = box.render("same")
    box.configure()
    second = box.render("same")

    assert first == second
    assert first == render_titled_box("same", defaults=defaults, title="Info", border_color="navy", padding=4)


def test_render_before_configure_raises(defaults):
    box = TitledBox(defaults=defaults, title="Info")

    assert box.configured is False
    with pytest.raises(WidgetLifecycleError):
        box.render()


def test_clearing_title_and_reconfiguring_unstyles_children(defaults):
    box = TitledBox(defaults=defaults, title="Info")
    box.configure()
    assert box.outer_table.is_styled

    box.title = ""

    assert box.configure() is False
    assert box.configured is True
    assert box.render() == Markup("")
    _assert_untouched(box)


def test_plain_content_is_escaped_and_markup_is_kept(defaults):
    box = TitledBox(defaults=defaults, title="<b>Title</b>")
    box.configure()

    escaped = box.render("<script>alert(1)</script>")
    trusted = box.render(Markup("<em>trusted</em>"))

    assert "&lt;script&gt;" in escaped
    assert "&lt;b&gt;Title&lt;/b&gt;" in escaped
    assert "<em>trusted</em>" in trusted


def test_injected_defaults_are_used_for_unset_properties():
    defaults = StyleDefaults(
        text_color="white",
        back_color="ivory",
        padding=5,
        border_color="teal",
        border_width=3,
        title_font=FontInfo(name="Georgia", bold=False, size="11"),
    )
    box = TitledBox(defaults=defaults, title="Custom")
    box.configure()

    html = box.render()

    assert box.title_label.fore_color == Color(255, 255, 255)
    assert 'cellspacing="3"' in html
    assert 'cellpadding="5"' in html
    assert "background-color:ivory;" in html
    assert "font-family:Georgia;font-size:11pt;" in html
    assert "font-weight" not in html


def test_config_object_seeds_properties(defaults):
    config = TitledBoxConfig(title="From config", border_color="maroon", border_width=4)
    box = TitledBox(config, defaults=defaults)

    assert box.config == config
    box.configure()
    assert box.outer_table.background_color == Color(128, 0, 0)
    assert box.outer_table.cell_spacing == 4


def test_properties_can_be_set_after_construction(defaults):
    box = TitledBox(defaults=defaults)
    box.title = "Late"
    box.back_color = "#ccc"

    box.configure()

    assert box.inner_table.background_color == Color(204, 204, 204)


def test_unknown_property_is_rejected(defaults):
    with pytest.raises(TypeError, match="colour"):
        TitledBox(defaults=defaults, title="x", colour="red")


def test_box_uses_process_defaults_when_none_injected(monkeypatch):
    from titledbox.core import settings as settings_module

    monkeypatch.setenv("TITLEDBOX_BORDER_COLOR", "olive")
    settings_module.get_style_defaults.cache_clear()
    try:
        box = TitledBox(title="Env")
        box.configure()
        assert box.outer_table.background_color == Color(128, 128, 0)
    finally:
        settings_module.get_style_defaults.cache_clear()


def test_rejected_configuration_is_logged(defaults, caplog):
    box = TitledBox(defaults=defaults, title="Broken", border_color="notacolor")

    with caplog.at_level(logging.WARNING, logger="titledbox.widgets.titled_box"):
        with pytest.raises(InvalidStyleValue):
            box.configure()

    assert "Rejected TitledBox configuration" in caplog.text
