"""
The titled box widget.

A page creates one :class:`TitledBox` per request, sets its public
properties, then calls :meth:`TitledBox.configure` followed by
:meth:`TitledBox.render`. A box without a title hides itself and renders
nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup
from pydantic import ValidationError

from ..core.colors import Color, resolve_color
from ..core.errors import TitledBoxError, WidgetLifecycleError
from ..core.models import StyleDefaults, TitledBoxConfig, raise_style_error
from ..core.settings import get_style_defaults
from .elements import Label, Table

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "titled_box.html"

_environment = Environment(
    loader=PackageLoader("titledbox.widgets", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

PROPERTY_NAMES = (
    "title",
    "text_color",
    "back_color",
    "padding",
    "border_color",
    "border_width",
)


@dataclass(frozen=True)
class _ResolvedStyle:
    text_color: Color
    back_color: Color
    padding: int
    border_color: Color
    border_width: int

    @classmethod
    def from_config(cls, config: TitledBoxConfig) -> "_ResolvedStyle":
        return cls(
            text_color=resolve_color(config.text_color, "text_color"),
            back_color=resolve_color(config.back_color, "back_color"),
            padding=config.padding,
            border_color=resolve_color(config.border_color, "border_color"),
            border_width=config.border_width,
        )


class TitledBox:
    """A bordered box with a styled title row and a padded content row."""

    def __init__(
        self,
        config: Optional[TitledBoxConfig] = None,
        *,
        defaults: Optional[StyleDefaults] = None,
        **properties: Any,
    ) -> None:
        self.defaults = defaults if defaults is not None else get_style_defaults()
        base = config if config is not None else self.defaults.to_config()

        self.title: Optional[str] = base.title
        self.text_color: str = base.text_color
        self.back_color: str = base.back_color
        self.padding: int = base.padding
        self.border_color: str = base.border_color
        self.border_width: int = base.border_width

        for name, value in properties.items():
            if name not in PROPERTY_NAMES:
                raise TypeError(f"Unknown TitledBox property: {name}")
            setattr(self, name, value)

        self._reset_children()
        self.visible = True
        self._configured = False

    def _reset_children(self) -> None:
        self.outer_table = Table()
        self.inner_table = Table()
        self.title_label = Label()

    @property
    def config(self) -> TitledBoxConfig:
        """Unvalidated snapshot of the current public properties."""
        return TitledBoxConfig.model_construct(
            **{name: getattr(self, name) for name in PROPERTY_NAMES}
        )

    @property
    def configured(self) -> bool:
        return self._configured

    def _resolve(self) -> _ResolvedStyle:
        try:
            config = TitledBoxConfig.model_validate(
                {name: getattr(self, name) for name in PROPERTY_NAMES}
            )
        except ValidationError as exc:
            raise_style_error(exc)
        return _ResolvedStyle.from_config(config)

    def configure(self) -> bool:
        """
        Apply the public properties to the child elements.

        Every color and dimension is validated before any element changes,
        so a rejected configuration leaves the elements untouched. A hidden
        box has unstyled children, even if an earlier call styled them.

        Returns:
            ``True`` when the box will render, ``False`` when it is hidden.

        Raises:
            InvalidStyleValue: if a color cannot be resolved.
            InvalidDimension: if padding or border width is invalid.
        """
        if not self.config.has_title:
            logger.debug("TitledBox has no title; hiding")
            self._reset_children()
            self.visible = False
            self._configured = True
            return False

        try:
            style = self._resolve()
        except TitledBoxError as exc:
            logger.warning("Rejected TitledBox configuration for %r: %s", self.title, exc)
            raise

        self.outer_table.background_color = style.border_color
        self.outer_table.cell_spacing = style.border_width
        self.inner_table.cell_padding = style.padding
        self.inner_table.background_color = style.back_color

        font = self.defaults.title_font
        self.title_label.text = self.title
        self.title_label.fore_color = style.text_color
        self.title_label.font = font

        self.visible = True
        self._configured = True
        logger.debug(
            "TitledBox %r configured (border=%s/%d, back=%s, padding=%d)",
            self.title,
            style.border_color.to_html(),
            style.border_width,
            style.back_color.to_html(),
            style.padding,
        )
        return True

    def render(self, content: Any = "") -> Markup:
        """
        Render the box around ``content``.

        Plain strings are escaped; pass :class:`markupsafe.Markup` to embed
        trusted HTML.
        """
        if not self._configured:
            raise WidgetLifecycleError("TitledBox.configure() must be called before render()")
        if not self.visible:
            return Markup("")
        template = _environment.get_template(TEMPLATE_NAME)
        html = template.render(
            outer=self.outer_table,
            inner=self.inner_table,
            label=self.title_label,
            content=content,
        )
        return Markup(html)

    def __repr__(self) -> str:
        return f"TitledBox(title={self.title!r}, visible={self.visible})"


def render_titled_box(
    content: Any = "",
    *,
    defaults: Optional[StyleDefaults] = None,
    **properties: Any,
) -> Markup:
    """Configure and render a one-off box; hidden boxes yield empty markup."""
    box = TitledBox(defaults=defaults, **properties)
    box.configure()
    return box.render(content)
