"""FastAPI application that hosts titled boxes on server-rendered pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from ..core.colors import known_color_names
from ..core.errors import TitledBoxError
from ..core.models import StyleDefaults
from ..widgets.titled_box import TitledBox
from .dependencies import get_style_defaults

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

DEMO_BOXES: list[dict[str, object]] = [
    {
        "properties": {"title": "Info"},
        "content": "Boxes pick up the default colors when a page leaves them unset.",
    },
    {
        "properties": {"title": "Alert", "border_color": "#FF0000", "border_width": 2},
        "content": "The border is the outer table's background showing through its spacing.",
    },
    {
        "properties": {
            "title": "Notes",
            "text_color": "white",
            "back_color": "steelblue",
            "padding": 6,
            "border_color": "navy",
        },
        "content": "Padding applies to the inner table cells.",
    },
    {
        "properties": {"title": ""},
        "content": "A box without a title is never rendered.",
    },
]


def _build_demo_boxes(defaults: StyleDefaults) -> list[Markup]:
    rendered: list[Markup] = []
    for entry in DEMO_BOXES:
        box = TitledBox(defaults=defaults, **entry["properties"])
        if box.configure():
            rendered.append(box.render(entry["content"]))
    return rendered


def create_app() -> FastAPI:
    """Construct and return the FastAPI application."""
    app = FastAPI(title="TitledBox Web UI")

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse, tags=["ui"])
    async def index(
        request: Request, defaults: StyleDefaults = Depends(get_style_defaults)
    ) -> HTMLResponse:
        return templates.TemplateResponse(
            request=request,
            name="index.html",
            context={
                "title": "TitledBox Gallery",
                "boxes": _build_demo_boxes(defaults),
                "hidden_count": sum(1 for entry in DEMO_BOXES if not entry["properties"]["title"]),
            },
        )

    @app.get("/box", response_class=HTMLResponse, tags=["ui"])
    async def box(  # noqa: PLR0913
        title: Optional[str] = Query(None),
        text_color: Optional[str] = Query(None),
        back_color: Optional[str] = Query(None),
        padding: Optional[int] = Query(None),
        border_color: Optional[str] = Query(None),
        border_width: Optional[int] = Query(None),
        content: str = Query(""),
        defaults: StyleDefaults = Depends(get_style_defaults),
    ) -> HTMLResponse:
        supplied = {
            "title": title,
            "text_color": text_color,
            "back_color": back_color,
            "padding": padding,
            "border_color": border_color,
            "border_width": border_width,
        }
        widget = TitledBox(
            defaults=defaults,
            **{name: value for name, value in supplied.items() if value is not None},
        )
        try:
            widget.configure()
        except TitledBoxError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return HTMLResponse(content=str(widget.render(content)))

    @app.get("/api/colors", tags=["api"])
    async def api_colors() -> dict[str, list[str]]:
        return {"colors": known_color_names()}

    return app
