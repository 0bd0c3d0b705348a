"""FastAPI application powering the framers calculator UI."""

from __future__ import annotations

import pathlib
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from ..classifier import Category
from ..config import Settings
from ..exporters.spreadsheet import render_csv
from ..history import HistoryStore
from ..service import run_interpretation

EXAMPLES = [
    "I need studs for a 40 foot wall, 9 feet high, 3 windows and a door",
    "floor joists for a 28 by 14 room, 2x8, 12 on center",
    "roof rafters, 30 wide 44 long, 6/12 pitch",
    "osb sheathing for 1200 square feet",
    "concrete footing 40 feet long 8 inch deep",
]


class InterpretRequest(BaseModel):
    text: str


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or Settings.from_env()
    history = HistoryStore(settings.history_path, limit=settings.history_limit)

    app = FastAPI(title="Framers Calculator", version="0.1.0")
    base_dir = pathlib.Path(__file__).parent
    templates = Jinja2Templates(directory=str(base_dir / "templates"))
    app.mount("/static", StaticFiles(directory=str(base_dir / "static")), name="static")

    categories = [category.value for category in Category if category is not Category.UNRECOGNIZED]

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(request, "index.html", {"examples": EXAMPLES})

    @app.get("/api/categories")
    async def list_categories() -> Dict[str, List[str]]:
        return {"categories": categories}

    @app.get("/api/health")
    async def healthcheck() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/interpret")
    async def interpret_text(payload: InterpretRequest) -> JSONResponse:
        run = run_interpretation(payload.text)
        if run.blank:
            raise HTTPException(status_code=400, detail=run.result.note)

        history.record(run.query, run.result)

        response = run.to_dict()
        response["csv"] = render_csv(run.result, query=run.query)
        return JSONResponse(response)

    @app.get("/api/history")
    async def list_history() -> Dict[str, List[Dict[str, Any]]]:
        return {
            "history": [
                {"query": entry.query, "title": entry.title, "highlight": entry.highlight, "time": entry.time}
                for entry in history.load()
            ]
        }

    @app.delete("/api/history")
    async def clear_history() -> Dict[str, str]:
        history.clear()
        return {"status": "cleared"}

    return app
