"""Static HTML pages served without authentication."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
pages_router = APIRouter(tags=["pages"])


@pages_router.get("/login", response_class=HTMLResponse, summary="Login page")
async def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html", {"title": "Sign in"})


@pages_router.get("/main", response_class=HTMLResponse, summary="Main page")
async def main_page(request: Request):
    return templates.TemplateResponse(request, "main.html", {"title": "Inventory"})


__all__ = ["pages_router"]
