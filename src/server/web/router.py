"""Web UI routes."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from server.web.service import render_homepage


router = APIRouter(tags=["web"])


@router.get("/", response_class=HTMLResponse)
async def home():
    return render_homepage()
