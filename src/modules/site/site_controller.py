# src/modules/site/site_controller.py

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from src.modules.site.site_service import render_home

router = APIRouter(tags=["site"])

@router.get("/", response_class=HTMLResponse)
async def home():
    """Serve the one-page site with an empty contact form."""
    return HTMLResponse(render_home())
