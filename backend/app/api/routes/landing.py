"""Landing Page: serves views/index.html at the site root."""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.config import get_settings

router = APIRouter(tags=["landing"])


@router.get("/", include_in_schema=False)
async def landing_page():
    return FileResponse(f"{get_settings().views_dir}/index.html", media_type="text/html")
