from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import FileResponse

from schoolboard.core.config import get_settings
from schoolboard.core.errors import NotFound

router = APIRouter(prefix="", tags=["pages"])

PAGES = (
    "index.html",
    "schoollogin.html",
    "admin.html",
    "faculty.html",
    "student.html",
    "guestlogin.html",
)


def _page(name: str) -> FileResponse:
    path = get_settings().web_dir / name
    if not path.is_file():
        raise NotFound(f"Page {name} not found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
def home():
    return _page("index.html")


@router.get("/index.html")
def index_page():
    return _page("index.html")


@router.get("/schoollogin.html")
def school_login_page():
    return _page("schoollogin.html")


@router.get("/admin.html")
def admin_page():
    return _page("admin.html")


@router.get("/faculty.html")
def faculty_page():
    return _page("faculty.html")


@router.get("/student.html")
def student_page():
    return _page("student.html")


@router.get("/guestlogin.html")
def guest_login_page():
    return _page("guestlogin.html")
