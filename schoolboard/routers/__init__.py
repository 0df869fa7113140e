"""
FastAPI routers grouped by concern (board API, static pages).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py).
"""
