from __future__ import annotations

from fastapi import APIRouter, Request

from schoolboard.services.board_service import BoardService

router = APIRouter(prefix="/api", tags=["board"])


def _get_board_service(request: Request) -> BoardService:
    svc = getattr(getattr(request.app, "state", None), "board_service", None)
    if not svc:
        raise RuntimeError("BoardService not configured")
    return svc


@router.get("/data")
def get_data(request: Request):
    return _get_board_service(request).get_data()


@router.post("/holidays")
def post_holiday(request: Request, payload: dict):
    post = _get_board_service(request).add_holiday(payload)
    return {"success": True, "post": post.model_dump()}


@router.post("/payment-dues")
def post_payment_due(request: Request, payload: dict):
    post = _get_board_service(request).add_payment_due(payload)
    return {"success": True, "post": post.model_dump()}


@router.post("/key-info")
def post_key_info(request: Request, payload: dict):
    post = _get_board_service(request).add_key_info(payload)
    return {"success": True, "post": post.model_dump()}


@router.post("/faculty-posts")
def post_faculty_post(request: Request, payload: dict):
    post = _get_board_service(request).add_faculty_post(payload)
    return {"success": True, "post": post.model_dump()}


@router.delete("/posts/{post_type}/{post_id}")
def delete_post(request: Request, post_type: str, post_id: str):
    _get_board_service(request).delete_post(post_type, post_id)
    return {"success": True}
