"""Board use cases: publish posts to a category, delete posts, read the board."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from schoolboard.core.errors import DocumentSchemaError, PersistenceWriteError, ValidationError
from schoolboard.domain.posts import (
    POST_TYPES,
    FacultyPost,
    FacultyPostSet,
    Post,
    SchoolData,
    current_post_date,
    now_millis,
)
from schoolboard.repositories import json_storage

logger = logging.getLogger(__name__)

SAVE_FAILED = "Failed to save data"


def _present(payload: Mapping[str, Any], field: str) -> bool:
    value = payload.get(field)
    return isinstance(value, str) and value != ""


def _as_number(value: Any) -> float | None:
    """Numeric reading of an id, accepting "1000", "1e3", "1000.0" and "0x3E8"."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return 0.0
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float(int(text, 0)) if text[:2].lower() in ("0x", "0o", "0b") else None
    except ValueError:
        return None


def _same_id(stored: Any, raw_id: str) -> bool:
    if isinstance(stored, str):
        return stored == raw_id
    stored_num = _as_number(stored)
    target = _as_number(raw_id)
    return stored_num is not None and target is not None and stored_num == target


class BoardService:
    """
    Runs every write as load -> mutate -> save while holding one lock, so two
    requests in flight cannot overwrite each other's posts.
    """

    def __init__(self, timezone: str = "Asia/Kolkata") -> None:
        self.timezone = timezone
        self._lock = threading.Lock()
        self._last_id = 0

    def get_data(self) -> dict:
        """The board as JSON; a file with an unexpected shape is served as stored."""
        try:
            return json_storage.load().to_json_dict()
        except DocumentSchemaError:
            return json_storage.load_raw()

    # -------------------------- helpers --------------------------
    def _next_id(self) -> int:
        candidate = now_millis()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _new_post(self, text: str) -> Post:
        return Post(id=self._next_id(), text=text, date=current_post_date(self.timezone))

    def _persist(self, data: SchoolData, message: str = SAVE_FAILED) -> None:
        if not json_storage.save(data):
            raise PersistenceWriteError(message)

    # -------------------------- posts --------------------------
    def add_holiday(self, payload: Mapping[str, Any]) -> Post:
        if not _present(payload, "text"):
            raise ValidationError("Text is required")
        with self._lock:
            data = json_storage.load()
            post = self._new_post(payload["text"])
            data.holidays.append(post)
            self._persist(data)
        logger.info("Holiday posted: id=%s", post.id)
        return post

    def add_key_info(self, payload: Mapping[str, Any]) -> Post:
        if not _present(payload, "text"):
            raise ValidationError("Text is required")
        with self._lock:
            data = json_storage.load()
            post = self._new_post(payload["text"])
            data.key_info.append(post)
            self._persist(data)
        logger.info("Key info posted: id=%s", post.id)
        return post

    def add_payment_due(self, payload: Mapping[str, Any]) -> Post:
        if not (_present(payload, "classCode") and _present(payload, "text")):
            raise ValidationError("Class code and text are required")
        class_code = payload["classCode"]
        with self._lock:
            data = json_storage.load()
            post = self._new_post(payload["text"])
            data.payment_dues.setdefault(class_code, []).append(post)
            self._persist(data)
        logger.info("Payment due posted for class %s: id=%s", class_code, post.id)
        return post

    def add_faculty_post(self, payload: Mapping[str, Any]) -> FacultyPost:
        fields = ("classCode", "type", "text", "facultyCode")
        if not all(_present(payload, field) for field in fields):
            raise ValidationError("All fields are required")
        post_type = payload["type"]
        if post_type not in POST_TYPES:
            raise ValidationError("Invalid post type")
        class_code = payload["classCode"]
        with self._lock:
            data = json_storage.load()
            post = FacultyPost(
                id=self._next_id(),
                text=payload["text"],
                date=current_post_date(self.timezone),
                faculty=payload["facultyCode"],
            )
            posts = data.faculty_posts.setdefault(class_code, FacultyPostSet())
            posts.posts_of(post_type).append(post)
            self._persist(data)
        logger.info("Faculty post (%s) for class %s: id=%s", post_type, class_code, post.id)
        return post

    def delete_post(self, post_type: str, raw_id: str) -> None:
        """
        Remove a holiday or key-info post by id. Other categories are left
        untouched and the call still succeeds.
        """
        with self._lock:
            data = json_storage.load()
            if post_type == "holiday":
                data.holidays = [p for p in data.holidays if not _same_id(p.id, raw_id)]
            elif post_type == "keyinfo":
                data.key_info = [p for p in data.key_info if not _same_id(p.id, raw_id)]
            self._persist(data, "Failed to delete post")
        logger.info("Deleted %s post %s", post_type, raw_id)
