"""Post records and the whole-board document."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Any, Dict, List, Literal, get_args
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

PostType = Literal["homework", "assignment", "subject"]
POST_TYPES: tuple[str, ...] = get_args(PostType)


class Post(BaseModel):
    """
    One announcement. Fields are not type-checked and unknown keys are kept,
    so documents written by older clients load and save back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: Any
    text: Any
    date: Any


class FacultyPost(Post):
    faculty: Any


class FacultyPostSet(BaseModel):
    """Faculty posts of one class, split by post type."""

    model_config = ConfigDict(extra="allow")

    homework: List[FacultyPost] = Field(default_factory=list)
    assignment: List[FacultyPost] = Field(default_factory=list)
    subject: List[FacultyPost] = Field(default_factory=list)

    def posts_of(self, post_type: str) -> List[FacultyPost]:
        if post_type not in POST_TYPES:
            raise KeyError(post_type)
        return getattr(self, post_type)


class SchoolData(BaseModel):
    """The single document persisted on disk and served by GET /api/data."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    holidays: List[Post] = Field(default_factory=list)
    payment_dues: Dict[str, List[Post]] = Field(default_factory=dict, alias="paymentDues")
    key_info: List[Post] = Field(default_factory=list, alias="keyInfo")
    faculty_posts: Dict[str, FacultyPostSet] = Field(default_factory=dict, alias="facultyPosts")

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def now_millis() -> int:
    return int(time.time() * 1000)


def format_post_date(moment: datetime) -> str:
    """
    Render a timestamp the way the board pages expect, e.g. "5/3/2026, 9:05:07 pm".
    """
    hour = moment.hour % 12 or 12
    suffix = "am" if moment.hour < 12 else "pm"
    return (
        f"{moment.day}/{moment.month}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {suffix}"
    )


def current_post_date(timezone: str) -> str:
    return format_post_date(datetime.now(ZoneInfo(timezone)))
