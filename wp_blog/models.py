from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RemotePost:
    """Post record as served by the WordPress endpoint."""

    id: int
    title: str
    date: str  # "YYYY-MM-DD HH:MM:SS", no timezone
    content: str  # trusted HTML

    @classmethod
    def from_json(cls, obj: Any) -> "RemotePost":
        """
        Map WordPress field names (ID, post_title, post_date, post_content).

        Raises:
            ValueError: if obj is not an object or has no ID
        """
        if not isinstance(obj, Mapping):
            raise ValueError(f"Post entry is not an object: {type(obj).__name__}")
        if obj.get("ID") is None:
            raise ValueError("Post entry has no ID")
        return cls(
            id=_post_id(obj["ID"]),
            title=_text_field(obj, "post_title"),
            date=_text_field(obj, "post_date"),
            content=_text_field(obj, "post_content"),
        )

    @property
    def key(self) -> str:
        # Route parameters are strings; always compare on this form
        return str(self.id)


def _post_id(raw: Any) -> int:
    # bool is an int subclass; 3.0 is accepted as 3
    if isinstance(raw, bool):
        raise ValueError(f"Post ID is not a number: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise ValueError(f"Post ID is not an integer: {raw!r}")


def _text_field(obj: Mapping[str, Any], name: str) -> str:
    value = obj.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Post field {name} is not a string: {type(value).__name__}")
    return value


@dataclass(frozen=True)
class PostSummary:
    """Listing entry for the home page. `date` is the upstream string, unmodified."""

    id: str
    title: str
    date: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title, "date": self.date}


@dataclass(frozen=True)
class PostDetail:
    id: str
    title: str
    date: str
    content: str

    @property
    def is_empty(self) -> bool:
        """True for the shape returned when the requested id was not found."""
        return not (self.title or self.date or self.content)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title, "date": self.date, "content": self.content}


@dataclass(frozen=True)
class RouteKey:
    id: str

    def to_params(self) -> dict[str, Mapping[str, str]]:
        return {"params": {"id": self.id}}
