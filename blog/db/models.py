"""Data models for the blog server."""

from dataclasses import dataclass
from typing import Any

# Alternative field names accepted when loading posts from a data file.
_FIELD_ALIASES = {
    "titulo": "title",
    "contenido": "body",
    "publicado": "published",
}


@dataclass(frozen=True)
class Post:
    """Represents a blog post."""

    id: str
    title: str
    body: str
    published: bool = False

    def __post_init__(self) -> None:
        # Validate required fields
        for field_name in ("id", "title"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{field_name.capitalize()} is required and must be a non-empty string")

        if "/" in self.id:
            raise ValueError(f"Post id must be a single path segment: {self.id!r}")
        if not isinstance(self.body, str):
            raise ValueError("body must be a string")
        if not isinstance(self.published, bool):
            raise ValueError("published must be a boolean")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Post":
        """Create a Post instance from a plain mapping, e.g. one JSON object."""
        normalized = {_FIELD_ALIASES.get(key, key): value for key, value in data.items()}

        # Filter out any extra fields that aren't part of the dataclass
        valid_fields = {"id", "title", "body", "published"}
        filtered_data = {k: v for k, v in normalized.items() if k in valid_fields}

        return cls(**filtered_data)

    def to_template_value(self) -> dict[str, Any]:
        """Convert post to the mapping exposed to templates."""
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "published": self.published,
        }
