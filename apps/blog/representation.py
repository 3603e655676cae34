"""Mapping from a stored blog post to the shape clients see."""

from typing import Any, Optional

from apps.blog.models import BlogPost


def author_display(author: Optional[dict]) -> str:
    """Join first and last name with one space; "" when both are blank."""
    author = author or {}
    first = author.get("firstName") or ""
    last = author.get("lastName") or ""
    return f"{first} {last}".strip()


def to_representation(post: BlogPost) -> dict[str, Any]:
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "author": author_display(post.author),
    }
