"""
Pydantic schemas for the Blog Post API.

Defines request/response models with validation.
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


class AuthorName(BaseModel):
    """Structured author name as stored on a post."""
    firstName: str = ""
    lastName: str = ""


class BlogPostCreate(BaseModel):
    """Schema for creating a blog post. Field order is the order missing fields are reported in."""
    title: str = Field(..., min_length=1)
    content: str
    author: AuthorName


class BlogPostUpdate(BaseModel):
    """
    Schema for updating a blog post. Every field but `id` is optional.
    `id` is kept as sent so a non-matching value of any type can be reported.
    """
    id: Optional[Any] = None
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    author: Optional[AuthorName] = None

    def changes(self) -> dict:
        """Updatable fields the client actually sent, ready for a partial update."""
        return self.model_dump(exclude={"id"}, exclude_unset=True, exclude_none=True)


class BlogPostResponse(BaseModel):
    """API representation of a blog post."""
    id: str
    title: str
    content: Optional[str] = None
    author: str


class BlogPostList(BaseModel):
    """Response body for the list endpoint."""
    blogpost: list[BlogPostResponse]
