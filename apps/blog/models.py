"""
Blog post database models.

A blog post is stored as one row whose `author` column holds the
structured name document {"firstName": ..., "lastName": ...}.
"""
from uuid import uuid4
from sqlalchemy import Column, String, Text, DateTime, JSON, func

from apps.shared.database import Base


def new_post_id() -> str:
    return uuid4().hex


def empty_author() -> dict:
    return {"firstName": "", "lastName": ""}


class BlogPost(Base):
    """
    Persisted blog post.

    - id: generated at insert, never changed afterwards
    - title: required, non-empty
    - content: body text
    - author: JSON name document, always present (fields may be "")
    - created: insert time, never changed afterwards
    """
    __tablename__ = "blogpost"

    id = Column(String(32), primary_key=True, default=new_post_id)
    title = Column(Text, nullable=False)
    content = Column(Text)
    author = Column(JSON, nullable=False, default=empty_author)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<BlogPost id={self.id} title={self.title!r}>"
