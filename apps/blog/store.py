"""
Blog post document store.

Thin client over one SQLAlchemy session. Each method issues a single
statement against the `blogpost` table, and each write commits on its own.
Errors are rolled back and re-raised for the service layer to map.

Usage:
    @router.get("/blogpost/{post_id}")
    def get_post(post_id: str, store: BlogPostStore = Depends(get_store)):
        post = store.find_by_id(post_id)
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.blog.models import BlogPost, empty_author

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content", "author")


class BlogPostStore:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _write(self) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def find(self, limit: int) -> List[BlogPost]:
        """Up to `limit` posts in the table's natural order."""
        return self.db.query(BlogPost).limit(limit).all()

    def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        return self.db.get(BlogPost, post_id)

    def insert(self, title: str, content: str, author: Optional[Dict[str, str]] = None) -> BlogPost:
        """Insert a new post; id and created are assigned here."""
        post = BlogPost(title=title, content=content, author={**empty_author(), **(author or {})})
        with self._write():
            self.db.add(post)
        self.db.refresh(post)
        logger.info("Inserted blog post %s", post.id)
        return post

    def update_by_id(self, post_id: str, values: Dict[str, Any]) -> int:
        """
        Set only the given fields on one post.

        Unknown keys raise ValueError; an empty `values` touches nothing.
        Returns the number of rows matched (0 or 1).
        """
        unknown = set(values) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields not updatable: {', '.join(sorted(unknown))}")
        if not values:
            return 0

        if "author" in values:
            values = {**values, "author": {**empty_author(), **(values["author"] or {})}}

        with self._write():
            matched = (
                self.db.query(BlogPost)
                .filter(BlogPost.id == post_id)
                .update(values, synchronize_session=False)
            )
        logger.info("Updated blog post %s (%s)", post_id, ", ".join(sorted(values)))
        return matched

    def delete_by_id(self, post_id: str) -> int:
        """Remove one post. Missing ids are not an error; returns rows removed."""
        with self._write():
            removed = (
                self.db.query(BlogPost)
                .filter(BlogPost.id == post_id)
                .delete(synchronize_session=False)
            )
        if removed:
            logger.info("Deleted blog post %s", post_id)
        return removed


def get_store(db: Session = Depends(get_db)) -> BlogPostStore:
    """FastAPI dependency handing each request a store bound to its session."""
    return BlogPostStore(db)
