"""Tests for request payload schemas."""

import pytest
from pydantic import ValidationError

from apps.blog.schemas import BlogPostCreate, BlogPostUpdate


def test_create_requires_all_fields_in_order():
    with pytest.raises(ValidationError) as exc_info:
        BlogPostCreate.model_validate({})

    missing = [err["loc"][0] for err in exc_info.value.errors() if err["type"] == "missing"]
    assert missing == ["title", "content", "author"]


def test_create_rejects_empty_title():
    with pytest.raises(ValidationError):
        BlogPostCreate(title="", content="c", author={"firstName": "a", "lastName": "b"})


def test_create_author_fields_default_to_empty():
    payload = BlogPostCreate(title="t", content="c", author={})

    assert payload.author.model_dump() == {"firstName": "", "lastName": ""}


def test_update_changes_only_sent_fields():
    payload = BlogPostUpdate.model_validate({"id": "abc", "title": "New"})

    assert payload.changes() == {"title": "New"}


def test_update_changes_never_include_id_or_unknown_fields():
    payload = BlogPostUpdate.model_validate(
        {"id": "abc", "content": "c", "created": "2020-01-01", "extra": 1}
    )

    assert payload.changes() == {"content": "c"}


def test_update_author_is_dumped_as_document():
    payload = BlogPostUpdate.model_validate(
        {"id": "abc", "author": {"firstName": "Luke", "lastName": "Skywalker"}}
    )

    assert payload.changes() == {"author": {"firstName": "Luke", "lastName": "Skywalker"}}
