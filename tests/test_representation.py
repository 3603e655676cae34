"""Tests for the stored-post to API-representation mapping."""

from apps.blog.models import BlogPost
from apps.blog.representation import author_display, to_representation


def make_post(**author):
    return BlogPost(id="abc123", title="The Blah", content="Yup Yup", author=author)


def test_author_joins_first_and_last_name():
    assert author_display({"firstName": "Darth", "lastName": "Vader"}) == "Darth Vader"


def test_author_blank_names_give_empty_string():
    assert author_display({"firstName": "", "lastName": ""}) == ""


def test_author_partial_names_are_trimmed():
    assert author_display({"firstName": "Luke"}) == "Luke"
    assert author_display({"lastName": "Kirk"}) == "Kirk"
    assert author_display({"firstName": None, "lastName": "D2"}) == "D2"


def test_author_missing_structure_gives_empty_string():
    assert author_display(None) == ""
    assert author_display({}) == ""


def test_representation_has_exactly_four_fields():
    rep = to_representation(make_post(firstName="James", lastName="Kirk"))

    assert rep == {
        "id": "abc123",
        "title": "The Blah",
        "content": "Yup Yup",
        "author": "James Kirk",
    }


def test_representation_does_not_mutate_post():
    post = make_post(firstName="R2", lastName="D2")
    to_representation(post)

    assert post.author == {"firstName": "R2", "lastName": "D2"}
