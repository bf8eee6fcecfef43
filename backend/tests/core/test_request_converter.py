"""Request Converter: body validation, id allocation order, timestamp pass-through."""

import pytest

from blog_api.core.errors import PostValidationError
from blog_api.core.id_allocator import IdAllocator
from blog_api.core.request_converter import (
    convert_new_post, convert_post_update, string_value,
)


def _clock():
    return 1_700_000_000_000


# --- string_value -----------------------------------------------------------

def test_string_value_returns_text():
    assert string_value({"title": "Hi"}, "title") == "Hi"


@pytest.mark.parametrize("body", [{}, {"title": None}, {"title": 5}, {"title": ""}])
def test_string_value_missing_or_not_text(body):
    with pytest.raises(PostValidationError, match="^title is missing$") as exc_info:
        string_value(body, "title")
    assert exc_info.value.field == "title"


# --- convert_new_post -------------------------------------------------------

def test_new_post_gets_allocated_id_and_equal_timestamps():
    allocator = IdAllocator()
    post = convert_new_post({"title": "T", "content": "C"}, allocator, _clock)
    assert post.id == 0
    assert post.created_at == post.modified_at == _clock()
    assert allocator.peek() == 1


def test_new_post_missing_content():
    with pytest.raises(PostValidationError, match="content is missing"):
        convert_new_post({"title": "T"}, IdAllocator(), _clock)


def test_new_post_missing_title_reported_first():
    with pytest.raises(PostValidationError, match="title is missing"):
        convert_new_post({}, IdAllocator(), _clock)


def test_failed_conversion_does_not_consume_an_id():
    allocator = IdAllocator()
    with pytest.raises(PostValidationError):
        convert_new_post({"title": "T"}, allocator, _clock)
    assert allocator.peek() == 0


@pytest.mark.parametrize("body", [None, [], "title", 3])
def test_non_object_body_rejected(body):
    with pytest.raises(PostValidationError, match="JSON object"):
        convert_new_post(body, IdAllocator(), _clock)


def test_extra_id_field_is_ignored_on_create():
    post = convert_new_post({"id": 50, "title": "T", "content": "C"}, IdAllocator(), _clock)
    assert post.id == 0


# --- convert_post_update ----------------------------------------------------

def test_update_keeps_caller_id_and_uses_clock_when_no_timestamp():
    post = convert_post_update({"title": "T", "content": "C"}, 4, _clock)
    assert post.id == 4
    assert post.created_at == post.modified_at == _clock()


def test_update_passes_through_supplied_timestamp():
    post = convert_post_update(
        {"title": "T", "content": "C", "createdAt": 123}, 4, _clock,
    )
    assert post.modified_at == 123


@pytest.mark.parametrize("stamp", [-1, "yesterday", 1.5, True])
def test_update_rejects_bad_timestamp(stamp):
    with pytest.raises(PostValidationError, match="createdAt"):
        convert_post_update({"title": "T", "content": "C", "createdAt": stamp}, 0, _clock)


def test_update_missing_content():
    with pytest.raises(PostValidationError, match="content is missing"):
        convert_post_update({"title": "T"}, 0, _clock)


# --- raw bodies (non-JSON content types) ------------------------------------

def test_raw_bytes_body_is_decoded_as_json():
    post = convert_new_post(b'{"title": "T", "content": "C"}', IdAllocator(), _clock)
    assert (post.title, post.content) == ("T", "C")


def test_undecodable_bytes_body_rejected():
    with pytest.raises(PostValidationError, match="^request body is not valid JSON$"):
        convert_new_post(b"title=T&content=C", IdAllocator(), _clock)


def test_raw_json_array_still_rejected_as_non_object():
    with pytest.raises(PostValidationError, match="JSON object"):
        convert_new_post(b'["T", "C"]', IdAllocator(), _clock)


def test_empty_bytes_body_rejected_as_non_object():
    with pytest.raises(PostValidationError, match="JSON object"):
        convert_new_post(b"", IdAllocator(), _clock)
