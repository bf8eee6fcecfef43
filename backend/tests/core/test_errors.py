"""Error Hierarchy: codes, kinds and the {"error": ...} envelope."""

from blog_api.core.errors import (
    BlogError, ErrorKind, PostNotFoundError, PostValidationError,
)


def test_validation_error_shape():
    err = PostValidationError("title is missing", "title")
    assert isinstance(err, BlogError)
    assert err.kind is ErrorKind.VALIDATION
    assert err.code == "VALIDATION_ERROR"
    assert err.field == "title"
    assert err.to_response() == {"error": "title is missing"}
    assert str(err) == "title is missing"


def test_not_found_error_message_carries_id():
    err = PostNotFoundError(100)
    assert err.kind is ErrorKind.NOT_FOUND
    assert err.code == "POST_NOT_FOUND"
    assert err.post_id == 100
    assert err.to_response() == {"error": "The blog post does not exist. ID: 100"}


def test_error_kinds_are_distinct():
    assert len(ErrorKind) == 3
    assert ErrorKind.VALIDATION.value == "validation"
