"""Unit tests for the ownership guard."""

import pytest

from agora.domain.error import NotAuthorizedError
from agora.domain.service.ownership import assert_owner
from agora.domain.value import UserId


def test_owner_passes():
    assert_owner("post", 1, UserId(7), UserId(7))


def test_non_owner_is_rejected():
    with pytest.raises(NotAuthorizedError) as exc_info:
        assert_owner("comment", 3, UserId(7), UserId(8))

    error = exc_info.value
    assert error.resource == "comment"
    assert error.resource_id == 3
    assert error.user_id == 8
