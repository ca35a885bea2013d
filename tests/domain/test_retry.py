"""Tests for RetryPolicy and the default retry condition."""

import pytest

from reissue.domain import RequestError, Response, RetryPolicy, ValidationError
from reissue.domain.retry import is_network_error


class TestRetryPolicy:
    def test_defaults(self) -> None:
        policy = RetryPolicy()

        assert policy.max_retries == 3
        assert policy.retry_condition is is_network_error

    def test_is_immutable(self) -> None:
        policy = RetryPolicy()

        with pytest.raises(AttributeError):
            policy.max_retries = 5  # type: ignore[misc]

    @pytest.mark.parametrize("value", [-1, True, 2.5, "3", None])
    def test_rejects_invalid_max_retries(self, value) -> None:
        with pytest.raises(ValidationError, match="max_retries"):
            RetryPolicy(max_retries=value)

    def test_rejects_non_callable_condition(self) -> None:
        with pytest.raises(ValidationError, match="callable"):
            RetryPolicy(retry_condition="always")  # type: ignore[arg-type]

    def test_zero_retries_is_valid(self) -> None:
        assert RetryPolicy(max_retries=0).allows(0) is False

    @pytest.mark.parametrize("count,expected", [(0, True), (2, True), (3, False), (4, False)])
    def test_allows_below_limit(self, count: int, expected: bool) -> None:
        assert RetryPolicy(max_retries=3).allows(count) is expected


class TestIsNetworkError:
    def test_true_without_response(self) -> None:
        assert is_network_error(RequestError("connect ECONNREFUSED")) is True

    def test_false_with_response(self) -> None:
        error = RequestError("Not Found", response=Response(status=404))
        assert is_network_error(error) is False

    def test_plain_exceptions_have_no_response(self) -> None:
        assert is_network_error(ValueError("boom")) is True
