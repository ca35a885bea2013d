"""Retry middleware - failure hook and error classification."""

from .categoriser import NON_RETRYABLE_CODES, error_code, is_retry_allowed
from .interceptor import RetryInterceptor, install_retry

__all__ = [
    "NON_RETRYABLE_CODES",
    "RetryInterceptor",
    "error_code",
    "install_retry",
    "is_retry_allowed",
]
