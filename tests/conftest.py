"""Pytest configuration and fixtures for reissue tests."""

import loguru
import pytest
import pytest_asyncio

from reissue.config.settings import Environment, LogLevel, Settings
from reissue.domain import RequestConfig, Response
from reissue.events import BaseEmitter, EventEmitter
from reissue.http import HttpClient
from reissue.infrastructure.logging import reset_logging

from .fixtures.outcomes import Attempt, Outcome


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    return mocker.Mock(spec=loguru.logger)


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    return mocker.Mock(spec=BaseEmitter)


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that subscribe to events."""
    return EventEmitter(mock_logger)


@pytest_asyncio.fixture
async def http_client(mock_logger):
    """Provide an opened HttpClient with a mocked logger."""
    async with HttpClient(logger=mock_logger) as client:
        yield client


@pytest.fixture
def script_dispatch(monkeypatch):
    """Replace HttpClient._dispatch with a scripted sequence of outcomes.

    Usage:
        attempts = script_dispatch(client, network_failure(), success())

    Returns the list of Attempt snapshots, one per dispatch.
    """

    def _script(client: HttpClient, *outcomes: Outcome) -> list[Attempt]:
        remaining = list(outcomes)
        attempts: list[Attempt] = []

        async def dispatch(config: RequestConfig) -> Response:
            attempts.append(
                Attempt(
                    config=config,
                    retry_count=config.retry_count,
                    connector=config.connector,
                    http_connector=config.http_connector,
                    https_connector=config.https_connector,
                )
            )
            outcome = remaining.pop(0)(config)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        monkeypatch.setattr(client, "_dispatch", dispatch)
        return attempts

    return _script
