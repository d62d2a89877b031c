"""Shared test fixtures for yandex_translate.

Provides reusable request/response payloads and keeps the global output
manager isolated between tests.  These fixtures are automatically
discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from typing import Any

import pytest

from yandex_translate.models import TranslateRequest
from yandex_translate.output import OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Install a silent, colourless OutputManager and reset it afterwards.

    The manager binds to sys.stderr at creation time; pytest's capture
    swaps that stream per test, so a stale manager would write to a
    closed file.
    """
    set_output(OutputManager(no_color=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Payload fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hello_request() -> TranslateRequest:
    """Single-text request with auto-detected source language."""
    return TranslateRequest(folder_id="f1", texts=["Hello"], target_language_code="ru")


@pytest.fixture
def hello_response_body() -> dict[str, Any]:
    """Service reply to :func:`hello_request`."""
    return {"translations": [{"text": "Привет", "detectedLanguageCode": "en"}]}
