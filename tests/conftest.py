"""Shared fixtures for the Book Oracle test suite."""

import os

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from book_oracle.core import BookContext, OracleResponse, Reflection  # noqa: E402


@pytest.fixture
def oracle_payload():
    """A well-formed provider payload using wire (camelCase) names."""
    return {
        "empathy": "It is heavy to measure your life against everyone else's clock.",
        "bookContext": {
            "title": "T",
            "author": "A",
            "summary": "S",
        },
        "reflection": {
            "quote": "Q",
            "analysis": "An",
        },
        "tinyStep": "Step",
    }


@pytest.fixture
def oracle_response():
    """Hand-built response matching oracle_payload."""
    return OracleResponse(
        empathy="It is heavy to measure your life against everyone else's clock.",
        book_context=BookContext(title="T", author="A", summary="S"),
        reflection=Reflection(quote="Q", analysis="An"),
        tiny_step="Step",
    )
