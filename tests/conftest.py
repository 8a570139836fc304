"""Pytest configuration for naked-text-lint tests."""

import pytest

from naked_text_lint import DiagnosticCollection


@pytest.fixture
def collection() -> DiagnosticCollection:
    """Provide an empty in-memory diagnostic sink."""
    return DiagnosticCollection()
