"""
Fixtures for markup_lint tests.
"""

import pytest

from markup_lint.rules import Linter, create_default_linter


@pytest.fixture
def calls():
    """Shared call log for RecordingRule instances."""
    return []


@pytest.fixture
def linter():
    """Empty Linter instance."""
    return Linter()


@pytest.fixture
def default_linter():
    """Linter with all built-in rules."""
    return create_default_linter()


@pytest.fixture
def simple_html():
    return '<div class="a b" id=foo data-x>'
