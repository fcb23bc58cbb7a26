"""
Pytest configuration and shared fixtures for irsource tests.
"""

import pytest

from irsource.parsing.tree_sitter_wrapper import SourceReconstructor

from .samples import MethodBuilder


@pytest.fixture(scope="session")
def reconstructor():
    """One tree-sitter backed reconstructor for the whole session."""
    return SourceReconstructor()


@pytest.fixture
def method_builder():
    """Factory for MethodBuilder instances."""
    return MethodBuilder
