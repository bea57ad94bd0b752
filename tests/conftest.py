"""Pytest configuration and shared fixtures for the mmarkfmt test suite.

This module provides shared fixtures, test configuration, and the Hypothesis
profiles used by the property-based tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import make_list, make_table

from mmarkfmt.ast import BlockQuote, Document, Heading, Paragraph, Text
from mmarkfmt.options import MmarkRendererOptions
from mmarkfmt.renderers import MmarkRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def renderer() -> MmarkRenderer:
    """Provide a renderer with default options.

    Returns
    -------
    MmarkRenderer
        Renderer wrapping at the default width of 80.

    """
    return MmarkRenderer()


@pytest.fixture
def narrow_renderer() -> MmarkRenderer:
    """Provide a renderer wrapping at 20 characters."""
    return MmarkRenderer(MmarkRendererOptions(text_width=20))


@pytest.fixture
def sample_document() -> Document:
    """Provide a small document mixing the common block constructs.

    Returns
    -------
    Document
        Heading, paragraph, list, quote and table.

    """
    return Document(
        children=[
            Heading(level=1, heading_id="sample-document", children=[Text("Sample Document")]),
            Paragraph(children=[Text("This is a sample paragraph with enough words to need wrapping at a narrow width.")]),
            make_list("First item", "Second item"),
            BlockQuote(children=[Paragraph(children=[Text("Quoted text")])]),
            make_table([["Name", "Value"]], [["a", "1"], ["bb", "22"]]),
        ]
    )
