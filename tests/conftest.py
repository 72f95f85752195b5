"""Pytest configuration and shared fixtures for the markhtml test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from markhtml.options import HtmlRendererOptions
from markhtml.renderers import HtmlRenderer, OutputBuffer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def out() -> OutputBuffer:
    """Provide an empty output buffer."""
    return OutputBuffer()


@pytest.fixture
def renderer() -> HtmlRenderer:
    """Provide an HTML renderer with default options."""
    return HtmlRenderer()


@pytest.fixture
def toc_renderer() -> HtmlRenderer:
    """Provide an HTML renderer with table-of-contents generation enabled."""
    return HtmlRenderer(HtmlRendererOptions(include_toc=True))
