from __future__ import annotations

import pytest

from number_format import FormatRegistry, Separators


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def registry() -> FormatRegistry:
    """English separators; exponential is default (and thus current)."""
    return FormatRegistry(["exponential", "name", "scientific"], "exponential")


@pytest.fixture()
def name_registry() -> FormatRegistry:
    """Name scheme as current, exponential as default."""
    return FormatRegistry(["exponential", "name", "scientific"], "exponential", current_format="name")


@pytest.fixture()
def de_registry() -> FormatRegistry:
    """German separators: ',' decimal, '.' thousand."""
    return FormatRegistry(
        ["name", "exponential", "scientific"],
        "exponential",
        current_format="name",
        separators=Separators(",", "."),
    )


@pytest.fixture()
def plain_registry() -> FormatRegistry:
    return FormatRegistry(["plain", "exponential", "name"], "plain")
