"""Shared BDD fixtures for storefront scenarios."""

import pytest


@pytest.fixture()
def outcome():
    """Container for the placed order id or the captured error."""
    return {"order_id": None, "exc": None}
