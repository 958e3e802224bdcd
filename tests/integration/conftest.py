import pytest


@pytest.fixture(autouse=True)
def fake_networks():
    """Integration tests talk to ape's local test network itself."""
