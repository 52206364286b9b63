import pytest # type: ignore

def pytest_configure(config):
    """Add markers to the pytest configuration."""
    config.addinivalue_line("markers", "quick: mark test as quick to run")
    config.addinivalue_line("markers", "full: mark test as part of the full test suite")
    config.addinivalue_line("markers", "slow: mark test as very slow to run")


@pytest.fixture
def names():
    """Canonical smoke-test stream: five distinct names, one repeated."""
    return ["Sigma Balls", "Ridho", "Rizki", "Juli", "Juli", "Siti"]


@pytest.fixture
def distinct_items():
    """Factory for lists of n distinct strings."""
    def _make(n: int, prefix: str = "item"):
        return [f"{prefix}_{i}" for i in range(n)]
    return _make
