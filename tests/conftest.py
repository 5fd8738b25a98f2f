import matplotlib

matplotlib.use("Agg")

import pytest

from trip_features import add_features
from trip_generator import make_trips


@pytest.fixture(scope="session")
def trips():
    return make_trips(20_000, seed=11)


@pytest.fixture(scope="session")
def featured(trips):
    return add_features(trips)


@pytest.fixture(scope="session")
def large_featured():
    return add_features(make_trips(100_000, seed=7))
