import matplotlib

matplotlib.use("Agg")

import pytest
from matplotlib import pyplot as plt

from rallybump.sample_data import reference_competitors, reference_stages


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def stages():
    return reference_stages()


@pytest.fixture
def competitors(stages):
    return reference_competitors(stages)
