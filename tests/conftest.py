import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from config import CacheConfiguration, CacheType, ReplacementPolicy


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_config():
    def _make(organization, capacity_bytes=16, block_size=4, ways=None, policy=None):
        return CacheConfiguration(
            capacity_bytes=capacity_bytes,
            block_size=block_size,
            organization=CacheType.parse(organization),
            ways=ways,
            policy=ReplacementPolicy.parse(policy) if policy is not None else None,
        )
    return _make
