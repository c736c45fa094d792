import random
from datetime import datetime, timezone

import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def now():
    return datetime(2024, 3, 15, 16, 0, tzinfo=timezone.utc)
