import os

# Settings are read at import time; keep the limiter out of the way for tests
os.environ.setdefault("KITCHEN_UNITS_RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from kitchen_units.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
