import os

# cheap hashing for the test run; must be set before codesync.security is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from codesync.db import reset_store
from codesync.services.rooms import hub


@pytest.fixture(autouse=True)
def fresh_state():
    reset_store(seed=True)
    hub.connections.clear()
    hub.usernames.clear()
    hub.rooms.clear()
    yield
