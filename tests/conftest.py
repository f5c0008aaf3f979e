"""
Shared fixtures for the courtroom tests.
"""

import os
import random
import sys
import tempfile
from pathlib import Path

# The API module reads settings at import time.
os.environ.setdefault("COURTROOM_UPLOAD_DIR", tempfile.mkdtemp(prefix="courtroom-uploads-"))
os.environ.setdefault("COURTROOM_RESPONSE_DELAY_SECONDS", "0")
os.environ.setdefault("COURTROOM_JUDGMENT_DELAY_SECONDS", "0")

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from courtroom.config import Settings
from courtroom.models import Role
from courtroom.session import CourtroomSession


class ScriptedRandom(random.Random):
    """Random source whose ``random()`` returns queued values first.

    Everything else (choice, randint, ...) comes from the seeded generator.
    """

    def __init__(self, values=(), seed=7):
        super().__init__(seed)
        self.values = list(values)

    def random(self):
        if self.values:
            return self.values.pop(0)
        return super().random()


@pytest.fixture
def settings():
    """Default thresholds, no artificial delays"""
    return Settings(response_delay_seconds=0, judgment_delay_seconds=0)


@pytest.fixture
def quiet_settings():
    """Opposing counsel never attaches citations"""
    return Settings(response_delay_seconds=0, judgment_delay_seconds=0, citation_probability=0.0)


@pytest.fixture
def make_session(settings):
    def _make(title="State of Maharashtra vs Rajesh Kumar", case_type="criminal",
              role=Role.PROSECUTION, rng=None, **overrides):
        session_settings = settings.model_copy(update=overrides) if overrides else settings
        return CourtroomSession.open(
            title, case_type, role, settings=session_settings, rng=rng or random.Random(42),
        )
    return _make
