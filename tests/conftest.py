import os
import random
import sys
import tempfile
from datetime import date, datetime
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep test runs out of the repo's data/ and config/ directories.
_TEST_HOME = Path(tempfile.mkdtemp(prefix="goalboard-tests-"))
os.environ.setdefault("GOALBOARD_DATA_DIR", str(_TEST_HOME / "data"))
os.environ.setdefault("GOALBOARD_CONFIG_DIR", str(_TEST_HOME / "config"))
os.environ.setdefault("GOALBOARD_LOG_DIR", str(_TEST_HOME / "logs"))

from goalboard.capability_registry import build_default_registry  # noqa: E402
from goalboard.category_policy import CategoryPolicyTable  # noqa: E402
from goalboard.config_manager import SystemConfig  # noqa: E402
from goalboard.estimation import EstimationEngine  # noqa: E402
from goalboard.goal_orchestrator import GoalOrchestrator  # noqa: E402
from goalboard.goal_store import InMemoryGoalStore  # noqa: E402
from goalboard.synthesis import DataSynthesizer  # noqa: E402

FIXED_TODAY = date(2025, 1, 1)
FIXED_NOW = datetime(2025, 1, 1, 9, 30, 0)


@pytest.fixture
def today():
    return FIXED_TODAY


@pytest.fixture(scope="session")
def policies():
    return CategoryPolicyTable.from_yaml()


@pytest.fixture(scope="session")
def registry():
    return build_default_registry()


@pytest.fixture
def engine(policies):
    return EstimationEngine(policies, today=lambda: FIXED_TODAY)


@pytest.fixture
def synthesizer(registry):
    return DataSynthesizer(registry, rng=random.Random(42), today=lambda: FIXED_TODAY, config=SystemConfig())


@pytest.fixture
def store():
    return InMemoryGoalStore()


@pytest.fixture
def orchestrator(policies, registry, store, synthesizer):
    return GoalOrchestrator(
        policies=policies,
        registry=registry,
        store=store,
        synthesizer=synthesizer,
        config=SystemConfig(),
        today=lambda: FIXED_TODAY,
        now=lambda: FIXED_NOW,
    )
