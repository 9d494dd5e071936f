import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# env_loader validates this at import time, so it must exist first.
os.environ.setdefault(
    "IRONLEDGER_STATE_PATH", str(Path(tempfile.gettempdir()) / "ironledger-test.json")
)

from ironledger.app import env_loader  # noqa: F401, E402
from ironledger.app import dependencies  # noqa: E402
from ironledger.db import MemoryKeyValueStore  # noqa: E402
from ironledger.session import SessionStore  # noqa: E402

from ._factories import FakeClock, SetFactory, ExerciseFactory, SessionFactory  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_state_file(tmp_path: Path, monkeypatch) -> Generator[None, None, None]:
    """Point the real store at a per-test file.

    Any code path that builds the process-wide store without an override
    writes into the test's tmp dir instead of a shared location.
    """
    monkeypatch.setenv("IRONLEDGER_STATE_PATH", str(tmp_path / "state.json"))
    dependencies.session_store.cache_clear()
    yield
    dependencies.session_store.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def store(storage: MemoryKeyValueStore, clock: FakeClock) -> SessionStore:
    return SessionStore(storage, clock=clock)


@pytest.fixture(scope="session")
def set_factory() -> SetFactory:
    return SetFactory()


@pytest.fixture(scope="session")
def exercise_factory() -> ExerciseFactory:
    return ExerciseFactory()


@pytest.fixture(scope="session")
def session_factory() -> SessionFactory:
    return SessionFactory()
