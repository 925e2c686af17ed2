from __future__ import annotations

import pytest

from flyprovider.domain.lifecycle import ApplicationReconciler
from tests.support.remote import FakeRemoteOperations


@pytest.fixture
def remote() -> FakeRemoteOperations:
    return FakeRemoteOperations()


@pytest.fixture
def reconciler(remote: FakeRemoteOperations) -> ApplicationReconciler:
    return ApplicationReconciler(remote=remote)


@pytest.fixture(autouse=True)
def _fly_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLY_API_TOKEN", "test-token")
    monkeypatch.delenv("FLY_API_URL", raising=False)
