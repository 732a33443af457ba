"""End-to-end tests for how failed requests end their unit of work."""

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from loop.adapter.supabase.realtime import MockRealtimeTransport
from loop.domain.repository import TransactionManager
from loop.domain.service import RealtimeTransport
from loop.interface.api.app import create_app
from loop.persistence.repository.inmemory import InMemoryTransactionManager
from tests.conftest import bearer
from tests.di import build_test_container


class SharedUnitOfWorkProvider(Provider):
    """Hands every request the same transaction manager and transport."""

    def __init__(
        self,
        transaction_manager: InMemoryTransactionManager,
        transport: MockRealtimeTransport,
    ) -> None:
        super().__init__()
        self.transaction_manager = transaction_manager
        self.transport = transport

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self) -> TransactionManager:
        return self.transaction_manager

    @provide(scope=Scope.APP)
    def get_realtime_transport(self) -> RealtimeTransport:
        return self.transport


@pytest.fixture
def transaction_manager():
    return InMemoryTransactionManager()


@pytest.fixture
def transport():
    return MockRealtimeTransport()


@pytest.fixture
def lifecycle_client(monkeypatch, transaction_manager, transport):
    """Client with a short request timeout and observable unit of work."""
    monkeypatch.setenv("API__REQUEST_TIMEOUT_SECONDS", "0.2")
    container = build_test_container(
        overrides=[SharedUnitOfWorkProvider(transaction_manager, transport)]
    )
    return TestClient(create_app(container=container))


def _create_loop(client, headers):
    response = client.post(
        "/loops", json={"content": {"type": "text", "text": "root"}}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["loop"]


class TestRequestLifecycle:
    """Tests for commit and rollback at the end of a request."""

    def test_successful_request_commits(self, lifecycle_client, transaction_manager):
        _create_loop(lifecycle_client, bearer())

        assert transaction_manager.rollback_only is False

    def test_timed_out_request_returns_503_and_rolls_back(
        self, lifecycle_client, transaction_manager, transport
    ):
        alice = bearer()
        root = _create_loop(lifecycle_client, alice)
        transport.delay = 1.0

        response = lifecycle_client.post(
            "/loops/branch",
            json={"parent_id": root["id"], "content": {"type": "text", "text": "slow"}},
            headers=alice,
        )

        assert response.status_code == 503
        assert response.json() == {"error": "Service unavailable"}
        assert transaction_manager.rollback_only is True

    def test_error_response_rolls_back(self, lifecycle_client, transaction_manager):
        root = _create_loop(lifecycle_client, bearer())

        response = lifecycle_client.delete(f"/loops/{root['id']}", headers=bearer())

        assert response.status_code == 403
        assert transaction_manager.rollback_only is True
