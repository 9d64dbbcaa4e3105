"""
Jackut API のテスト
"""

import threading

import pytest
from fastapi.testclient import TestClient

from jackut.adapters.storage.memory import MemorySnapshotAdapter
from jackut.api.dependencies import (
    get_service,
    get_storage,
    reset_dependencies,
    set_service,
)
from jackut.api.main import create_app
from jackut.core.config import get_settings, reload_settings
from jackut.domain.services.interaction import InteractionService


@pytest.fixture
def service():
    """メモリストレージを使うサービス"""
    service = InteractionService(storage=MemorySnapshotAdapter())
    set_service(service)
    yield service
    reset_dependencies()


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_service] = lambda: service
    return TestClient(app)


def login(client: TestClient, name: str) -> dict[str, str]:
    """アカウントを作成し、セッションヘッダーを返す"""
    response = client.post(
        "/v1/accounts",
        json={"login": name, "password": "senha", "name": name.capitalize()},
    )
    assert response.status_code == 201
    response = client.post("/v1/sessions", json={"login": name, "password": "senha"})
    assert response.status_code == 200
    return {"X-Session-Id": response.json()["session_id"]}


class TestAccountsAPI:
    """アカウント・セッション"""

    def test_create_account(self, client):
        response = client.post(
            "/v1/accounts", json={"login": "alice", "password": "senha", "name": "Alice"}
        )
        assert response.status_code == 201
        assert response.json() == {"login": "alice", "name": "Alice"}
        assert response.headers["X-API-Version"] == "1.0.0"

    def test_duplicate_account_conflict(self, client):
        login(client, "alice")
        response = client.post(
            "/v1/accounts", json={"login": "alice", "password": "x", "name": "x"}
        )
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "AccountAlreadyExistsError"
        assert body["message"] == "Conta com esse nome já existe."

    def test_invalid_credentials(self, client):
        login(client, "alice")
        response = client.post("/v1/sessions", json={"login": "alice", "password": "x"})
        assert response.status_code == 401

    def test_missing_session_header(self, client):
        response = client.put("/v1/profile", json={"attribute": "cidade", "value": "Recife"})
        assert response.status_code == 401
        assert response.json()["error"] == "UnknownSessionError"

    def test_profile(self, client):
        headers = login(client, "alice")
        response = client.put(
            "/v1/profile", json={"attribute": "cidade", "value": "Recife"}, headers=headers
        )
        assert response.status_code == 200

        response = client.get("/v1/accounts/alice/attributes/cidade")
        assert response.json()["value"] == "Recife"

        response = client.get("/v1/accounts/alice/attributes/idade")
        assert response.status_code == 404

    def test_remove_account(self, client):
        headers = login(client, "alice")
        response = client.delete("/v1/accounts/me", headers=headers)
        assert response.status_code == 200

        response = client.get("/v1/accounts/alice/attributes/name")
        assert response.status_code == 404


class TestRelationshipsAPI:
    """関係性エンドポイント"""

    def test_friend_request_flow(self, client):
        alice = login(client, "alice")
        bob = login(client, "bob")

        response = client.post("/v1/friends/bob", headers=alice)
        assert response.json()["status"] == "pending"

        response = client.post("/v1/friends/alice", headers=bob)
        assert response.json()["status"] == "friends"

        response = client.get("/v1/accounts/alice/friends")
        assert response.json()["items"] == ["bob"]

        response = client.get("/v1/accounts/alice/friends/bob")
        assert response.json()["related"] is True

    def test_enemy_blocks_crush(self, client):
        alice = login(client, "alice")
        bob = login(client, "bob")
        client.post("/v1/enemies/alice", headers=bob)

        response = client.post("/v1/crushes/bob", headers=alice)

        assert response.status_code == 403
        assert response.json()["message"] == "Função inválida: Bob é seu inimigo."

    def test_unknown_target(self, client):
        alice = login(client, "alice")
        response = client.post("/v1/idols/zoe", headers=alice)
        assert response.status_code == 404


class TestMessagesAPI:
    """メッセージとコミュニティ"""

    def test_send_and_read(self, client):
        alice = login(client, "alice")
        bob = login(client, "bob")

        client.post("/v1/messages/bob", json={"text": "oi"}, headers=alice)

        response = client.post("/v1/messages/read", headers=bob)
        assert response.json() == {"message": "Mensagem de alice: oi"}

        response = client.post("/v1/messages/read", headers=bob)
        assert response.status_code == 404

    def test_community_broadcast(self, client):
        alice = login(client, "alice")
        bob = login(client, "bob")

        response = client.post(
            "/v1/communities", json={"name": "C", "description": "d"}, headers=alice
        )
        assert response.status_code == 201
        assert response.json()["owner"] == "alice"

        client.post("/v1/communities/C/members", headers=bob)
        response = client.post("/v1/communities/C/messages", json={"text": "hi"}, headers=alice)
        assert response.json()["recipients"] == 2

        response = client.post("/v1/communities/messages/read", headers=bob)
        assert response.json()["message"] == "Mensagem de alice: hi"

        response = client.delete("/v1/communities/C/members/me", headers=alice)
        assert response.json()["deleted"] is True
        assert client.get("/v1/communities/C").status_code == 404


class TestHealthAPI:
    def test_health(self, client):
        login(client, "alice")
        response = client.get("/v1/health")
        assert response.status_code == 200
        assert response.json()["components"]["accounts"] == 1

    def test_admin_reset(self, client, service):
        login(client, "alice")
        response = client.post("/v1/admin/reset")
        assert response.status_code == 200
        assert service.summary()["accounts"] == 0


class TestDependencies:
    """依存性シングルトンのテスト"""

    @pytest.fixture(autouse=True)
    def memory_backend(self, monkeypatch):
        monkeypatch.setenv("JACKUT_STORAGE_BACKEND", "memory")
        reload_settings()
        reset_dependencies()
        yield
        reset_dependencies()
        get_settings.cache_clear()

    def test_concurrent_first_calls_share_one_service(self):
        """初回の同時呼び出しでもサービスは1つだけ生成される"""
        barrier = threading.Barrier(8)
        services = []

        def resolve():
            barrier.wait()
            services.append(get_service())

        threads = [threading.Thread(target=resolve) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert len(services) == 8
        assert all(service is services[0] for service in services)
        assert isinstance(get_storage(), MemorySnapshotAdapter)

    def test_lifespan_creates_service(self):
        with TestClient(create_app()) as client:
            assert client.get("/v1/health").status_code == 200
            first = get_service()
        assert get_service() is first
