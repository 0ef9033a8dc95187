from credential_service.db import check_db_connection


def test_root_reports_running(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Auth Service is up and running!"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data


def test_ready_when_database_reachable(client):
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_ready_reports_unavailable_database(client, app, monkeypatch):
    monkeypatch.setattr("credential_service.routes.health.check_db_connection", lambda _factory: False)

    response = client.get("/ready")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["database"] == "disconnected"


def test_check_db_connection(app, client):
    assert check_db_connection(app.state.session_factory) is True


def test_cors_headers(client):
    response = client.get("/", headers={"Origin": "http://example.com"})
    assert response.headers.get("access-control-allow-origin") in ("*", "http://example.com")
