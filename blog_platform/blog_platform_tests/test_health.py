from unittest.mock import patch

from blog_platform.blog_service.config import settings


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == settings.APP_NAME
    assert "timestamp" in response.json()


def test_ready(client):
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"
    assert response.json()["backend"] == "sqlite"
    assert response.json()["service"] == settings.APP_NAME


def test_ready_when_database_is_down(client):
    with patch("blog_platform.blog_service.routes.health.check_db_connection", return_value=False):
        response = client.get("/ready")

    assert response.status_code == 503
    assert response.json()["detail"]["database"] == "disconnected"
    assert response.json()["detail"]["status"] == "not_ready"


def test_cors_allows_configured_origin_with_credentials(client):
    response = client.options(
        "/posts",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_cors_rejects_other_origins(client):
    response = client.get("/health", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in response.headers
