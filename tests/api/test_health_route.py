"""Health & Readiness: liveness always up, readiness follows Horizon."""

from gateway.main import app


class _Horizon:
    def __init__(self, healthy):
        self.healthy = healthy

    async def health_check(self):
        return self.healthy


async def test_liveness(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "payment-gateway"}


async def test_ready_when_horizon_answers(client, monkeypatch):
    monkeypatch.setattr(app.state, "horizon", _Horizon(True), raising=False)
    response = await client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["checks"] == {"horizon": "healthy"}


async def test_not_ready_when_horizon_down(client, monkeypatch):
    monkeypatch.setattr(app.state, "horizon", _Horizon(False), raising=False)
    response = await client.get("/health/ready")
    assert response.status_code == 503
    assert response.json() == {"status": "not_ready", "reason": "horizon_unavailable"}
