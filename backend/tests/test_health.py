from mittirang.db import Database


def test_health_ok(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["db"] is True
    assert body["media_storage"] is True


def test_database_lifecycle(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'life.db'}")
    assert db.initialized is False
    assert db.ping() is False

    db.init()
    assert db.initialized is True
    assert db.ping() is True

    db.close()
    assert db.initialized is False
