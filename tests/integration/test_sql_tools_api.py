import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from services.database import DatabaseService


@pytest.fixture
def database(tmp_path):
    service = DatabaseService()
    service.initialize(str(tmp_path / "api.db"), "sqlite")
    yield service
    service.close()


@pytest.fixture
def client(database):
    return TestClient(create_app(database=database))


def test_full_table_lifecycle(client):
    response = client.post("/tables/create", json={"query": "CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT)"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"success": True, "message": "Table created successfully"}}

    response = client.post("/query/write", json={"query": "INSERT INTO items (name) VALUES ('a'), ('b, c')"})
    assert response.json() == {"success": True, "data": {"affectedRows": 2}}

    response = client.post("/query/read", json={"query": "SELECT id, name FROM items ORDER BY id"})
    assert response.json()["data"] == [{"id": 1, "name": "a"}, {"id": 2, "name": "b, c"}]

    response = client.post("/query/export", json={"query": "SELECT id, name FROM items ORDER BY id"})
    assert response.status_code == 200
    assert response.text == 'id,name\n1,"a"\n2,"b, c"\n'

    response = client.post("/tables/alter", json={"query": "ALTER TABLE items ADD COLUMN price REAL"})
    assert response.json()["data"]["message"] == "Table altered successfully"

    response = client.post("/tables/describe", json={"table_name": "items"})
    assert [col["name"] for col in response.json()["data"]] == ["id", "name", "price"]

    response = client.get("/tables")
    assert {row["name"] for row in response.json()["data"]} == {"mcp_insights", "items"}

    response = client.post("/tables/drop", json={"query": "DROP TABLE items"})
    assert response.json()["data"]["message"] == "Table dropped successfully"


def test_validation_failure_is_400_with_prefixed_detail(client):
    response = client.post("/query/read", json={"query": "DELETE FROM mcp_insights"})
    assert response.status_code == 400
    assert response.json()["detail"] == "SQL Error: Only SELECT queries are allowed with read_query"


def test_backend_error_is_400_with_engine_message(client):
    response = client.post("/query/read", json={"query": "SELECT * FROM nope"})
    assert response.status_code == 400
    assert response.json()["detail"] == "SQL Error: no such table: nope"


def test_describe_requires_table_name(client):
    response = client.post("/tables/describe", json={"table_name": "  "})
    assert response.status_code == 400
    assert response.json()["detail"] == "SQL Error: Table name is required"


def test_database_info(client, database):
    response = client.get("/database")
    assert response.status_code == 200
    assert response.json()["data"]["type"] == "sqlite"
    assert response.json()["data"]["name"] == "SQLite"


def test_uninitialized_database_is_503():
    client = TestClient(create_app(database=DatabaseService()))
    response = client.post("/query/read", json={"query": "SELECT 1"})
    assert response.status_code == 503
    assert response.json()["detail"].startswith("SQL Error: Database is not initialized")

    response = client.get("/database")
    assert response.json()["data"] == {"type": "none", "name": "No database initialized"}


def test_lifespan_opens_database_from_environment(monkeypatch, tmp_path):
    db_path = tmp_path / "env" / "lifespan.db"
    monkeypatch.setenv("DB_ENGINE", "sqlite")
    monkeypatch.setenv("SQLITE_DB_PATH", str(db_path))

    app = create_app()
    with TestClient(app) as client:
        response = client.get("/tables")
        assert response.json()["data"] == [{"name": "mcp_insights"}]
        service = app.state.database

    assert db_path.exists()
    assert not service.is_initialized


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
