import io

import pandas as pd
import pytest
from httpx import AsyncClient, ASGITransport

from classpoint.dependencies import get_classroom
from classpoint.main import app
from classpoint.services.classroom import Classroom
from classpoint.services.storage import JsonStorage


@pytest.fixture(name="classroom")
def classroom_fixture(tmp_path):
    return Classroom.load(JsonStorage(tmp_path / "classpoint.json", default_class_name="7A"))


@pytest.fixture(name="client")
def client_fixture(classroom: Classroom):
    def get_classroom_override():
        return classroom

    app.dependency_overrides[get_classroom] = get_classroom_override
    client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_read_main(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["class_name"] == "7A"


@pytest.mark.asyncio
async def test_catalog(client: AsyncClient):
    levels = (await client.get("/levels")).json()
    assert [level["id"] for level in levels] == ["seed", "sprout", "sapling", "tree"]
    assert levels[-1]["max_points"] is None

    rewards = (await client.get("/rewards")).json()
    assert [r["cost"] for r in rewards] == [30, 50, 80, 100, 150, 200]


@pytest.mark.asyncio
async def test_student_crud(client: AsyncClient):
    response = await client.post("/students/", json={"name": "  Ana ", "order_number": 7})
    assert response.status_code == 201
    ana = response.json()
    assert ana["name"] == "Ana"
    assert ana["level"] == "seed"
    assert ana["progress"] == {"percent": 0.0, "points_to_next": 50, "next_level": "sprout"}

    ben = (await client.post("/students/", json={"name": "Ben"})).json()
    assert ben["order_number"] == 8

    response = await client.post("/students/", json={"name": "   "})
    assert response.status_code == 422

    response = await client.patch(f"/students/{ana['id']}", json={"name": "Anna"})
    assert response.status_code == 200
    assert response.json()["name"] == "Anna"

    response = await client.get(f"/students/{ana['id']}")
    assert response.json()["name"] == "Anna"

    response = await client.delete(f"/students/{ana['id']}")
    assert response.status_code == 204
    response = await client.get(f"/students/{ana['id']}")
    assert response.status_code == 404
    response = await client.delete(f"/students/{ana['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_points_and_level_up(client: AsyncClient):
    ana = (await client.post("/students/", json={"name": "Ana"})).json()

    response = await client.post(f"/students/{ana['id']}/points", json={"delta": 48, "reason": "Project"})
    assert response.status_code == 200
    assert response.json()["leveled_up"] is False

    response = await client.post(f"/students/{ana['id']}/points", json={"delta": 5})
    body = response.json()
    assert body["leveled_up"] is True
    assert body["entry"]["reason"] == "quick award"
    assert body["student"]["total_points"] == 53
    assert body["student"]["level_info"]["name"] == "Sprout"

    response = await client.post(f"/students/{ana['id']}/points", json={"delta": -10, "reason": "Talking"})
    body = response.json()
    assert body["leveled_up"] is False
    assert body["student"]["level"] == "seed"

    response = await client.post(f"/students/{ana['id']}/points", json={"delta": 0})
    assert response.status_code == 422

    response = await client.post("/students/missing/points", json={"delta": 5})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_redeem(client: AsyncClient, classroom: Classroom):
    ana = (await client.post("/students/", json={"name": "Ana"})).json()
    await client.post(f"/students/{ana['id']}/points", json={"delta": 40})

    response = await client.post(f"/students/{ana['id']}/redeem", json={"reward_id": "r2"})
    assert response.status_code == 409
    assert classroom.roster.get(ana["id"]).rewards_redeemed == ()

    response = await client.post(f"/students/{ana['id']}/redeem", json={"reward_id": "r1"})
    assert response.status_code == 200
    body = response.json()
    assert body["total_points"] == 10
    assert body["rewards_redeemed"][0]["points_spent"] == 30
    assert body["point_history"][-1]["delta"] == -30

    response = await client.post(f"/students/{ana['id']}/redeem", json={"reward_id": "nope"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_is_ranked_and_searchable(client: AsyncClient):
    ids = {}
    for name, points in (("Ana", 10), ("Ben", 30), ("Cam", 20)):
        student = (await client.post("/students/", json={"name": name})).json()
        await client.post(f"/students/{student['id']}/points", json={"delta": points})
        ids[name] = student["id"]

    names = [s["name"] for s in (await client.get("/students/")).json()]
    assert names == ["Ben", "Cam", "Ana"]

    names = [s["name"] for s in (await client.get("/students/", params={"search": "a"})).json()]
    assert names == ["Cam", "Ana"]


@pytest.mark.asyncio
async def test_classroom_rename_and_reset(client: AsyncClient):
    response = await client.put("/classroom/", json={"class_name": "8B"})
    assert response.json() == {"class_name": "8B", "student_count": 0}

    response = await client.put("/classroom/", json={"class_name": " "})
    assert response.status_code == 422

    await client.post("/students/", json={"name": "Ana"})
    response = await client.delete("/classroom/", params={"name": "9C"})
    assert response.json() == {"class_name": "9C", "student_count": 0}


@pytest.mark.asyncio
async def test_import_csv(client: AsyncClient):
    csv_text = "STT,Họ và tên,Lớp\n1,Nguyễn An,7A\n2,,7A\n3,Trần Bình,7A\n"
    files = {"file": ("lop7a.csv", csv_text.encode("utf-8"), "text/csv")}
    response = await client.post("/classroom/import", files=files)
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["accepted"] == 2
    assert body["rejected"] == [{"row": 2, "reason": "empty name"}]
    assert [(s["name"], s["order_number"]) for s in body["students"]] == [("Nguyễn An", 1), ("Trần Bình", 3)]


@pytest.mark.asyncio
async def test_import_rejects_unsupported_file(client: AsyncClient):
    files = {"file": ("notes.txt", b"hello", "text/plain")}
    response = await client.post("/classroom/import", files=files)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_export(client: AsyncClient):
    ana = (await client.post("/students/", json={"name": "Ana"})).json()
    await client.post(f"/students/{ana['id']}/points", json={"delta": 12})

    response = await client.get("/classroom/export")
    assert response.status_code == 200
    assert "Roster_7A_" in response.headers["content-disposition"]
    df = pd.read_excel(io.BytesIO(response.content))
    assert df["Student name"].tolist() == ["Ana"]
    assert df["Points awarded"].tolist() == [12]
