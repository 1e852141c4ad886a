"""Tests for the /api/cases routes."""

import re

import pytest
from fastapi.testclient import TestClient

from kmca_api.app.core.config import Settings
from kmca_api.app.main import create_app


@pytest.fixture
def sample_case():
    return {"title": "T", "body": "B"}


# --- create ---

def test_create_case_defaults(client, admin_headers, sample_case):
    resp = client.post("/api/cases", json=sample_case, headers=admin_headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["success"] is True
    case = data["case"]
    assert re.fullmatch(r"case-\d+", case["id"])
    assert case["views"] == 0
    assert case["isDefault"] is False
    assert case["author"] == "관리자"
    assert case["categoryValue"] is None
    assert case["categoryLabel"] is None
    assert case["title"] == "T"
    assert case["body"] == "B"
    assert case["createdAt"].endswith("Z")


def test_create_case_trims_and_keeps_given_fields(client, admin_headers):
    payload = {
        "id": "case-custom",
        "categoryValue": " policy ",
        "categoryLabel": "   ",
        "title": "  제목  ",
        "body": " 본문 ",
        "author": " 홍길동 ",
    }
    case = client.post("/api/cases", json=payload, headers=admin_headers).json()["case"]
    assert case["id"] == "case-custom"
    assert case["categoryValue"] == "policy"
    assert case["categoryLabel"] is None
    assert case["title"] == "제목"
    assert case["body"] == "본문"
    assert case["author"] == "홍길동"


@pytest.mark.parametrize(
    "payload",
    [{}, {"title": "T"}, {"body": "B"}, {"title": "   ", "body": "B"}, {"title": 5, "body": "B"}],
)
def test_create_case_requires_title_and_body(client, admin_headers, case_store, payload):
    resp = client.post("/api/cases", json=payload, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "제목과 본문은 필수 입력 항목입니다."}
    assert case_store.load() == []


def test_create_case_without_body(client, admin_headers):
    resp = client.post("/api/cases", headers=admin_headers)
    assert resp.status_code == 400


def test_create_case_without_admin_header(client, sample_case, case_store):
    resp = client.post("/api/cases", json=sample_case)
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "관리자 인증이 필요합니다."}
    assert case_store.load() == []


def test_create_case_with_wrong_secret(client, sample_case, settings):
    resp = client.post("/api/cases", json=sample_case, headers={settings.admin_header: "nope"})
    assert resp.status_code == 401


def test_admin_routes_fail_closed_without_secret(tmp_path, sample_case):
    app = create_app(Settings(admin_secret="", data_dir=tmp_path))
    with TestClient(app) as c:
        headers = {"X-KMCA-Admin": ""}
        assert c.post("/api/cases", json=sample_case, headers=headers).status_code == 500
        assert c.delete("/api/cases/x", headers=headers).status_code == 500
        resp = c.patch("/api/cases/x/views", headers=headers)
        assert resp.status_code == 500
        assert resp.json()["error"] == "서버에 관리자 비밀키가 설정되지 않았습니다."
        # Public routes still work.
        assert c.get("/api/cases").status_code == 200


# --- read ---

def test_round_trip_create_then_get(client, admin_headers, sample_case):
    created = client.post("/api/cases", json=sample_case, headers=admin_headers).json()["case"]
    resp = client.get(f"/api/cases/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "case": created}


def test_get_case_not_found(client):
    resp = client.get("/api/cases/missing")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "사례를 찾을 수 없습니다."}


def test_list_cases_empty(client):
    resp = client.get("/api/cases")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "cases": []}


def test_list_cases_sorted_newest_first(client, case_store):
    case_store.save(
        [
            {"id": "b", "title": "b", "body": "b", "createdAt": "2024-02-01T00:00:00.000Z"},
            {"id": "none", "title": "n", "body": "n"},
            {"id": "c", "title": "c", "body": "c", "createdAt": "2024-03-01T00:00:00.000Z"},
            {"id": "a", "title": "a", "body": "a", "createdAt": "2024-01-01T00:00:00.000Z"},
        ]
    )
    cases = client.get("/api/cases").json()["cases"]
    assert [c["id"] for c in cases] == ["c", "b", "a", "none"]
    assert all("body" in c for c in cases)


def test_list_keeps_extra_stored_fields(client, case_store):
    case_store.save([{"id": "seed", "title": "t", "body": "b", "isDefault": True, "thumbnail": "x.png"}])
    case = client.get("/api/cases").json()["cases"][0]
    assert case["isDefault"] is True
    assert case["thumbnail"] == "x.png"


def test_corrupt_store_lists_empty(client, settings):
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.cases_file.write_text("oops", encoding="utf-8")
    resp = client.get("/api/cases")
    assert resp.status_code == 200
    assert resp.json()["cases"] == []


# --- delete ---

def test_delete_case(client, admin_headers, sample_case, case_store):
    created = client.post("/api/cases", json=sample_case, headers=admin_headers).json()["case"]
    resp = client.delete(f"/api/cases/{created['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert case_store.load() == []
    assert client.get(f"/api/cases/{created['id']}").status_code == 404


def test_delete_missing_case_leaves_store_unchanged(client, admin_headers, case_store, settings):
    case_store.save([{"id": "keep", "title": "t", "body": "b"}])
    before = settings.cases_file.read_bytes()
    resp = client.delete("/api/cases/missing", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "삭제할 사례가 없습니다."}
    assert settings.cases_file.read_bytes() == before


def test_delete_requires_admin(client, case_store):
    case_store.save([{"id": "keep", "title": "t", "body": "b"}])
    assert client.delete("/api/cases/keep").status_code == 401
    assert len(case_store.load()) == 1


# --- views ---

def test_increment_views_is_monotonic(client, admin_headers, sample_case):
    created = client.post("/api/cases", json=sample_case, headers=admin_headers).json()["case"]
    for expected in range(1, 6):
        resp = client.patch(f"/api/cases/{created['id']}/views", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["case"]["views"] == expected
    fetched = client.get(f"/api/cases/{created['id']}").json()["case"]
    assert fetched["views"] == 5
    assert fetched["createdAt"] == created["createdAt"]


def test_increment_views_handles_missing_counter(client, admin_headers, case_store):
    case_store.save([{"id": "seed", "title": "t", "body": "b"}])
    resp = client.patch("/api/cases/seed/views", headers=admin_headers)
    assert resp.json()["case"]["views"] == 1


def test_increment_views_not_found(client, admin_headers):
    resp = client.patch("/api/cases/missing/views", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "사례를 찾을 수 없습니다."


def test_increment_views_requires_admin(client, case_store):
    case_store.save([{"id": "seed", "title": "t", "body": "b", "views": 3}])
    assert client.patch("/api/cases/seed/views").status_code == 401
    assert case_store.load()[0]["views"] == 3


# --- stored records and request bodies ---

def test_list_returns_irregular_seed_records_unchanged(client, case_store):
    seeded = [
        {"id": "seed", "title": "t", "body": "b", "author": None, "isDefault": True},
        {"title": "no id", "body": "b"},
        {"id": "numeric-category", "title": "t", "body": "b", "categoryValue": 3, "views": "7"},
    ]
    case_store.save(seeded)
    resp = client.get("/api/cases")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "cases": seeded}


def test_get_irregular_seed_record_unchanged(client, case_store):
    seeded = {"id": "seed", "title": None, "body": "b", "author": None}
    case_store.save([seeded])
    resp = client.get("/api/cases/seed")
    assert resp.status_code == 200
    assert resp.json()["case"] == seeded


def test_create_case_with_text_plain_json(client, admin_headers):
    resp = client.post(
        "/api/cases",
        content='{"title": "T", "body": "B"}'.encode("utf-8"),
        headers={**admin_headers, "Content-Type": "text/plain;charset=UTF-8"},
    )
    assert resp.status_code == 201
    assert resp.json()["case"]["title"] == "T"


def test_create_case_with_non_object_json(client, admin_headers):
    resp = client.post(
        "/api/cases", content=b"[]", headers={**admin_headers, "Content-Type": "application/json"}
    )
    assert resp.status_code == 400


def test_admin_check_runs_before_body_is_parsed(client, case_store):
    resp = client.post("/api/cases", content=b"{bad", headers={"Content-Type": "application/json"})
    assert resp.status_code == 401
    assert case_store.load() == []


def test_malformed_body_with_admin_header(client, admin_headers):
    resp = client.post(
        "/api/cases", content=b"{bad", headers={**admin_headers, "Content-Type": "application/json"}
    )
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "서버 오류가 발생했습니다."}
