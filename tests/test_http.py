from __future__ import annotations

from datetime import date

import pytest

from absensi_tk.main import create_app


@pytest.fixture
def client(container):
    app = create_app(container)
    return app.test_client()


def _full_roster(status="Hadir"):
    return {"entries": {"S1": {"status": status, "note": ""}, "S2": {"status": "Hadir", "note": ""}}}


def test_dashboard(client, monkeypatch):
    monkeypatch.setattr("absensi_tk.dashboard.controller.today_local", lambda: date(2024, 5, 10))

    res = client.get("/api/dashboard")

    assert res.status_code == 200
    body = res.get_json()
    assert body["total_students"] == 3
    assert body["today"]["date"] == "2024-05-10"


def test_sync_endpoint(client, attendance_repo):
    res = client.post("/api/sync")
    assert res.status_code == 200
    assert res.get_json()["students"] == 3


def test_store_failure_maps_to_502(client, attendance_repo):
    attendance_repo.fail = True

    res = client.post("/api/sync")

    assert res.status_code == 502
    assert res.get_json() == {"success": False, "message": "Koneksi database bermasalah. Silakan coba lagi."}


def test_class_crud(client):
    res = client.post("/api/classes", json={"name": "TK C", "teacher_name": "Bu Rina"})
    assert res.status_code == 201
    new_id = res.get_json()["item"]["id"]

    res = client.put(f"/api/classes/{new_id}", json={"headmaster_name": "Pak Budi"})
    assert res.get_json()["item"]["headmaster_name"] == "Pak Budi"

    items = client.get("/api/classes").get_json()["items"]
    assert [(c["name"], c["students"]) for c in items] == [("TK A", 2), ("TK B", 1), ("TK C", 0)]

    assert client.delete(f"/api/classes/{new_id}").status_code == 200
    assert client.delete(f"/api/classes/{new_id}").status_code == 404


def test_add_class_without_name(client):
    res = client.post("/api/classes", json={})
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_students_filters(client):
    by_class = client.get("/api/students?class_id=K1").get_json()["items"]
    assert [s["name"] for s in by_class] == ["Andi", "Citra"]
    assert by_class[0]["class_name"] == "TK A"

    found = client.get("/api/students?q=bay").get_json()["items"]
    assert [s["id"] for s in found] == ["S3"]


def test_student_add_and_missing_fields(client):
    res = client.post("/api/students", json={"nis": "004", "name": "Dewi", "class_id": "K2"})
    assert res.status_code == 201

    res = client.post("/api/students", json={"nis": "005"})
    assert res.status_code == 400
    assert res.get_json()["message"] == "Mohon lengkapi semua data."


def test_attendance_save_and_session(client):
    res = client.post("/api/attendance/K1/2024-05-01", json=_full_roster("Alpha"))
    assert res.status_code == 200
    assert res.get_json()["saved"] == 2

    session = client.get("/api/attendance/K1/2024-05-01").get_json()
    assert session["entries"]["S1"] == {"status": "Alpha", "note": ""}
    assert len(session["students"]) == 2


def test_attendance_rejects_sakit_without_note(client, attendance_repo):
    res = client.post("/api/attendance/K1/2024-05-01", json=_full_roster("Sakit"))

    assert res.status_code == 400
    assert "Alasan" in res.get_json()["message"]
    assert "upsert" not in attendance_repo.calls


@pytest.mark.parametrize(
    "entries",
    [
        {"S1": "Hadir", "S2": "Hadir"},
        {"S1": {"status": "Sakit", "note": 5}, "S2": {"status": "Hadir"}},
        {"S1": {"status": "Izin", "note": "x" * 300}, "S2": {"status": "Hadir"}},
    ],
)
def test_attendance_rejects_malformed_entries(client, attendance_repo, entries):
    res = client.post("/api/attendance/K1/2024-05-01", json={"entries": entries})

    assert res.status_code == 400
    assert res.get_json()["success"] is False
    assert "upsert" not in attendance_repo.calls


def test_attendance_unknown_class(client):
    assert client.post("/api/attendance/NOPE/2024-05-01", json={"entries": {}}).status_code == 404


def test_daily_csv_download(client):
    client.post("/api/attendance/K1/2024-05-01", json=_full_roster())

    res = client.get("/reports/daily.csv?class_id=K1&date=2024-05-01")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "Absensi_Harian_TK_A_2024-05-01.csv" in res.headers["Content-Disposition"]
    assert res.data.startswith(b"\xef\xbb\xbf")


def test_monthly_csv_requires_params(client):
    res = client.get("/reports/monthly.csv?class_id=K1")
    assert res.status_code == 400
    assert "month" in res.get_json()["message"]


def test_print_page_has_signature_blocks(client):
    res = client.get("/reports/print?type=monthly&class_id=K1&month=5&year=2024")

    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert "Kepala Sekolah" in html
    assert "Wali Kelas" in html
    assert "Pak Budi" in html


def test_print_page_rejects_unknown_type(client):
    assert client.get("/reports/print?type=weekly").status_code == 400
