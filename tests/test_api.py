"""
Tests for the HTTP API and the calculator page.
"""

import pytest
from fastapi.testclient import TestClient

from tempo_app.main import app
from tempo_app.services.tap_store import TAP_SESSIONS, TAP_TOUCHED


@pytest.fixture
def client():
    TAP_SESSIONS.clear()
    TAP_TOUCHED.clear()
    with TestClient(app) as c:
        yield c
    TAP_SESSIONS.clear()
    TAP_TOUCHED.clear()


class TestCalcApi:
    def test_defaults(self, client):
        res = client.get("/api/calc")
        assert res.status_code == 200
        data = res.json()
        assert data["bpm"]["is_valid"] is True
        assert data["bpm"]["value"] == 120
        assert data["bpm"]["hint"] == "Detected: 120.0 BPM"
        assert data["mode"]["id"] == "delay"
        assert data["formula_base"] == "1/4 = 500.00 ms"
        assert len(data["delay_rows"]) == 9
        assert data["reverb_rows"] == []

    def test_quarter_note_row(self, client):
        rows = client.get("/api/calc", params={"bpm": "120"}).json()["delay_rows"]
        quarter = next(r for r in rows if r["id"] == "1/4")
        assert quarter["notes_ms"] == 500.0
        assert quarter["notes_hz"] == 2.0
        assert quarter["dotted_ms"] == 750.0
        assert quarter["triplet_ms"] == pytest.approx(333.3333333333)

    def test_invalid_bpm_returns_empty_tables(self, client):
        data = client.get("/api/calc", params={"bpm": "abc", "mode": "reverb"}).json()
        assert data["bpm"]["is_valid"] is False
        assert data["bpm"]["hint"] == "Type a value from 1 to 999 BPM"
        assert data["formula_base"] == "Enter BPM"
        assert data["delay_rows"] == []
        assert data["reverb_rows"] == []

    def test_reverb_mode_with_custom_signature(self, client):
        data = client.get(
            "/api/calc", params={"bpm": "120", "mode": "reverb", "signature": "4/4", "custom": "7/8"}
        ).json()
        assert data["signature"]["source"] == "custom"
        assert data["signature"]["beats_per_bar"] == 3.5
        hall = data["reverb_rows"][0]
        assert hall["name"] == "Hall"
        assert hall["total_ms"] == pytest.approx(3500.0)
        assert hall["decay_ms"] == hall["total_ms"] - hall["pre_delay_ms"]

    def test_typing_signature_falls_back(self, client):
        data = client.get(
            "/api/calc",
            params={"bpm": "120", "mode": "reverb", "signature": "4/4", "custom": "7/", "last_valid": "6/8"},
        ).json()
        assert data["signature"]["is_typing"] is True
        assert data["signature"]["id"] == "6/8"
        assert data["reverb_rows"][0]["total_ms"] == pytest.approx(3000.0)

    def test_last_valid_can_be_custom(self, client):
        data = client.get(
            "/api/calc", params={"mode": "reverb", "custom": "abc", "last_valid": "5/4"}
        ).json()
        assert data["signature"]["beats_per_bar"] == 5.0

    def test_unknown_mode_is_rejected(self, client):
        assert client.get("/api/calc", params={"mode": "chorus"}).status_code == 422

    def test_parse_signature(self, client):
        assert client.get("/api/time-signatures/parse", params={"text": "7/8"}).json() == {
            "valid": True, "beats_per_bar": 3.5, "label": "7/8",
        }
        assert client.get("/api/time-signatures/parse", params={"text": "65/4"}).json()["valid"] is False


class TestCatalogApi:
    def test_catalog(self, client):
        data = client.get("/api/catalog").json()
        assert [n["id"] for n in data["note_divisions"]][:3] == ["1/1", "1/2", "1/4"]
        assert [p["name"] for p in data["reverb_presets"]] == [
            "Hall", "Large Room", "Small Room", "Tight Ambience",
        ]
        assert [m["id"] for m in data["modes"]] == ["delay", "reverb", "lfo"]
        assert data["bpm_presets"][0] == 60
        assert data["default_time_signature"] == "4/4"


class TestTapApi:
    def test_tap_flow(self, client):
        for t in (0, 500, 1000):
            data = client.post("/api/taps/s1", json={"now_ms": t}).json()
        assert data["taps"] == 3
        assert data["bpm"] == pytest.approx(120)
        assert data["hint"] == "Tap result: 120.0 BPM"

        applied = client.post("/api/taps/s1/apply").json()
        assert applied["bpm_text"] == "120.0"
        assert client.get("/api/taps/s1").json()["taps"] == 0

    def test_single_tap_has_no_estimate(self, client):
        data = client.post("/api/taps/s2", json={"now_ms": 10}).json()
        assert data["bpm"] is None
        assert data["hint"] == "Tap 2+ times to detect"

    def test_apply_without_estimate_conflicts(self, client):
        client.post("/api/taps/s3", json={"now_ms": 0})
        res = client.post("/api/taps/s3/apply")
        assert res.status_code == 409

    def test_sessions_are_independent(self, client):
        client.post("/api/taps/a", json={"now_ms": 0})
        client.post("/api/taps/a", json={"now_ms": 500})
        assert client.get("/api/taps/b").json()["bpm"] is None

    def test_server_clock_is_used_without_timestamp(self, client):
        data = client.post("/api/taps/s4", json={}).json()
        assert data["taps"] == 1

    def test_reads_do_not_create_sessions(self, client):
        for i in range(50):
            assert client.get(f"/api/taps/reader{i}").json()["taps"] == 0
        assert client.post("/api/taps/reader0/apply").status_code == 409
        assert TAP_SESSIONS == {}

    def test_apply_removes_session(self, client):
        client.post("/api/taps/s6", json={"now_ms": 0})
        client.post("/api/taps/s6", json={"now_ms": 500})
        assert "s6" in TAP_SESSIONS
        client.post("/api/taps/s6/apply")
        assert "s6" not in TAP_SESSIONS

    def test_reset(self, client):
        client.post("/api/taps/s5", json={"now_ms": 0})
        client.post("/api/taps/s5", json={"now_ms": 500})
        assert client.delete("/api/taps/s5").json()["bpm"] is None
        assert client.get("/api/taps/s5").json()["taps"] == 0


class TestCopyApi:
    def test_copy_text(self, client):
        res = client.post("/api/copy", json={"label": "1/4", "value": 500, "kind": "ms"})
        assert res.json()["text"] == "500.00 ms"
        res = client.post("/api/copy", json={"value": 2, "kind": "hz"})
        assert res.json()["text"] == "2.00 Hz"

    def test_copy_status(self, client):
        ok = client.post("/api/copy/status", json={"label": "Hall decay", "done": True}).json()
        assert ok == {"message": "Hall decay copied", "clear_after_ms": 1300}
        failed = client.post("/api/copy/status", json={"label": "Hall decay", "done": False}).json()
        assert failed["message"] == "Copy blocked by browser. Please try again."

    def test_bad_kind_is_rejected(self, client):
        assert client.post("/api/copy", json={"value": 1, "kind": "bpm"}).status_code == 422


class TestPage:
    def test_index_renders(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert "Delay, Reverb, and LFO Calculator" in res.text
        assert 'data-signature="6/8"' in res.text
        assert 'data-mode="lfo"' in res.text

    def test_static_script(self, client):
        assert client.get("/static/app.js").status_code == 200
