import importlib

import httpx

import shipport.config
from shipport.config import DEMO_LAT_MIN, DEMO_LAT_MAX, DEMO_LON_MIN, DEMO_LON_MAX
from shipport.core.registry import validate_vessel_fields
from shipport.seed import generate_demo_vessels, main, post_vessels


def test_demo_vessels_are_valid():
    vessels = generate_demo_vessels(25, seed=7)

    assert len(vessels) == 25
    for vessel in vessels:
        validate_vessel_fields(vessel)
        assert DEMO_LAT_MIN <= vessel.latitude <= DEMO_LAT_MAX
        assert DEMO_LON_MIN <= vessel.longitude <= DEMO_LON_MAX


def test_seed_is_reproducible():
    first = [v.to_dict() for v in generate_demo_vessels(5, seed=42)]
    second = [v.to_dict() for v in generate_demo_vessels(5, seed=42)]

    assert first == second


def test_post_vessels_counts_accepted(client):
    vessels = generate_demo_vessels(4, seed=1)

    added = post_vessels(vessels, api_url="http://testserver", client=client)

    assert added == 4
    assert len(client.get("/api/ships").json()["ships"]) == 4


def test_post_vessels_reports_rejections():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, json={"detail": "A ship with the same ID already exists."})

    with httpx.Client(base_url="http://api", transport=httpx.MockTransport(handler)) as mock_client:
        added = post_vessels(generate_demo_vessels(2, seed=1), api_url="http://api", client=mock_client)

    assert added == 0


def test_dry_run(capsys):
    assert main(["--count", "3", "--seed", "5", "--dry-run"]) == 0

    assert "3 vessels generated (dry run)" in capsys.readouterr().out


def test_post_vessels_handles_non_json_errors(capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with httpx.Client(base_url="http://api", transport=httpx.MockTransport(handler)) as mock_client:
        added = post_vessels(generate_demo_vessels(1, seed=1), api_url="http://api", client=mock_client)

    assert added == 0
    assert "502 <html>Bad Gateway</html>" in capsys.readouterr().out


def test_api_base_url_read_from_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://fleet-api:9000")
    try:
        assert importlib.reload(shipport.config).API_BASE_URL == "http://fleet-api:9000"
    finally:
        monkeypatch.delenv("API_BASE_URL")
        importlib.reload(shipport.config)


def test_main_posts_to_configured_api(monkeypatch):
    calls = []

    def fake_post(vessels, api_url, client=None):
        calls.append(api_url)
        return len(vessels)

    monkeypatch.setattr("shipport.seed.API_BASE_URL", "http://fleet-api:9000")
    monkeypatch.setattr("shipport.seed.post_vessels", fake_post)

    assert main(["--count", "2", "--seed", "3"]) == 0
    assert calls == ["http://fleet-api:9000"]
