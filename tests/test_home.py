from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert "Height Compare" in titles
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_unknown_route_returns_json_error():
    client = create_app("TestingConfig").test_client()
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "http.404"


def test_request_id_is_echoed():
    client = create_app("TestingConfig").test_client()
    response = client.get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_config_file_override(tmp_path, monkeypatch):
    config = tmp_path / "config.yml"
    config.write_text(
        "site:\n  name: Custom\nplugins:\n  height_compare:\n    grid_lines: 5\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("HEIGHT_COMPARE_CONFIG", str(config))
    client = create_app("TestingConfig").test_client()
    assert client.get("/").get_json()["data"]["name"] == "Custom"
    response = client.post(
        "/api/height_compare/chart", json={"chart_height_px": 470, "heights": [1.8]}
    )
    assert len(response.get_json()["data"]["lines"]) == 5
