"""CLI-level coverage for the server entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from learningsuite_mcp_server import main as server_main


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture()
def dummy_app(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> _DummyApp:
    """Configure an API key and replace the FastMCP app with a recorder."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LEARNINGSUITE_API_KEY", "cli-key")
    app = _DummyApp()
    original = server_main.build_fastmcp_app
    monkeypatch.setattr(
        server_main,
        "build_fastmcp_app",
        lambda client: (app, original(client)[1]),
    )
    return app


def test_main_runs_stdio_by_default(dummy_app: _DummyApp) -> None:
    exit_code = server_main.main([])

    assert exit_code == 0
    assert dummy_app.run_calls == [{"transport": "stdio"}]


def test_main_runs_fastmcp_with_transport(dummy_app: _DummyApp) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    assert exit_code == 0
    assert dummy_app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_catalog_flag_prints_tools(
    dummy_app: _DummyApp, capsys: pytest.CaptureFixture[str]
) -> None:
    """Catalog flag prints discovery metadata instead of serving."""
    exit_code = server_main.main(["--catalog"])

    assert exit_code == 0
    assert dummy_app.run_calls == []
    catalog = json.loads(capsys.readouterr().out)
    assert catalog[0]["name"] == "learningsuite_check_auth"
    assert {"name", "description", "inputSchema"} <= set(catalog[0])


def test_missing_api_key_exits_before_serving(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LEARNINGSUITE_API_KEY", raising=False)
    monkeypatch.setattr(
        server_main,
        "build_fastmcp_app",
        lambda client: pytest.fail("server must not be built without an API key"),
    )

    exit_code = server_main.main([])

    assert exit_code == 1
    assert "LEARNINGSUITE_API_KEY" in capsys.readouterr().err
