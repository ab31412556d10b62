from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from flowguard.cli import app

runner = CliRunner()


class TestServeCommand:
    def test_serve_with_flags(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9000"])
            assert result.exit_code == 0
            mock_run.assert_called_once_with(
                "flowguard.server:app", host="0.0.0.0", port=9000, reload=False
            )

    def test_serve_defaults_from_config(self, monkeypatch):
        monkeypatch.setenv("FLOWGUARD_HOST", "10.0.0.1")
        monkeypatch.setenv("FLOWGUARD_PORT", "3000")
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])
            assert result.exit_code == 0
            mock_run.assert_called_once_with(
                "flowguard.server:app", host="10.0.0.1", port=3000, reload=False
            )
