"""Tests for the server launcher."""

from unittest.mock import patch

import api_server
import mallu_api.app.main as app_main


class TestLauncher:
    """Tests for api_server.main."""

    def test_runs_app_factory_with_settings(self, monkeypatch):
        monkeypatch.setenv("MALLU_API_PORT", "9100")
        monkeypatch.setenv("MALLU_API_DEBUG", "false")

        with patch("api_server.load_dotenv"), patch("api_server.uvicorn.run") as mock_run:
            api_server.main()

        args, kwargs = mock_run.call_args
        assert args == ("mallu_api.app.main:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9100
        assert kwargs["reload"] is False

    def test_app_module_has_no_server_entry(self):
        """Test the server is only started from api_server."""
        assert not hasattr(app_main, "uvicorn")
