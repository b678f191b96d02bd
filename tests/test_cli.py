"""Tests for configuration and the command line entry point."""
import json
import sys

import pytest

import config
import main
from helpers import build_page


class TestGetGraphqlConfig:
    """Tests for config.get_graphql_config."""

    def test_reads_endpoint_headers_and_timeout(self, monkeypatch):
        monkeypatch.setenv("PDP_GRAPHQL_ENDPOINT", "https://catalog.example.com/graphql")
        monkeypatch.setenv("PDP_ENVIRONMENT_ID", "env-1")
        monkeypatch.setenv("PDP_API_KEY", "key")
        monkeypatch.setenv("PDP_TIMEOUT", "12")
        monkeypatch.delenv("PDP_STORE_CODE", raising=False)

        result = config.get_graphql_config()

        assert result["endpoint"] == "https://catalog.example.com/graphql"
        assert result["headers"]["Magento-Environment-Id"] == "env-1"
        assert result["headers"]["x-api-key"] == "key"
        assert "Magento-Store-Code" not in result["headers"]
        assert result["timeout"] == 12


class TestMain:
    """Tests for the check and render commands."""

    @pytest.fixture
    def page_file(self, tmp_path):
        def _write(**kwargs):
            path = tmp_path / "page.html"
            path.write_text(build_page(**kwargs), encoding="utf-8")
            return str(path)

        return _write

    def test_render_prints_product_json(self, page_file, monkeypatch, capsys):
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "main.py",
                "render",
                page_file(),
                "--url",
                "https://shop.example.com/products/widget/WID-1",
                "--no-fallback",
            ],
        )

        main.main()

        product = json.loads(capsys.readouterr().out)
        assert product["name"] == "Widget"
        assert product["urlKey"] == "widget"
        assert product["images"][0]["url"] == "https://shop.example.com/media/widget-front.jpg"

    def test_render_not_eligible_exits_with_error(self, page_file, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py", "render", page_file(sku=None), "--no-fallback"])

        with pytest.raises(SystemExit) as exc_info:
            main.main()
        assert exc_info.value.code == 1

    def test_check_eligible_page(self, page_file, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "check", page_file()])

        main.main()

        assert "apta para extracción estática" in capsys.readouterr().out

    def test_without_endpoint_no_price_cache(self, monkeypatch):
        monkeypatch.setenv("PDP_GRAPHQL_ENDPOINT", "")
        assert main.build_price_cache() is None
