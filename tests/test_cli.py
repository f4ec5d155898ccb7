# File: tests/test_cli.py
"""Tests for the CLI (`link_scout.cli`) using click.testing.CliRunner.
Cover argument counting, report output, report files, and error handling.
"""
import asyncio
import importlib
import json

import pytest
from click.testing import CliRunner

cli_module = importlib.import_module("link_scout.cli")
from link_scout.cli import cli
from link_scout.crawler.errors import MalformedURL

VISITED = {"example.com": 1, "example.com/a": 3}


@pytest.fixture(autouse=True)
def patch_start_crawl(monkeypatch):
    """Replace start_crawl with a stub that records its arguments."""
    calls = []

    async def fake_crawl(base_url, cfg):
        calls.append((base_url, cfg))
        return dict(VISITED)

    monkeypatch.setattr(cli_module, "start_crawl", fake_crawl)
    return calls


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "LinkScout" in result.output


def test_too_few_arguments(patch_start_crawl):
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "Too few arguments" in result.output
    assert patch_start_crawl == []


def test_too_many_arguments(patch_start_crawl):
    result = CliRunner().invoke(cli, ["https://a.com", "https://b.com"])
    assert result.exit_code == 1
    assert "Too many arguments" in result.output
    assert patch_start_crawl == []


def test_crawl_prints_report(patch_start_crawl):
    result = CliRunner().invoke(cli, ["https://example.com"])
    assert result.exit_code == 0
    assert "Crawler starting at: https://example.com" in result.output
    assert "Found 3 internal links to example.com/a" in result.output
    assert "Found 1 internal links to example.com" in result.output
    base_url, cfg = patch_start_crawl[0]
    assert base_url == "https://example.com"
    assert cfg.timeout == 10.0


def test_options_override_config(tmp_path, patch_start_crawl):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("timeout: 4\nuser_agent: FromFile/1.0\n", encoding="utf-8")

    result = CliRunner().invoke(
        cli, ["--config", str(cfg_file), "--timeout", "2.5", "https://example.com"]
    )
    assert result.exit_code == 0
    _, cfg = patch_start_crawl[0]
    assert cfg.timeout == 2.5
    assert cfg.user_agent == "FromFile/1.0"


def test_invalid_config(tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"timeout": 0}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "https://example.com"])
    assert result.exit_code == 1
    assert "Config error" in result.output


def test_json_and_html_files(tmp_path):
    json_out = tmp_path / "out.json"
    html_out = tmp_path / "out.html"
    result = CliRunner().invoke(
        cli, ["--json", str(json_out), "--html", str(html_out), "https://example.com"]
    )
    assert result.exit_code == 0
    data = json.loads(json_out.read_text(encoding="utf-8"))
    assert data["pages"][0] == {"url": "example.com/a", "count": 3}
    assert "example.com/a" in html_out.read_text(encoding="utf-8")


def test_malformed_url(monkeypatch):
    async def bad(base_url, cfg):
        raise MalformedURL(base_url)

    monkeypatch.setattr(cli_module, "start_crawl", bad)
    result = CliRunner().invoke(cli, ["not-a-url"])
    assert result.exit_code == 1
    assert "Malformed URL" in result.output


def test_crawl_timeout(monkeypatch):
    async def slow(base_url, cfg):
        await asyncio.sleep(2)
        return {}

    monkeypatch.setattr(cli_module, "start_crawl", slow)
    result = CliRunner().invoke(cli, ["--crawl-timeout", "0.2", "https://example.com"])
    assert result.exit_code == 1
    assert "did not finish" in result.output
