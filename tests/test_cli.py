"""Tests for the CLI using click.testing.CliRunner.
Cover the `search` and `config` commands, `--version` and error handling.
"""
import json
import logging

import pytest
from click.testing import CliRunner

import word_scout.cli as cli_module
from word_scout.cli import cli
from word_scout.crawler.crawler import InvalidInput
from word_scout.crawler.models import CrawlOutcome, StopReason, VisitRecord, VisitStatus
from word_scout.logger import LOGGER_NAME


@pytest.fixture()
def found_outcome() -> CrawlOutcome:
    return CrawlOutcome(
        seed_url="http://a.test",
        target_word="gamma",
        found=True,
        url="http://b.test",
        visits=3,
        reason=StopReason.FOUND,
        trace=[
            VisitRecord("http://a.test", VisitStatus.OK, 2),
            VisitRecord("http://x.test", VisitStatus.HTTP_ERROR, detail="404"),
            VisitRecord("http://b.test", VisitStatus.OK, 0),
        ],
    )


@pytest.fixture()
def patch_start_search(monkeypatch, found_outcome):
    """Replace start_search with a stub recording its arguments."""
    calls = []

    async def fake_search(cfg, seed_url, word, max_pages):
        calls.append((cfg, seed_url, word, max_pages))
        return found_outcome

    monkeypatch.setattr(cli_module, "start_search", fake_search)
    return calls


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command where no configs/default.yaml exists; drop CLI log handlers afterwards."""
    monkeypatch.chdir(tmp_path)
    yield
    logging.getLogger(LOGGER_NAME).handlers.clear()


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "WordScout" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "cfg.json"
    cfg_file.write_text(json.dumps({"max_pages": 7, "user_agent": "Agent/1.0"}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["--log-level", "WARNING", "--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["max_pages"] == 7
    assert data["user_agent"] == "Agent/1.0"


def test_bad_config_exits_with_error(tmp_path):
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text("max_pages: -3\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_search_prints_outcome(patch_start_search):
    result = CliRunner().invoke(cli, ["--log-level", "WARNING", "search", "http://a.test", "gamma"])

    assert result.exit_code == 0
    assert 'Found "gamma" at http://b.test after 3 visits' in result.output
    (cfg, seed, word, max_pages), = patch_start_search
    assert (seed, word, max_pages) == ("http://a.test", "gamma", None)
    assert cfg.max_pages == 10


def test_search_max_pages_and_trace(patch_start_search):
    result = CliRunner().invoke(
        cli, ["--log-level", "WARNING", "search", "http://a.test", "gamma", "-n", "3", "--trace"]
    )

    assert result.exit_code == 0
    assert patch_start_search[0][3] == 3
    assert "http://x.test [http_error 404] 0 links" in result.output
    assert "http://a.test [ok] 2 links" in result.output


def test_search_json_report(tmp_path, patch_start_search):
    report = tmp_path / "out" / "report.json"
    result = CliRunner().invoke(
        cli, ["--log-level", "WARNING", "search", "http://a.test", "gamma", "--json", str(report)]
    )

    assert result.exit_code == 0
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["found"] is True
    assert data["url"] == "http://b.test"
    assert data["reason"] == "found"
    assert [entry["status"] for entry in data["trace"]] == ["ok", "http_error", "ok"]


def test_search_invalid_input(monkeypatch):
    async def fake_search(cfg, seed_url, word, max_pages):
        raise InvalidInput("target word must not be blank")

    monkeypatch.setattr(cli_module, "start_search", fake_search)
    result = CliRunner().invoke(cli, ["search", "http://a.test", " "])

    assert result.exit_code == 1
    assert "Invalid input" in result.output


def test_search_unexpected_failure(monkeypatch):
    async def fake_search(cfg, seed_url, word, max_pages):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "start_search", fake_search)
    result = CliRunner().invoke(cli, ["search", "http://a.test", "gamma"])

    assert result.exit_code == 1
    assert "Search failed: boom" in result.output
