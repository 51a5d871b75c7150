"""Tests for the CLI entry point."""

import logging

import pytest

from cli import __main__ as cli_main
from logger import get_logger


@pytest.fixture
def run(test_config, export_file, monkeypatch, caplog):
    """Run the CLI against the sample export, without a log file."""
    test_config.log_to_file = False
    monkeypatch.setattr(cli_main, "load_config", lambda: test_config)
    caplog.set_level(logging.DEBUG, logger="ecotree")

    def _run(*argv):
        cli_main.main(list(argv))
        return [r for r in caplog.records if r.name == "ecotree"]

    yield _run

    logger = get_logger()
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_parents(run, test_config):
    records = run("categories", "parents", "--exclude", "4")

    assert [r.getMessage() for r in records if r.levelno == logging.INFO] == [
        "1\tFournisseurs",
        "2\tFournisseurs IT",
        "3\tClients",
    ]
    assert not test_config.log_dir.exists()


def test_verbose_logs_debug(run):
    records = run("-v", "categories", "show", "--name", "Clients")

    assert get_logger().level == logging.DEBUG
    assert any(r.levelno == logging.DEBUG for r in records)
    assert "ID: 3" in [r.getMessage() for r in records]


def test_file_option(run, tmp_path):
    other = tmp_path / "other.json"
    other.write_text('[{"id": "x", "name": "Ailleurs"}]', encoding="utf-8")

    records = run("categories", "--file", str(other), "tree")

    assert "· Ailleurs [Autre] (universal)" in [r.getMessage() for r in records]
