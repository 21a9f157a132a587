"""Tests for the command-line entry point and startup probe."""

import logging
import os

import pytest

from fabric_mcp.__main__ import build_parser, main
from fabric_mcp.readiness import Readiness, probe


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("fabric_mcp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestReadiness:
    """Startup probe."""

    @pytest.mark.skipif(os.name == "nt", reason="fabric stub is a shebang script")
    def test_found(self, fake_fabric):
        readiness = probe("fabric")

        assert readiness.installed is True
        assert readiness.path == str(fake_fabric)
        assert readiness.describe() == f"Fabric CLI found at {fake_fabric}"

    def test_not_found(self):
        readiness = probe("fabric-not-installed-here")

        assert readiness.installed is False
        assert "not found on PATH" in readiness.describe()
        assert "https://github.com/danielmiessler/fabric" in readiness.describe()

    def test_is_immutable(self):
        readiness = Readiness(binary="fabric")
        with pytest.raises(AttributeError):
            readiness.path = "/usr/bin/fabric"


class TestMain:
    """fabric-mcp command line."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.debug is False
        assert args.check is False

    @pytest.mark.skipif(os.name == "nt", reason="fabric stub is a shebang script")
    def test_check_succeeds_when_installed(self, fake_fabric, monkeypatch, capsys):
        monkeypatch.setenv("FABRIC_MCP_FABRIC_BINARY", str(fake_fabric))

        with pytest.raises(SystemExit) as exc:
            main(["--check"])

        assert exc.value.code == 0
        assert "Fabric CLI found at" in capsys.readouterr().err

    def test_check_fails_when_missing(self, monkeypatch, capsys):
        monkeypatch.setenv("FABRIC_MCP_FABRIC_BINARY", "fabric-not-installed-here")

        with pytest.raises(SystemExit) as exc:
            main(["--check"])

        assert exc.value.code == 1
        assert "not found on PATH" in capsys.readouterr().err

    def test_debug_flag_sets_package_logger_level(self, monkeypatch):
        monkeypatch.setenv("FABRIC_MCP_FABRIC_BINARY", "fabric-not-installed-here")

        with pytest.raises(SystemExit):
            main(["--debug", "--check"])

        assert logging.getLogger("fabric_mcp").level == logging.DEBUG
