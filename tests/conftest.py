"""Shared fixtures: isolated settings and a stand-in fabric executable."""

import json
import os
import stat
import sys
from pathlib import Path

import pytest

from fabric_mcp.config import Settings, get_settings
from fabric_mcp.dispatcher import ToolDispatcher
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.primitives.subprocess import CommandExecutor
from fabric_mcp.utils.pattern_sources import PatternSourceResolver

FABRIC_STUB = Path(__file__).parent / "fabric_stub.py"


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temporary user space with file logging off."""
    monkeypatch.setenv("FABRIC_MCP_USER_SPACE", str(tmp_path / "user_space"))
    monkeypatch.setenv("FABRIC_MCP_FILE_LOGGING", "false")
    for var in (
        "FABRIC_MCP_FABRIC_BINARY",
        "FABRIC_MCP_PATTERNS_DIR",
        "FABRIC_MCP_MAX_CONCURRENCY",
        "FABRIC_MCP_DEBUG",
        "FABRIC_MCP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield tmp_path / "user_space"
    get_settings.cache_clear()


@pytest.fixture
def fake_fabric(tmp_path, monkeypatch):
    """Install an executable `fabric` stub on PATH and log its invocations."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "fabric"
    script.write_text(f"#!{sys.executable}\n" + FABRIC_STUB.read_text())
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    monkeypatch.setenv("FAKE_FABRIC_LOG", str(tmp_path / "fabric_calls.log"))
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return script


@pytest.fixture
def fabric_calls(tmp_path):
    """Read back the argument lists the fabric stub was invoked with."""

    def read():
        log = tmp_path / "fabric_calls.log"
        if not log.exists():
            return []
        return [json.loads(line) for line in log.read_text().splitlines()]

    return read


@pytest.fixture
def patterns_dir(tmp_path):
    """Pattern directory holding three patterns and one hidden entry."""
    root = tmp_path / "patterns"
    for name in ("summarize", "Extract_Wisdom", "analyze_claims"):
        (root / name).mkdir(parents=True)
    (root / "Extract_Wisdom" / "system.md").write_text(
        "# IDENTITY and PURPOSE\n\nYou extract surprising insights.\n"
    )
    (root / ".git").mkdir()
    return root


@pytest.fixture
def settings(tmp_path, fake_fabric):
    return Settings(
        fabric_binary=str(fake_fabric),
        file_logging=False,
        user_space=tmp_path / "user_space",
    )


@pytest.fixture
def make_dispatcher(settings):
    """Build a dispatcher whose resolver only probes the given directories."""

    def factory(search_paths, **kwargs):
        executor = CommandExecutor()
        resolver = PatternSourceResolver(
            FabricCLI(executor, settings.fabric_binary), search_paths
        )
        return ToolDispatcher(settings, executor=executor, resolver=resolver, **kwargs)

    return factory
