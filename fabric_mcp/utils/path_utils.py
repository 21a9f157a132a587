"""Path utilities for locating Fabric pattern directories."""

import os
from pathlib import Path
from typing import List, Optional

from fabric_mcp.constants import SYSTEM_PATTERNS_DIR, USER_PATTERNS_SUBDIR


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it and all parents if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The path (for chaining)

    Raises:
        OSError: If directory cannot be created
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_home() -> Path:
    """Get the per-user configuration directory ($XDG_CONFIG_HOME or ~/.config)."""
    config_home = os.getenv("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home).expanduser()
    return Path.home() / ".config"


def get_pattern_search_paths(override: Optional[Path] = None) -> List[Path]:
    """Candidate pattern directories, in probe order.

    Order: explicit override, system-shared location, per-user configuration
    locations. Duplicates are dropped; existence is not checked here.
    """
    candidates = []
    if override:
        candidates.append(Path(override).expanduser())
    candidates.append(Path(SYSTEM_PATTERNS_DIR))
    candidates.append(get_config_home() / USER_PATTERNS_SUBDIR)
    candidates.append(Path.home() / ".config" / USER_PATTERNS_SUBDIR)

    paths: List[Path] = []
    for candidate in candidates:
        if candidate not in paths:
            paths.append(candidate)
    return paths


def is_plain_name(name: str) -> bool:
    """True when name is a single path component safe to join onto a directory."""
    if not name or name.startswith("."):
        return False
    return "/" not in name and "\\" not in name and os.sep not in name
