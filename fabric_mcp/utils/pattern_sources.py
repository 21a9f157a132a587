"""Pattern catalog resolution.

Two sources, tried in order and never merged:

1. Filesystem: the first candidate pattern directory that exists and holds
   at least one entry.
2. CLI fallback: `fabric --listpatterns`, one identifier per line.

If neither produces entries the catalog is empty; that is a normal result,
not an error.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fabric_mcp.constants import PATTERN_PROMPT_FILE, BufferLimit, FabricFlag, Timeout
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.primitives.errors import BridgeError, FilesystemError
from fabric_mcp.utils.path_utils import get_pattern_search_paths, is_plain_name

logger = logging.getLogger(__name__)


def filter_patterns(entries: List[str], search: str = "") -> List[str]:
    """Case-insensitive substring filter."""
    if not search:
        return list(entries)
    needle = search.lower()
    return [entry for entry in entries if needle in entry.lower()]


class PatternSourceResolver:
    """Resolves the list of available pattern identifiers.

    Args:
        fabric: CLI adapter used for the fallback listing.
        search_paths: Candidate directories in probe order.
    """

    def __init__(self, fabric: FabricCLI, search_paths: Optional[List[Path]] = None):
        self.fabric = fabric
        self.search_paths = (
            list(search_paths) if search_paths is not None else get_pattern_search_paths()
        )

    async def list_patterns(self, search: str = "") -> List[str]:
        """Resolve the catalog afresh and filter it by search."""
        entries = self._list_from_filesystem()
        if not entries:
            entries = await self._list_from_cli()
        return filter_patterns(entries, search)

    def find_pattern_file(self, pattern_name: str) -> Optional[Path]:
        """Locate the prompt file for pattern_name in the candidate directories."""
        if not is_plain_name(pattern_name):
            return None
        for directory in self.search_paths:
            prompt = directory / pattern_name / PATTERN_PROMPT_FILE
            if prompt.is_file():
                return prompt
        return None

    def _list_from_filesystem(self) -> List[str]:
        for directory in self.search_paths:
            try:
                entries = self._read_directory(directory)
            except FilesystemError as e:
                logger.debug(f"Skipping pattern directory: {e.message}")
                continue
            if entries:
                logger.debug(f"Found {len(entries)} patterns in {directory}")
                return entries
        return []

    @staticmethod
    def _read_directory(directory: Path) -> List[str]:
        try:
            names = [
                child.name
                for child in directory.iterdir()
                if not child.name.startswith(".")
            ]
        except OSError as e:
            raise FilesystemError(
                f"Cannot read {directory}: {e.strerror or e}", path=str(directory), cause=e
            )
        return sorted(names)

    async def _list_from_cli(self) -> List[str]:
        logger.info("No pattern directory available, falling back to fabric --listpatterns")
        try:
            outcome = await self.fabric.run(
                [FabricFlag.LIST_PATTERNS],
                timeout_ms=Timeout.LIST_PATTERNS,
                max_buffer_bytes=BufferLimit.LISTING,
                label="List patterns",
            )
        except BridgeError as e:
            logger.warning(f"Pattern listing fallback failed: {e.message}")
            return []
        return sorted(line.strip() for line in outcome.stdout.splitlines() if line.strip())
