"""One-time startup probe for the fabric executable."""

import logging
import shutil
from dataclasses import dataclass
from typing import Optional

from fabric_mcp.constants import INSTALL_URL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Readiness:
    """Result of looking for fabric on PATH at startup.

    Attributes:
        binary: The name or path that was probed.
        path: Resolved executable path, or None when not found.
    """

    binary: str
    path: Optional[str] = None

    @property
    def installed(self) -> bool:
        return self.path is not None

    def describe(self) -> str:
        if self.installed:
            return f"Fabric CLI found at {self.path}"
        return f"Fabric CLI '{self.binary}' not found on PATH. Install it from: {INSTALL_URL}"


def probe(binary: str) -> Readiness:
    """Locate binary and log the result. Never raises."""
    readiness = Readiness(binary=binary, path=shutil.which(binary))
    if readiness.installed:
        logger.info(readiness.describe())
    else:
        logger.warning(
            f"{readiness.describe()} Continuing in degraded mode: "
            "pattern listing from disk still works, execution calls will fail."
        )
    return readiness
