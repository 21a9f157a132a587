"""Fabric MCP constants.

Tool names, per-operation time budgets, output caps and the command-line
flags understood by the fabric executable.
"""

SERVER_NAME = "fabric-ai"

INSTALL_URL = "https://github.com/danielmiessler/fabric"


class ToolName:
    """Operation names exposed to the host."""

    EXECUTE_PATTERN = "execute_pattern"
    LIST_PATTERNS = "list_patterns"
    GET_PATTERN_DETAILS = "get_pattern_details"
    PROCESS_URL = "process_url"
    PROCESS_YOUTUBE = "process_youtube"
    UPDATE_PATTERNS = "update_patterns"
    LIST_MODELS = "list_models"

    ALL = [
        EXECUTE_PATTERN,
        LIST_PATTERNS,
        GET_PATTERN_DETAILS,
        PROCESS_URL,
        PROCESS_YOUTUBE,
        UPDATE_PATTERNS,
        LIST_MODELS,
    ]


class Timeout:
    """Time budgets in milliseconds. Fixed by policy, never caller-supplied."""

    EXECUTE_PATTERN = 60_000
    PROCESS_URL = 120_000
    PROCESS_YOUTUBE = 180_000
    UPDATE_PATTERNS = 60_000
    LIST_PATTERNS = 10_000
    LIST_MODELS = 10_000
    PATTERN_DETAILS = 5_000


class BufferLimit:
    """Caps on combined stdout + stderr, in bytes."""

    CONTENT = 5 * 1024 * 1024
    LISTING = 1024 * 1024


class FabricFlag:
    """Command-line flags of the fabric executable."""

    PATTERN = "--pattern"
    MODEL = "--model"
    URL = "-u"
    YOUTUBE = "-y"
    LIST_PATTERNS = "--listpatterns"
    LIST_MODELS = "--listmodels"
    UPDATE = "--update"
    HELP = "--help"


# Standard pattern locations, probed in order after any configured override.
SYSTEM_PATTERNS_DIR = "/usr/share/fabric/patterns"
USER_PATTERNS_SUBDIR = "fabric/patterns"

# File holding a pattern's prompt inside its directory.
PATTERN_PROMPT_FILE = "system.md"
