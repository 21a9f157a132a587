"""Result formatting.

Every tool call ends here: successes get a marker and a heading for the
operation kind, failures get the failure marker and the most specific cause
available. Callers never see a raw exception.
"""

from typing import Sequence

from fabric_mcp.models import ToolResponse
from fabric_mcp.primitives.errors import BridgeError

SUCCESS_MARKER = "✅"
FAILURE_MARKER = "❌"
CATALOG_MARKER = "📋"
DETAIL_MARKER = "📄"
MODELS_MARKER = "🤖"


class ResultKind:
    """Headings for each kind of successful result."""

    PATTERN = "Pattern Result"
    URL = "URL Processing Result"
    YOUTUBE = "YouTube Processing Result"
    UPDATE = "Patterns Updated"


def format_success(kind: str, body: str) -> ToolResponse:
    return ToolResponse(text=f"{SUCCESS_MARKER} {kind}:\n\n{body}")


def format_catalog(entries: Sequence[str], search: str = "") -> ToolResponse:
    """Format a pattern listing. An empty listing is not an error."""
    if not entries:
        if search:
            return ToolResponse(text=f"{CATALOG_MARKER} No patterns found matching: {search}")
        return ToolResponse(text=f"{CATALOG_MARKER} No patterns available")
    listing = "\n".join(entries)
    return ToolResponse(
        text=f"{CATALOG_MARKER} Available Patterns ({len(entries)}):\n\n{listing}"
    )


def format_pattern_detail(pattern_name: str, body: str) -> ToolResponse:
    return ToolResponse(
        text=f"{DETAIL_MARKER} Pattern Details: {pattern_name}\n\n"
        f"{body or 'No description available'}"
    )


def format_pattern_stub(pattern_name: str) -> ToolResponse:
    """Details response when nothing beyond the name is known."""
    return ToolResponse(
        text=f"{DETAIL_MARKER} Pattern: {pattern_name}\n\n"
        "No additional details available. Use execute_pattern to run this pattern."
    )


def format_models(body: str) -> ToolResponse:
    return ToolResponse(text=f"{MODELS_MARKER} Available Models:\n\n{body}")


def format_error(error: BaseException) -> ToolResponse:
    """Single-paragraph failure text with is_error set."""
    if isinstance(error, BridgeError):
        message = error.envelope().human_message
    else:
        message = str(error) or type(error).__name__
    message = " ".join(message.split())
    return ToolResponse(text=f"{FAILURE_MARKER} Error: {message}", is_error=True)
