"""Tool descriptions used by the MCP tool listing."""

# ---------------------------------------------------------------------------
# Shared field descriptions
# ---------------------------------------------------------------------------

PATTERN_NAME_DESC = "Name of the Fabric pattern to use"

MODEL_DESC = "Optional AI model to use (e.g., 'gpt-4', 'claude-3-opus')"

# ---------------------------------------------------------------------------
# execute_pattern
# ---------------------------------------------------------------------------

EXECUTE_PATTERN_DESC = (
    "Execute a Fabric AI pattern on input text. Fabric has 234+ patterns for "
    "tasks like extracting wisdom, summarizing, analyzing, improving writing, etc."
)

INPUT_TEXT_DESC = "The text content to process with the pattern"

EXECUTE_PATTERN_NAME_DESC = (
    "Name of the Fabric pattern to use "
    "(e.g., 'extract_wisdom', 'summarize', 'improve_writing')"
)

# ---------------------------------------------------------------------------
# list_patterns / get_pattern_details
# ---------------------------------------------------------------------------

LIST_PATTERNS_DESC = (
    "List all available Fabric AI patterns. Optionally filter by search term."
)

SEARCH_DESC = "Optional search term to filter patterns (case-insensitive)"

PATTERN_DETAILS_DESC = "Get detailed information about a specific Fabric pattern"

PATTERN_DETAILS_NAME_DESC = "Name of the pattern to get details for"

# ---------------------------------------------------------------------------
# process_url / process_youtube
# ---------------------------------------------------------------------------

PROCESS_URL_DESC = "Fetch content from a URL and process it with a Fabric pattern"

URL_DESC = "The URL to fetch and process"

PROCESS_YOUTUBE_DESC = (
    "Extract transcript from a YouTube video and process it with a Fabric pattern"
)

YOUTUBE_URL_DESC = "The YouTube video URL"

YOUTUBE_PATTERN_NAME_DESC = (
    "Name of the Fabric pattern to use (e.g., 'youtube_summary', 'extract_wisdom')"
)

# ---------------------------------------------------------------------------
# update_patterns / list_models
# ---------------------------------------------------------------------------

UPDATE_PATTERNS_DESC = (
    "Update Fabric patterns to the latest version from the repository"
)

LIST_MODELS_DESC = "List the AI models available to Fabric"
