"""
Structured warning keys for layout runs.
Layout never fails; these keys describe degraded results. Map to user-facing messages in the UI.
"""

NO_ITEMS = "no_items"
EMPTY_CANVAS = "empty_canvas"
FORCED_PLACEMENT = "forced_placement"
DROPPED_CONNECTORS = "dropped_connectors"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    NO_ITEMS: "No ideas yet. Add one to see it on the board.",
    EMPTY_CANVAS: "The board has no size yet; bubbles appear once it is visible.",
    FORCED_PLACEMENT: "Too many ideas for this board size; some bubbles overlap. Try a larger window.",
    DROPPED_CONNECTORS: "Some links point at ideas that are no longer on the board and were skipped.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
