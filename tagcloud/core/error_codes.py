"""
Structured reason codes for words missing from a layout.
Use these keys in PlacementNotice.reason; map to user-facing messages in the UI.
"""

# Known reason keys (PlacementNotice.reason)
UNPLACEABLE = "unplaceable"
OVER_CAPACITY = "over_capacity"
INVALID_TEXT = "invalid_text"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    UNPLACEABLE: "No free space left for this word. Try a larger canvas or fewer words.",
    OVER_CAPACITY: "Word cut by the canvas capacity or max words limit.",
    INVALID_TEXT: "Word has empty text and was ignored.",
}


def user_message(reason: str | None, fallback: str = "Word could not be shown.") -> str:
    """Return a user-facing message for the given reason key."""
    if not reason:
        return fallback
    return USER_MESSAGES.get(reason, fallback)
