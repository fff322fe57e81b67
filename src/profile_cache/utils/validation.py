import re

MAX_HANDLE_LENGTH = 39

_HANDLE_PATTERN = re.compile(r"[A-Za-z0-9-]+")

INVALID_HANDLE_MESSAGE = (
    "Invalid username: only letters, numbers, and - allowed. "
    f"Must not exceed {MAX_HANDLE_LENGTH} chars"
)


def is_valid_handle(handle: str) -> bool:
    """Check a user handle: 1-39 ASCII letters, digits or dashes."""
    return 0 < len(handle) <= MAX_HANDLE_LENGTH and _HANDLE_PATTERN.fullmatch(handle) is not None
