from typing import Optional

from file_manager.exceptions import MissingArgumentError


def require_argument(value: Optional[str], name: str) -> str:
    """Return ``value`` or raise MissingArgumentError when it is absent or blank."""
    if value is None or not str(value).strip():
        raise MissingArgumentError(f"Missing required argument: {name}")
    return value
