"""
Text helpers used when building prompts and chat messages.
"""

from typing import Optional, Tuple


def truncate_text(text: str, max_length: int) -> str:
    """Truncate ``text`` to ``max_length`` characters, ending with ``...`` when cut."""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[:max_length - 3] + "..."


def split_repository(full_name: str) -> Optional[Tuple[str, str]]:
    """Split ``owner/name`` into its parts; None if it is not of that form."""
    parts = full_name.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def mask_secret(value: str) -> str:
    """Mask a token for logging, keeping a short prefix and suffix."""
    if not value:
        return "<unset>"
    if len(value) <= 10:
        return "***"
    return f"{value[:6]}...{value[-4:]}"
