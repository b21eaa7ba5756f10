"""Text formatting helpers for article cards."""

ELLIPSIS = "..."


def truncate(text: str, max_length: int = 100) -> str:
    """Shorten text to at most ``max_length`` characters plus an ellipsis.

    Args:
        text: Text to shorten.
        max_length: Number of characters kept before the ellipsis.

    Returns:
        ``text`` unchanged if it fits, otherwise its first ``max_length``
        characters followed by ``"..."``.

    Raises:
        ValueError: If ``max_length`` is negative.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}{ELLIPSIS}"
