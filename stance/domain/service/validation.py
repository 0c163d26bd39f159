"""Input checks shared by the domain services."""

from stance.domain.error import ValidationError

AUTHOR_NAME_LENGTH = (2, 20)
COMMENT_BODY_LENGTH = (10, 500)
REPLY_BODY_LENGTH = (5, 300)
TITLE_LENGTH = (1, 200)
DESCRIPTION_MAX_LENGTH = 1000


def clean_text(value: str, field: str, length: tuple[int, int]) -> str:
    """Trim ``value`` and check its length is within ``length`` (inclusive).

    Args:
        value: Raw user input
        field: Human readable field name used in the error message
        length: (minimum, maximum) number of characters after trimming

    Returns:
        The trimmed value

    Raises:
        ValidationError: If the trimmed value is too short or too long
    """
    minimum, maximum = length
    cleaned = (value or "").strip()
    if len(cleaned) < minimum or len(cleaned) > maximum:
        raise ValidationError(
            f"{field} must be between {minimum} and {maximum} characters"
        )
    return cleaned


def clean_description(value: str | None) -> str | None:
    """Trim an optional description; empty becomes None.

    Raises:
        ValidationError: If the description is too long
    """
    cleaned = (value or "").strip()
    if len(cleaned) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )
    return cleaned or None
