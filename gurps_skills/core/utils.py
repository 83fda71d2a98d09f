"""
Utilities module for the proficiency engine.

Small string helpers shared by the bonus matching and display code.
"""


def with_sign(value: int) -> str:
    """
    Formats an integer with an explicit sign.

    Args:
        value (int): The value to format.

    Returns:
        str: The value prefixed by "+" when it is zero or positive.

    """
    return f"{value:+d}"


def fold(text: str | None) -> str:
    """
    Normalizes a qualifier for case-insensitive comparisons.

    Args:
        text (str | None): The text to normalize, None is treated as empty.

    Returns:
        str: The lowercased, stripped text.

    """
    return (text or "").strip().lower()
