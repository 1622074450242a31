"""
Shared field validators.

Names and titles are stored stripped, and a value that is empty after
stripping is rejected. The request schemas and the create endpoints'
query parameters both go through strip_non_blank so the rule is the
same everywhere.
"""


def strip_non_blank(value: str, label: str) -> str:
    """
    Strip surrounding whitespace and reject blank values.

    Args:
        value: The raw value
        label: Field name used in the error message, e.g. "Name"

    Returns:
        The stripped value

    Raises:
        ValueError: If nothing is left after stripping
    """
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{label} cannot be empty or whitespace")
    return stripped
