"""Parsing of the dependency-tracking exclusion list."""

from constants import EXCLUDED_TARGETS_SEPARATOR, MIN_EXCLUDED_TARGET_LENGTH


def parse_excluded_targets(raw: str | None) -> list[str]:
    """Turn a newline-delimited exclusion string into a list of host names.

    Entries are trimmed; blank entries and entries shorter than
    MIN_EXCLUDED_TARGET_LENGTH characters are dropped. Order of appearance
    is preserved, duplicates are kept and case is left untouched.

    Parameters:
        raw: Newline-delimited host names, may be None or empty.

    Returns:
        list[str]: The retained host names.
    """
    if not raw:
        return []
    return [
        entry
        for entry in (
            line.strip() for line in raw.split(EXCLUDED_TARGETS_SEPARATOR)
        )
        if len(entry) >= MIN_EXCLUDED_TARGET_LENGTH
    ]
