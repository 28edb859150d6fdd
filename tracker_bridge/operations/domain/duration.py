"""Conversion between human-readable and ISO-8601 worklog durations."""

import re

_HOURS = re.compile(r"(\d+)\s*(?:hours|hour|hrs|hr|h)(?![a-z])", re.IGNORECASE)
_MINUTES = re.compile(r"(\d+)\s*(?:minutes|minute|mins|min|m)(?![a-z])", re.IGNORECASE)
_SECONDS = re.compile(r"(\d+)\s*(?:seconds|second|secs|sec|s)(?![a-z])", re.IGNORECASE)
_ISO = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$")

_EXPECTED = 'expected a duration like "1h", "30m", "1h 30m" or "2 hours 15 minutes"'


def is_iso_duration(value: str) -> bool:
    """True for a non-zero ``PT#H#M#S`` duration."""
    match = _ISO.match(value.strip())
    return match is not None and any(int(part or 0) > 0 for part in match.groups())


def to_iso_duration(value: str) -> str:
    """Convert ``"1h 30m"`` style input to ``"PT1H30M"``.

    Raises:
        ValueError: if the input is empty, negative, already ISO, zero-length,
            or has minutes/seconds outside 0-59.
    """
    text = value.strip()
    if not text:
        raise ValueError("Duration must be a non-empty string")
    if text.upper().startswith("PT"):
        raise ValueError(f"Invalid duration {value!r}: {_EXPECTED}")
    if "-" in text:
        raise ValueError("Duration components must be non-negative")

    hours = _component(_HOURS, text)
    minutes = _component(_MINUTES, text)
    seconds = _component(_SECONDS, text)
    if hours == minutes == seconds == 0:
        raise ValueError(f"Invalid duration {value!r}: {_EXPECTED}")
    if minutes >= 60:
        raise ValueError("Minutes must be less than 60")
    if seconds >= 60:
        raise ValueError("Seconds must be less than 60")

    iso = "PT"
    if hours:
        iso += f"{hours}H"
    if minutes:
        iso += f"{minutes}M"
    if seconds:
        iso += f"{seconds}S"
    return iso


def to_human_duration(value: str) -> str:
    """Convert ``"PT1H30M"`` to ``"1h 30m"``."""
    match = _ISO.match(value.strip())
    if match is None:
        raise ValueError(
            f"Invalid ISO 8601 duration {value!r}: expected a value like PT1H30M"
        )
    parts = [
        f"{int(amount)}{unit}"
        for amount, unit in zip(match.groups(), ("h", "m", "s"))
        if amount and int(amount) > 0
    ]
    if not parts:
        raise ValueError(f"Invalid ISO 8601 duration {value!r}: zero duration")
    return " ".join(parts)


def normalize_duration(value: str) -> str:
    """Return ``value`` as ISO-8601, accepting either ISO or human-readable input."""
    if is_iso_duration(value):
        return value.strip()
    return to_iso_duration(value)


def _component(pattern: re.Pattern[str], text: str) -> int:
    match = pattern.search(text)
    return int(match.group(1)) if match else 0
