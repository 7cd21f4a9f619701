from datetime import date, datetime, timezone


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(timezone.utc).date()


def to_calendar_day(value) -> date:
    """
    Reduce a date-like value to its calendar day.

    Accepts ``date``, ``datetime`` and ISO-8601 strings. Aware datetimes are
    converted to UTC before the day is taken, so every caller ends up with
    the same day for the same instant. Raises ``ValueError`` otherwise.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"Invalid date: {value!r}")
        return to_calendar_day(parsed)

    raise ValueError(f"Invalid date: {value!r}")
