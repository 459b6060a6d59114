from datetime import date, datetime, timezone


def dt_to_iso(dt: datetime) -> str:
    """
    Convert a datetime to canonical DynamoDB-friendly ISO8601.
    Always returns a UTC Z-suffixed string.
    """
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def now() -> datetime:
    return datetime.now(timezone.utc)


def today() -> date:
    return now().date()


def years_before(d: date, years: int) -> date:
    """
    Same calendar day `years` earlier. 29 Feb falls back to 28 Feb.
    """
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        return d.replace(year=d.year - years, day=28)


def whole_years_between(start: date, end: date) -> int:
    """
    Completed years from start to end. Negative spans return 0.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return max(0, years)


def format_minutes(minutes: int) -> str:
    if minutes <= 0:
        return "0m"

    hours, mins = divmod(minutes, 60)
    if hours:
        return f"{hours}h {mins}m"
    return f"{mins}m"
