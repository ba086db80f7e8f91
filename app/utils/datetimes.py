from datetime import datetime, timezone, tzinfo


def as_utc(value: datetime) -> datetime:
    """Ramène une date en UTC ; une date naïve (SQLite, client) est considérée comme UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def localize(value: datetime, tz: tzinfo) -> datetime:
    """Conversion pour l'affichage uniquement."""
    return as_utc(value).astimezone(tz)
