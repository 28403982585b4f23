from .datetime_utils import to_naive_utc, utcnow

__all__ = [
    "to_naive_utc",
    "utcnow",
]
