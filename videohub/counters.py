"""Likes and views are stored as display strings ("12,345")."""
import re

COUNTER_RE = re.compile(r"\d{1,3}(,\d{3})*|\d+")


def decode(counter: str) -> int:
    text = str(counter)
    if not COUNTER_RE.fullmatch(text):
        raise ValueError(f"Malformed counter: {counter!r}")
    return int(text.replace(",", ""))


def encode(n: int) -> str:
    if n < 0:
        raise ValueError(f"Negative counter: {n}")
    return f"{n:,}"


def increment(counter: str) -> str:
    return encode(decode(counter) + 1)
