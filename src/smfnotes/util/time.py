from __future__ import annotations

def seconds_to_millis(seconds: float) -> int:
    # round-half-up, Eingabe ist nie negativ
    return int(seconds * 1000.0 + 0.5)

def format_time(seconds: float) -> str:
    """HH:MM:SS.mmm"""
    millis = seconds_to_millis(seconds)
    return "%02d:%02d:%02d.%03d" % (
        millis // 3_600_000,
        (millis // 60_000) % 60,
        (millis // 1000) % 60,
        millis % 1000,
    )
