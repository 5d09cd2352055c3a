"""Countdown display formatting."""


def format_time(total_seconds: int) -> str:
    """``MM:SS``, zero-padded.  Minutes are not capped (3661 → ``61:01``)."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
