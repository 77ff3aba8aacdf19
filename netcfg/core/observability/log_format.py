from __future__ import annotations


def format_log_message(level: str, host: str, port: int, message: str) -> str:
    """Prefix a message with its level and the device it concerns."""
    return f"{level} - {host}:{port} - {message}"
