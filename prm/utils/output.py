"""Output formatting utilities for consistent CLI reporting."""

import click


def success(text: str, prefix: str = "✓") -> str:
    """Format a success message.

    Args:
        text: Message text
        prefix: Prefix character (default: ✓)

    Returns:
        Formatted success string
    """
    return f"{click.style(prefix, fg='green')} {text}"


def error(text: str, prefix: str = "✗") -> str:
    return f"{click.style(prefix, fg='red')} {text}"


def warning(text: str, prefix: str = "⚠") -> str:
    return f"{click.style(prefix, fg='yellow')} {text}"


def info(text: str) -> str:
    return f"  {click.style('•', fg='blue')} {text}"


__all__ = [
    "success",
    "error",
    "warning",
    "info",
]
