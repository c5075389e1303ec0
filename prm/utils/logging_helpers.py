"""Logging helper utilities for consistent progress reporting."""

import logging
import click

logger = logging.getLogger(__name__)


def log_progress(
    processed: int,
    total: int | None,
    kept: int = 0,
    rejected: int = 0,
    elapsed_seconds: float = 0.0,
    item_name: str = "records"
) -> None:
    """Log progress info with consistent formatting.

    Args:
        processed: Number of items processed so far
        total: Total number of items (None if unknown)
        kept: Count of items kept
        rejected: Count of items rejected
        elapsed_seconds: Time elapsed since start
        item_name: Name of items being processed (e.g., "records", "candidates")
    """
    parts = [
        f"{click.style(f'{processed}', fg='cyan')} {item_name} processed"
    ]

    if total:
        pct = (processed / total * 100) if total > 0 else 0
        parts[0] = f"{click.style(f'{processed}/{total}', fg='cyan')} {item_name} ({pct:.0f}%)"

    if kept > 0:
        parts.append(f"{click.style(f'{kept} kept', fg='green')}")
    if rejected > 0:
        parts.append(f"{click.style(f'{rejected} rejected', fg='yellow')}")

    if elapsed_seconds > 0:
        rate = processed / elapsed_seconds
        parts.append(f"{rate:.1f} {item_name}/s")

    logger.info(" | ".join(parts))


def format_summary(
    found: int,
    scanned: int,
    skipped: int = 0,
    duration_seconds: float = 0.0,
    item_name: str = "files",
    container_name: str = "directories",
) -> str:
    """Format a summary line with colored counts.

    Args:
        found: Count of items collected
        scanned: Count of containers walked
        skipped: Count of containers that could not be read
        duration_seconds: Total duration in seconds
        item_name: Name of collected items
        container_name: Name of walked containers

    Returns:
        Formatted summary string with colors
    """
    parts = [
        click.style('✓', fg='green'),
        click.style(f'{found} {item_name}', fg='green'),
        "in",
        click.style(f'{scanned} {container_name}', fg='blue'),
    ]

    if skipped > 0:
        parts.append(click.style(f'({skipped} unreadable)', fg='red'))

    if duration_seconds > 0:
        parts.append(f"in {duration_seconds * 1000:.0f}ms")

    return " ".join(parts)


__all__ = ["log_progress", "format_summary"]
