"""Module entry point for `python -m prm.cli`."""
import sys
import os

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    # Candidate paths may hold any character; keep Windows consoles from choking on them
    if sys.platform == "win32":
        os.environ["PYTHONIOENCODING"] = "utf-8"
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    from prm.cli import cli

    cli()
