"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands. Keep this file minimal to avoid circular
imports.
"""
from prm.cli.helpers import cli  # root group
from prm.cli import scan_cmds  # noqa: F401
from prm.cli import rank_cmds  # noqa: F401
from prm.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
