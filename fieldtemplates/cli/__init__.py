"""
cli — command-line interface for fieldtemplates.

Entry points
────────────
  python -m fieldtemplates   (via fieldtemplates/__main__.py)
  fieldtemplates             (via pyproject.toml [project.scripts])

Subcommands: expand | members | variants
"""

from fieldtemplates.cli.main import build_parser, cmd_expand, cmd_members, cmd_variants, main

__all__ = ["build_parser", "cmd_expand", "cmd_members", "cmd_variants", "main"]
