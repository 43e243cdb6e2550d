"""
CLI entry point for fieldtemplates.

Usage
─────
  # Expand a bean template against one type of a structure dump
  fieldtemplates expand --structure person.json --type Person \\
      --variable enclosed_bean_fields '${name}: ${getter}' ', '

  # Three-parameter form (separator gets a leading newline when "true")
  fieldtemplates expand --structure person.json --type Person \\
      --variable enclosing_bean_fields 'sb.append(${getter});' '' true

  # Show the resolved member mapping
  fieldtemplates members --structure person.json --type Person --bean

  # Parameters starting with "-" go after a `--` marker
  fieldtemplates expand --structure person.json --type Person \\
      --variable enclosed_bean_fields -- '${getter}' '-,'

  # List the template variables this tool understands
  fieldtemplates variants

Subcommands are implemented as standalone functions (cmd_expand,
cmd_members, cmd_variants) so they can be unit-tested without argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from fieldtemplates.config import TemplateConfig
from fieldtemplates.exceptions import FieldTemplatesError, UnknownVariantError
from fieldtemplates.model.base import AbstractTypeModel
from fieldtemplates.model.structure import StructureTypeModel
from fieldtemplates.resolver.engine import resolve_variable
from fieldtemplates.resolver.factory import available_variants
from fieldtemplates.resolver.members import (
    bean_pairs_strategy,
    field_types_strategy,
    resolve_mapping,
)
from fieldtemplates.resolver.models import Err, ExpansionResult, ResolutionStatus

__all__ = ["build_parser", "cmd_expand", "cmd_members", "cmd_variants", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: expand | members | variants
    """
    parser = argparse.ArgumentParser(
        prog="fieldtemplates",
        description="Expand per-field code templates from a type structure dump",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── expand ────────────────────────────────────────────────────────────
    exp = sub.add_parser("expand", help="Expand a template variable for one type")
    _add_type_arguments(exp)
    exp.add_argument(
        "--variable",
        required=True,
        metavar="NAME",
        help="Template variable type (see `variants`)",
    )
    exp.add_argument(
        "--line-separator",
        default=None,
        dest="line_separator",
        metavar="TEXT",
        help="Text substituted for ${newline} (default: platform line separator)",
    )
    exp.add_argument(
        "params",
        nargs="*",
        metavar="PARAM",
        help="Variable parameters: template, separator [, newline flag]; "
             "put `--` before them when one starts with '-'",
    )

    # ── members ───────────────────────────────────────────────────────────
    mem = sub.add_parser("members", help="Show the resolved field mapping of a type")
    _add_type_arguments(mem)
    mem.add_argument(
        "--bean",
        action="store_true",
        default=False,
        help="Map fields to bean accessors instead of field types",
    )

    # ── variants ──────────────────────────────────────────────────────────
    sub.add_parser("variants", help="List supported template variables")

    return parser


def _add_type_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--structure",
        required=True,
        metavar="PATH",
        help="JSON structure dump describing the available types",
    )
    p.add_argument(
        "--type",
        required=True,
        dest="type_name",
        metavar="NAME",
        help="Type whose fields are expanded",
    )


# ── Command implementations ───────────────────────────────────────────────────


def cmd_expand(
    model: AbstractTypeModel,
    type_name: str,
    variable: str,
    params: list[str],
    config: Optional[TemplateConfig] = None,
) -> ExpansionResult:
    """
    Resolve one template variable and print the expansion to stdout.

    Returns the ExpansionResult; nothing is printed unless it resolved.

    Raises:
        UnknownVariantError: `variable` is not a registered variant.
    """
    logger.info("Expanding %s for type %s", variable, type_name)
    result = resolve_variable(model, type_name, variable, params, config)
    if result.is_resolved:
        print(result.value)
    return result


def cmd_members(model: AbstractTypeModel, type_name: str, bean: bool) -> bool:
    """Print `name -> value` per resolved member. Returns False on failure."""
    strategy = bean_pairs_strategy if bean else field_types_strategy
    outcome = resolve_mapping(model, type_name, strategy)
    if isinstance(outcome, Err):
        print(f"Error: {outcome.error}", file=sys.stderr)
        return False
    if not outcome.value:
        print("0 members resolved.")
    for name, value in outcome.value.items():
        print(f"{name} -> {value}")
    return True


def cmd_variants() -> None:
    """Print every registered template variable with its arity."""
    for spec in available_variants():
        print(f"{spec.name:<24} {spec.arity} params  {spec.description}")


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    if ns.subcommand == "variants":
        cmd_variants()
        return 0

    try:
        model = StructureTypeModel.from_json_file(ns.structure)
    except FieldTemplatesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if ns.subcommand == "members":
        return 0 if cmd_members(model, ns.type_name, ns.bean) else 1

    if ns.subcommand == "expand":
        config = TemplateConfig.from_env(line_separator=ns.line_separator)
        try:
            result = cmd_expand(model, ns.type_name, ns.variable, ns.params, config)
        except UnknownVariantError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        if result.status is ResolutionStatus.NOT_APPLICABLE:
            print(
                f"Error: wrong number of parameters for {ns.variable} "
                f"(got {len(ns.params)})",
                file=sys.stderr,
            )
            return 1
        if result.status is ResolutionStatus.MODEL_UNAVAILABLE:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
