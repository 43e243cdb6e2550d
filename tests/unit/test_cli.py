"""
Unit tests for fieldtemplates/cli/

Coverage plan
─────────────
arg parsing     → expand / members / variants subcommands
expand command  → resolved, not applicable, unknown variable, bad dump
members command → bean and plain mappings
variants        → lists every registered variable
"""

import pytest

from fieldtemplates.cli.main import build_parser, cmd_members, cmd_variants, main
from fieldtemplates.model.models import Member, MethodInfo, StructureDump, TypeInfo
from fieldtemplates.model.structure import StructureTypeModel


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    return build_parser().parse_args(args)


@pytest.fixture
def structure() -> StructureDump:
    return StructureDump(types=[
        TypeInfo(
            name="Person",
            fields=[Member("id", "I"), Member("active", "Z"), Member("nick", "QString;")],
            methods=[MethodInfo("getId"), MethodInfo("isActive")],
        ),
    ])


@pytest.fixture
def dump_path(tmp_path, structure) -> str:
    path = tmp_path / "structure.json"
    path.write_text(structure.to_json(), encoding="utf-8")
    return str(path)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_expand_parses_params(self):
        ns = _parse(["expand", "--structure", "s.json", "--type", "Person",
                     "--variable", "enclosed_fields", "${name}", ","])
        assert ns.subcommand == "expand"
        assert ns.type_name == "Person"
        assert ns.variable == "enclosed_fields"
        assert ns.params == ["${name}", ","]

    def test_expand_line_separator_defaults_to_none(self):
        ns = _parse(["expand", "--structure", "s.json", "--type", "T", "--variable", "v"])
        assert ns.line_separator is None
        assert ns.params == []

    def test_members_bean_flag(self):
        ns = _parse(["members", "--structure", "s.json", "--type", "T", "--bean"])
        assert ns.subcommand == "members"
        assert ns.bean is True

    def test_variants_subcommand(self):
        assert _parse(["variants"]).subcommand == "variants"


# ─────────────────────────────────────────────────────────────────────────────
# 2. expand
# ─────────────────────────────────────────────────────────────────────────────

class TestExpandCommand:

    def test_bean_expansion_printed(self, dump_path, capsys):
        code = main(["expand", "--structure", dump_path, "--type", "Person",
                     "--variable", "enclosed_bean_fields", "${name}: ${getter}", ", "])
        assert code == 0
        assert capsys.readouterr().out == "id: getId(), active: isActive()\n"

    def test_line_separator_option(self, dump_path, capsys):
        code = main(["expand", "--structure", dump_path, "--type", "Person",
                     "--line-separator", "\\n", "--variable", "enclosed_fields",
                     "${type} ${name};", "${newline}"])
        assert code == 0
        assert capsys.readouterr().out == "int id;\nboolean active;\nString nick;\n"

    def test_not_applicable_exit_code(self, dump_path, capsys):
        code = main(["expand", "--structure", dump_path, "--type", "Person",
                     "--variable", "enclosing_bean_fields", "${name}", ","])
        assert code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "wrong number of parameters" in captured.err

    def test_unknown_variable_exit_code(self, dump_path, capsys):
        code = main(["expand", "--structure", dump_path, "--type", "Person",
                     "--variable", "bogus", "a", "b"])
        assert code == 1
        assert "bogus" in capsys.readouterr().err

    def test_unknown_type_exit_code(self, dump_path, capsys):
        code = main(["expand", "--structure", dump_path, "--type", "Ghost",
                     "--variable", "enclosed_fields", "${name}", ","])
        assert code == 1
        assert "Ghost" in capsys.readouterr().err

    def test_missing_structure_file(self, tmp_path, capsys):
        code = main(["expand", "--structure", str(tmp_path / "nope.json"),
                     "--type", "Person", "--variable", "enclosed_fields", "a", "b"])
        assert code == 1
        assert "Error" in capsys.readouterr().err

    def test_non_string_type_in_dump(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"types": [{"name": "P", "fields": [{"name": "id", "type": 5}]}]}',
                        encoding="utf-8")
        code = main(["expand", "--structure", str(path), "--type", "P",
                     "--variable", "enclosed_fields", "${type}", ","])
        assert code == 1
        assert "Error" in capsys.readouterr().err

    def test_dash_separator_after_double_dash(self, dump_path, capsys):
        code = main(["expand", "--structure", dump_path, "--type", "Person",
                     "--variable", "enclosed_bean_fields", "--", "${name}", "-,"])
        assert code == 0
        assert capsys.readouterr().out == "id-,active\n"


# ─────────────────────────────────────────────────────────────────────────────
# 3. members / variants
# ─────────────────────────────────────────────────────────────────────────────

class TestMembersCommand:

    def test_bean_mapping(self, structure, capsys):
        assert cmd_members(StructureTypeModel(structure), "Person", bean=True)
        out = capsys.readouterr().out.splitlines()
        assert out == ["id -> getId()", "active -> isActive()"]

    def test_field_type_mapping(self, structure, capsys):
        assert cmd_members(StructureTypeModel(structure), "Person", bean=False)
        out = capsys.readouterr().out.splitlines()
        assert out == ["id -> int", "active -> boolean", "nick -> String"]

    def test_unknown_type_returns_false(self, structure, capsys):
        assert not cmd_members(StructureTypeModel(structure), "Ghost", bean=True)
        assert "Ghost" in capsys.readouterr().err

    def test_main_members_exit_code(self, dump_path, capsys):
        assert main(["members", "--structure", dump_path, "--type", "person"]) == 0
        assert "nick -> String" in capsys.readouterr().out


class TestVariantsCommand:

    def test_lists_all_variables(self, capsys):
        cmd_variants()
        out = capsys.readouterr().out
        for name in ("enclosing_bean_fields", "enclosed_bean_fields", "enclosed_fields"):
            assert name in out

    def test_no_subcommand_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
