"""
Unit tests for fieldtemplates/expander/ and fieldtemplates/config.py.

Covers:
  • substitute — literal replacement, no second pass, regex-safe
  • expand — per-entry lines, join, order, empty mapping
  • TemplateParameters — arity gate, flag parsing, separator policy
  • TemplateConfig.from_env
"""

import os

import pytest

from fieldtemplates.config import TemplateConfig
from fieldtemplates.expander.params import TemplateParameters, parse_flag
from fieldtemplates.expander.template import (
    GETTER_PLACEHOLDER,
    NAME_PLACEHOLDER,
    TYPE_PLACEHOLDER,
    expand,
    substitute,
)


# ── substitute ─────────────────────────────────────────────────────────────────

class TestSubstitute:
    def test_replaces_every_occurrence(self):
        out = substitute("${name}=${name}", {NAME_PLACEHOLDER: "id"})
        assert out == "id=id"

    def test_template_without_placeholders_unchanged(self):
        assert substitute("plain text", {NAME_PLACEHOLDER: "id"}) == "plain text"

    def test_substituted_value_is_not_expanded_again(self):
        out = substitute(
            "${name}-${getter}",
            {NAME_PLACEHOLDER: "${getter}", GETTER_PLACEHOLDER: "getX()"},
        )
        assert out == "${getter}-getX()"

    def test_regex_metacharacters_are_literal(self):
        out = substitute("a$1\\b.* ${name}", {NAME_PLACEHOLDER: "$0\\1"})
        assert out == "a$1\\b.* $0\\1"

    def test_unknown_placeholder_left_alone(self):
        out = substitute("${name} ${setter}", {NAME_PLACEHOLDER: "id"})
        assert out == "id ${setter}"


# ── expand ─────────────────────────────────────────────────────────────────────

class TestExpand:
    def test_bean_lines_joined_with_separator(self):
        mapping = {"id": "getId()", "active": "isActive()"}
        out = expand("${name}: ${getter}", ", ", mapping,
                     NAME_PLACEHOLDER, GETTER_PLACEHOLDER)
        assert out == "id: getId(), active: isActive()"

    def test_field_type_lines(self):
        mapping = {"id": "int", "active": "boolean"}
        out = expand("${type} ${name};", "\n", mapping,
                     NAME_PLACEHOLDER, TYPE_PLACEHOLDER)
        assert out == "int id;\nboolean active;"

    def test_preserves_mapping_order(self):
        mapping = {"zeta": "a", "alpha": "b", "mid": "c"}
        out = expand("${name}", ",", mapping, NAME_PLACEHOLDER, TYPE_PLACEHOLDER)
        assert out == "zeta,alpha,mid"

    def test_empty_mapping_gives_empty_string(self):
        assert expand("${name}", ", ", {}, NAME_PLACEHOLDER, GETTER_PLACEHOLDER) == ""

    def test_single_entry_has_no_separator(self):
        out = expand("${name}", ", ", {"id": "getId()"},
                     NAME_PLACEHOLDER, GETTER_PLACEHOLDER)
        assert out == "id"

    def test_is_pure(self):
        mapping = {"id": "getId()"}
        first = expand("${getter};", " ", mapping, NAME_PLACEHOLDER, GETTER_PLACEHOLDER)
        second = expand("${getter};", " ", mapping, NAME_PLACEHOLDER, GETTER_PLACEHOLDER)
        assert first == second == "getId();"


# ── TemplateParameters ─────────────────────────────────────────────────────────

class TestTemplateParameters:
    def test_two_params_accepted_for_arity_two(self):
        p = TemplateParameters.from_params(["t", "s"], 2)
        assert p == TemplateParameters("t", "s", None)

    def test_three_params_accepted_for_arity_three(self):
        p = TemplateParameters.from_params(["t", "s", "true"], 3)
        assert p == TemplateParameters("t", "s", True)

    @pytest.mark.parametrize("params", [[], ["t"], ["t", "s", "x"], ["a", "b", "c", "d"]])
    def test_wrong_count_for_arity_two_is_none(self, params):
        assert TemplateParameters.from_params(params, 2) is None

    def test_wrong_count_for_arity_three_is_none(self):
        assert TemplateParameters.from_params(["t", "s"], 3) is None

    def test_newline_placeholder_uses_line_separator(self):
        p = TemplateParameters("t", ";${newline}")
        assert p.effective_separator(TemplateConfig(line_separator="\r\n")) == ";\r\n"

    def test_newline_placeholder_defaults_to_platform(self):
        p = TemplateParameters("t", "${newline}")
        assert p.effective_separator(TemplateConfig()) == os.linesep

    def test_force_newline_prefixes_separator(self):
        p = TemplateParameters("t", ", ", True)
        assert p.effective_separator(TemplateConfig()) == "\n, "

    def test_force_newline_false_keeps_separator(self):
        p = TemplateParameters("t", ", ", False)
        assert p.effective_separator(TemplateConfig()) == ", "

    def test_three_param_form_leaves_newline_token(self):
        p = TemplateParameters("t", "${newline}", False)
        assert p.effective_separator(TemplateConfig()) == "${newline}"


class TestParseFlag:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "True", True])
    def test_true_values(self, raw):
        assert parse_flag(raw) is True

    @pytest.mark.parametrize("raw", ["false", "yes", "1", "", " true", False])
    def test_everything_else_is_false(self, raw):
        assert parse_flag(raw) is False


# ── TemplateConfig ─────────────────────────────────────────────────────────────

class TestTemplateConfig:
    def test_defaults(self):
        cfg = TemplateConfig()
        assert cfg.line_separator == os.linesep
        assert cfg.forced_newline == "\n"

    def test_from_env_empty_environment(self):
        assert TemplateConfig.from_env(environ={}) == TemplateConfig()

    def test_from_env_decodes_escapes(self):
        cfg = TemplateConfig.from_env(environ={
            "FIELDTEMPLATES_LINE_SEPARATOR": "\\r\\n",
            "FIELDTEMPLATES_FORCED_NEWLINE": "\\n    ",
        })
        assert cfg.line_separator == "\r\n"
        assert cfg.forced_newline == "\n    "

    def test_explicit_line_separator_wins(self):
        cfg = TemplateConfig.from_env(
            environ={"FIELDTEMPLATES_LINE_SEPARATOR": "\\r\\n"},
            line_separator="\\n",
        )
        assert cfg.line_separator == "\n"
