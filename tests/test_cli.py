"""
Tests for the command-line front end.

Validates that:
1. eval / compare / check / opsets produce the documented JSON
2. Exit codes: 0 success, 1 expression or value error, 2 usage error
3. Configuration supplies the default opset and labeling
"""

import json

import pytest

from fuzzy_cli import main
from fuzzy_systems.cli import EXIT_EXPRESSION_ERROR, EXIT_OK, EXIT_USAGE_ERROR
from fuzzy_systems.cli.utils import parse_assignment

ABC = ["--set", "a=0.1", "--set", "b=0.6", "--set", "c=0.4"]


def run_json(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, json.loads(out)


class TestEval:
    """`eval` subcommand."""

    def test_worked_example(self, clean_env, capsys):
        code, payload = run_json(capsys, ["eval", "(a | b) & !c", *ABC, "--json"])
        assert code == EXIT_OK
        assert payload["status"] == "pass"
        assert payload["canonical"] == "((a | b) & !c)"
        assert payload["rendered"] == "((a | b) & !c)"
        assert payload["opset"] == "hamacher1"
        assert payload["value"] == pytest.approx(0.384, abs=1e-4)

    def test_no_labels(self, clean_env, capsys):
        code, payload = run_json(capsys, ["eval", "(a | b) & !c", *ABC, "--no-labels", "--json"])
        assert code == EXIT_OK
        assert payload["rendered"] == "((0.1 | 0.6) & !0.4)"

    def test_labels_off_from_config(self, clean_env, capsys, monkeypatch):
        monkeypatch.setenv("FUZZY_LABEL_ATOMS", "false")
        _, payload = run_json(capsys, ["eval", "a & b", *ABC, "--json"])
        assert payload["rendered"] == "(0.1 & 0.6)"

    def test_opset_option(self, clean_env, capsys):
        _, payload = run_json(capsys, ["eval", "a | b", *ABC, "--opset", "yagerinf", "--json"])
        assert payload["opset"] == "yagerinf"
        assert payload["value"] == 0.6

    def test_default_opset_from_config(self, clean_env, capsys, monkeypatch):
        monkeypatch.setenv("FUZZY_DEFAULT_OPSET", "yagerinf")
        _, payload = run_json(capsys, ["eval", "a & b", *ABC, "--json"])
        assert payload["opset"] == "yagerinf"
        assert payload["value"] == 0.1

    def test_literal_operand(self, clean_env, capsys):
        _, payload = run_json(capsys, ["eval", "a & 0.5", "--set", "a=0.5", "--json"])
        assert payload["value"] == 0.25

    def test_syntax_error(self, clean_env, capsys):
        code, payload = run_json(capsys, ["eval", "a & & b", *ABC, "--json"])
        assert code == EXIT_EXPRESSION_ERROR
        assert payload["status"] == "fail"
        assert payload["error_type"] == "ExpressionSyntaxError"
        assert payload["position"] == 4

    def test_unbound_operand(self, clean_env, capsys):
        code, payload = run_json(capsys, ["eval", "a & d", *ABC, "--json"])
        assert code == EXIT_EXPRESSION_ERROR
        assert payload["error_type"] == "UnboundNameError"

    def test_out_of_range_value(self, clean_env, capsys):
        code, payload = run_json(capsys, ["eval", "a", "--set", "a=1.5", "--json"])
        assert code == EXIT_EXPRESSION_ERROR
        assert payload["error_type"] == "OutOfRangeError"

    def test_rich_output(self, clean_env, capsys):
        assert main(["eval", "a | b", *ABC]) == EXIT_OK
        out = capsys.readouterr().out
        assert "(a | b)" in out
        assert "hamacher1" in out

    def test_unknown_opset_is_usage_error(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["eval", "a", "--set", "a=0.1", "--opset", "nope"])
        assert exc_info.value.code == EXIT_USAGE_ERROR

    def test_bad_default_opset_is_usage_error(self, clean_env, capsys, monkeypatch):
        monkeypatch.setenv("FUZZY_DEFAULT_OPSET", "nope")
        assert main(["eval", "a", "--set", "a=0.1"]) == EXIT_USAGE_ERROR


class TestCompare:
    """`compare` subcommand."""

    def test_every_opset(self, clean_env, capsys):
        code, payload = run_json(capsys, ["compare", "a | b & !c", *ABC, "--json"])
        assert code == EXIT_OK
        by_name = {row["opset"]: row for row in payload["results"]}
        assert set(by_name) >= {"yager1", "yagerinf", "hamacher0", "hamacher1", "hamacher2"}
        assert by_name["yagerinf"]["value"] == pytest.approx(0.6)
        assert by_name["hamacher1"]["differentiable"] is True
        assert by_name["yager1"]["differentiable"] is False
        assert by_name["hamacher1"]["rendered"] == "(a | (b & !c))"

    def test_syntax_error(self, clean_env, capsys):
        code, payload = run_json(capsys, ["compare", "(a", *ABC, "--json"])
        assert code == EXIT_EXPRESSION_ERROR
        assert payload["position"] == 0


class TestCheck:
    """`check` subcommand."""

    def test_canonical_and_names(self, clean_env, capsys):
        code, payload = run_json(capsys, ["check", "c | a & !b", "--json"])
        assert code == EXIT_OK
        assert payload["canonical"] == "(c | (a & !b))"
        assert payload["names"] == ["c", "a", "b"]

    def test_caret_diagnostic(self, clean_env, capsys):
        assert main(["check", "a | b )"]) == EXIT_EXPRESSION_ERROR
        out = capsys.readouterr().out
        assert "Unmatched ')'" in out
        assert "^" in out


class TestOpsets:
    """`opsets` subcommand."""

    def test_listing(self, clean_env, capsys):
        code, payload = run_json(capsys, ["opsets", "--json"])
        assert code == EXIT_OK
        rows = {row["name"]: row for row in payload["opsets"]}
        assert rows["hamacher2"]["differentiable"] is True
        assert rows["yagerinf"]["class"] == "YagerInf"
        assert "a & b = min(a, b)" in rows["yagerinf"]["notation"]


class TestUsage:
    """Argument handling."""

    def test_no_command(self, clean_env, capsys):
        assert main([]) == EXIT_USAGE_ERROR

    def test_bad_assignment(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["eval", "a", "--set", "a"])
        assert exc_info.value.code == EXIT_USAGE_ERROR

    @pytest.mark.parametrize("text,expected", [
        ("a=0.5", ("a", 0.5)),
        (" b = 1 ", ("b", 1.0)),
    ])
    def test_parse_assignment(self, text, expected):
        assert parse_assignment(text) == expected

    @pytest.mark.parametrize("text", ["a", "=0.5", "1a=0.5", "a=high", "é=0.5"])
    def test_parse_assignment_rejects(self, text):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_assignment(text)

    def test_non_ascii_digit_is_expression_error(self, clean_env, capsys):
        assert main(["check", "a & ²"]) == EXIT_EXPRESSION_ERROR
        assert "Unexpected character" in capsys.readouterr().out
