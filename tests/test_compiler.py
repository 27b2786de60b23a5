"""
Tests for the precedence compiler.

Validates that:
1. NOT binds tightest, AND tighter than OR, both left-associative
2. Parentheses are compiled first and act as a single operand
3. Compiled and hand-built trees are structurally equal
4. Every class of malformed input fails at compile time with a position
"""

import dataclasses

import pytest

from fuzzy_systems import (
    ExpressionSyntaxError,
    Hamacher1,
    OpsetMismatchError,
    UnboundNameError,
    YagerInf,
    compile_expression,
    conjoin,
    disjoin,
    fuzzy_math,
    negate,
)
from fuzzy_systems.compiler import CompiledExpression, TokenKind, tokenize
from fuzzy_systems.expr.tags import TagA, TagB, TagC


class TestTokenizer:
    """Token stream."""

    def test_tokens_and_positions(self):
        tokens = tokenize("!a & (b_1 | 0.5)")
        assert [t.kind for t in tokens] == [
            TokenKind.NOT, TokenKind.IDENT, TokenKind.AND, TokenKind.LPAREN,
            TokenKind.IDENT, TokenKind.OR, TokenKind.NUMBER, TokenKind.RPAREN,
            TokenKind.EOF,
        ]
        assert [t.position for t in tokens] == [0, 1, 3, 5, 6, 10, 12, 15, 16]

    def test_tilde_is_not(self):
        assert tokenize("~a")[0].kind == TokenKind.NOT

    def test_whitespace_and_newlines_ignored(self):
        assert [t.text for t in tokenize("a\n  &\tb")] == ["a", "&", "b", ""]

    @pytest.mark.parametrize("source", ["1.", "0.5.2", "1a", "."])
    def test_malformed_numbers(self, source):
        with pytest.raises(ExpressionSyntaxError, match="Malformed number"):
            tokenize(source)


class TestPrecedenceSmall:
    """Three operands: every placement of a single NOT."""

    @pytest.mark.parametrize("source,canonical", [
        ("a & b", "(a & b)"),
        ("a | b", "(a | b)"),
        ("a & b | c", "((a & b) | c)"),
        ("!a & b | c", "((!a & b) | c)"),
        ("a & !b | c", "((a & !b) | c)"),
        ("a & b | !c", "((a & b) | !c)"),
        ("a | b & c", "(a | (b & c))"),
        ("!a | b & c", "(!a | (b & c))"),
        ("a | !b & c", "(a | (!b & c))"),
        ("a | b & !c", "(a | (b & !c))"),
    ])
    def test_canonical(self, source, canonical):
        assert compile_expression(source).canonical == canonical


class TestPrecedenceBig:
    """Four operands, chaining and grouping."""

    @pytest.mark.parametrize("source,canonical", [
        ("a | b | c | d", "(((a | b) | c) | d)"),
        ("a & b & c & d", "(((a & b) & c) & d)"),
        ("a | b & c | d", "((a | (b & c)) | d)"),
        ("a | !b & c | d", "((a | (!b & c)) | d)"),
        ("a | b & !c | d", "((a | (b & !c)) | d)"),
        ("a | b & c | !d", "((a | (b & c)) | !d)"),
        ("(a | b) & c | d", "(((a | b) & c) | d)"),
        ("a | b & (c | d)", "(a | (b & (c | d)))"),
        ("(a | b) & (c | d)", "((a | b) & (c | d))"),
        ("a | b & c & d", "(a | ((b & c) & d))"),
        ("a | !b & c & d", "(a | ((!b & c) & d))"),
        ("a | b & !c & d", "(a | ((b & !c) & d))"),
        ("a | b & c & !d", "(a | ((b & c) & !d))"),
    ])
    def test_canonical(self, source, canonical):
        assert compile_expression(source).canonical == canonical

    def test_not_applies_to_group(self):
        assert compile_expression("!(a | b) & c").canonical == "(!(a | b) & c)"

    def test_repeated_not_nests(self):
        assert compile_expression("!!a").canonical == "!!a"
        assert compile_expression("~!a & b").canonical == "(!!a & b)"

    def test_redundant_parentheses_vanish(self):
        assert compile_expression("((a)) & (((b)))").canonical == "(a & b)"

    def test_parentheses_change_meaning(self):
        assert (compile_expression("(a | b) & c").canonical
                != compile_expression("a | b & c").canonical)

    def test_literals(self):
        assert compile_expression("a & 0.50 | 1").canonical == "((a & 0.5) | 1)"


class TestBuild:
    """Binding operands to compiled expressions."""

    def test_names_in_first_appearance_order(self):
        assert compile_expression("c | a & !c | b").names == ("c", "a", "b")

    def test_build_matches_hand_built_tree(self, abc):
        a, b, c = abc
        tree = compile_expression("a | b & !c").build(a=a, b=b, c=c)
        assert tree == disjoin(a, conjoin(b, negate(c)))

    def test_build_from_namespace(self, abc):
        a, b, c = abc
        tree = compile_expression("(a | b) & !c").build({"a": a, "b": b, "c": c})
        assert str(tree) == "((0.1 | 0.6) & !0.4)"
        assert tree.evaluate().as_raw() == pytest.approx(0.384, abs=1e-4)

    def test_keywords_override_namespace(self, abc):
        a, b, _ = abc
        tree = compile_expression("a").build({"a": a}, a=b)
        assert tree == b

    def test_tagged_operands_render_like_canonical(self, tagged_abcd):
        a, b, c, d = tagged_abcd
        compiled = compile_expression("a | b & !c | d")
        assert str(compiled.build(a=a, b=b, c=c, d=d)) == compiled.canonical

    def test_fuzzy_values_are_converted(self):
        tree = compile_expression("x & y").build(x=Hamacher1.member(0.5), y=Hamacher1.member(0.5))
        assert tree.evaluate().as_raw() == 0.25

    def test_literals_take_operand_opset(self):
        tree = compile_expression("a & 0.5").build(a=YagerInf.atom(0.25))
        assert tree.opset is YagerInf
        assert tree.evaluate().as_raw() == 0.25

    def test_literal_only_needs_opset(self):
        compiled = compile_expression("0.5 | 0.25")
        assert compiled.build(opset=YagerInf).evaluate().as_raw() == 0.5
        with pytest.raises(UnboundNameError, match="opset"):
            compiled.build()

    def test_unbound_name(self, abc):
        a, _, _ = abc
        with pytest.raises(UnboundNameError, match="Operand 'b'"):
            compile_expression("a & b").build(a=a)

    def test_unbound_name_is_lookup_error(self):
        with pytest.raises(LookupError):
            compile_expression("a").build()

    def test_bad_operand_type(self):
        with pytest.raises(TypeError, match="Operand 'a'"):
            compile_expression("a").build(a=0.5)

    def test_mixed_opsets(self):
        with pytest.raises(OpsetMismatchError):
            compile_expression("a | b").build(a=Hamacher1.atom(0.1), b=YagerInf.atom(0.1))

    def test_repeated_name_reuses_operand(self, abc):
        a, _, _ = abc
        tree = compile_expression("a & a").build(a=a)
        assert tree.left is tree.right

    def test_has_literals_computed_at_compile_time(self):
        assert compile_expression("a & 0.5").has_literals is True
        assert compile_expression("a & b").has_literals is False
        assert "has_literals" in {f.name for f in dataclasses.fields(CompiledExpression)}

    def test_compilation_is_cached(self):
        assert compile_expression("a | b") is compile_expression("a | b")


class TestFuzzyMath:
    """Compile and build in one call."""

    def test_resolves_caller_locals(self):
        a = Hamacher1.atom(0.1).with_label(TagA)
        b = Hamacher1.atom(0.6).with_label(TagB)
        c = Hamacher1.atom(0.4).with_label(TagC)
        d = fuzzy_math("(a | b) & !c")
        assert str(d) == "((a | b) & !c)"
        assert d.evaluate().as_raw() == pytest.approx(0.384, abs=1e-4)

    def test_explicit_operands(self, abc):
        a, b, c = abc
        d = fuzzy_math("x | y & z", x=a, y=b, z=c)
        assert d == a | b & c

    def test_explicit_namespace(self, abc):
        a, b, _ = abc
        assert fuzzy_math("p & q", {"p": a, "q": b}) == a & b

    def test_literal_with_opset(self):
        assert fuzzy_math("!0.25", {}, opset=Hamacher1).evaluate().as_raw() == 0.75


class TestSyntaxErrors:
    """Malformed input is rejected at compile time."""

    @pytest.mark.parametrize("source,reason,position", [
        ("", "Empty expression", 0),
        ("   ", "Empty expression", 3),
        ("a & & b", "Consecutive operators", 4),
        ("a | & b", "Consecutive operators", 4),
        ("& a", "starts with operator", 0),
        ("| a", "starts with operator", 0),
        ("a &", "ends with operator", 2),
        ("a | b |", "ends with operator", 6),
        ("!", "Dangling '!'", 0),
        ("a & !", "Dangling '!'", 4),
        ("!)", "Dangling '!'", 0),
        ("(a | b", "Unclosed '\\('", 0),
        ("((a)", "Unclosed '\\('", 0),
        ("a | b)", "Unmatched '\\)'", 5),
        (")", "Unmatched '\\)'", 0),
        ("()", "Empty parentheses", 0),
        ("a & ()", "Empty parentheses", 4),
        ("a b", "Missing operator before 'b'", 2),
        ("a (b)", "Missing operator before '\\('", 2),
        ("(a b)", "Missing operator before 'b'", 3),
        ("a !b", "Missing operator before '!'", 2),
        ("(& a)", "missing its left operand", 1),
        ("(a |)", "missing its right operand", 3),
        ("a $ b", "Unexpected character '\\$'", 2),
        ("a & ²", "Unexpected character '²'", 4),
        ("x١", "Unexpected character '١'", 1),
        ("é & a", "Unexpected character 'é'", 0),
        ("a & 1.5", "not a membership degree", 4),
    ])
    def test_rejected(self, source, reason, position):
        with pytest.raises(ExpressionSyntaxError, match=reason) as exc_info:
            compile_expression(source)
        assert exc_info.value.position == position
        assert exc_info.value.source == source

    def test_caret_diagram(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            compile_expression("a & & b")
        assert exc_info.value.diagram() == "  a & & b\n      ^"
        assert str(exc_info.value).endswith("  a & & b\n      ^")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            compile_expression("a &")

    def test_source_must_be_text(self):
        with pytest.raises(TypeError, match="must be str"):
            compile_expression(None)
