"""
Tests for Membership construction paths and value operators.

Validates that:
1. The validating constructor rejects values outside [0, 1] and NaN
2. try_new returns None instead of raising
3. with_fit clamps, and refuses only NaN
4. ~, & and | on memberships apply the bound operation set
"""

import math
from enum import Enum

import pytest

from fuzzy_systems import (
    FuzzyValue,
    Hamacher1,
    Membership,
    NotANumberError,
    OpsetMismatchError,
    OutOfRangeError,
    YagerInf,
)


class TestMembershipConstruction:
    """Test the four construction paths."""

    @pytest.mark.parametrize("raw", [0.0, 0.25, 0.5, 1.0, 0, 1])
    def test_valid_values_accepted(self, raw):
        m = Membership(raw, Hamacher1)
        assert m.as_raw() == float(raw)
        assert isinstance(m.raw, float)

    @pytest.mark.parametrize("raw", [-0.1, 1.1, -1e-12, 1.0000001, math.inf, -math.inf])
    def test_out_of_range_raises(self, raw):
        with pytest.raises(OutOfRangeError, match="within"):
            Membership(raw, Hamacher1)

    def test_nan_rejected_by_validating_constructor(self):
        with pytest.raises(OutOfRangeError):
            Membership(math.nan, Hamacher1)

    def test_out_of_range_is_also_value_error(self):
        with pytest.raises(ValueError):
            Hamacher1.member(2.0)

    def test_non_numeric_raises_type_error(self):
        with pytest.raises(TypeError, match="real number"):
            Membership("0.5", Hamacher1)

    def test_bool_is_not_a_degree(self):
        with pytest.raises(TypeError):
            Membership(True, Hamacher1)

    def test_opset_must_be_opset_class(self):
        with pytest.raises(TypeError, match="Opset subclass"):
            Membership(0.5, object)

    def test_try_new(self):
        assert Membership.try_new(0.3, Hamacher1) == Membership(0.3, Hamacher1)
        assert Membership.try_new(1.5, Hamacher1) is None
        assert Membership.try_new(math.nan, Hamacher1) is None

    @pytest.mark.parametrize("raw,expected", [(-3.0, 0.0), (0.4, 0.4), (7.5, 1.0), (math.inf, 1.0)])
    def test_with_fit_clamps(self, raw, expected):
        assert Membership.with_fit(raw, Hamacher1).as_raw() == expected

    def test_with_fit_rejects_nan(self):
        with pytest.raises(NotANumberError, match="NaN"):
            Membership.with_fit(math.nan, Hamacher1)

    def test_unchecked_skips_validation(self):
        # Trust boundary: no check is made on this path.
        m = Membership.unchecked(1.5, Hamacher1)
        assert m.as_raw() == 1.5

    def test_immutable(self):
        m = Membership(0.5, Hamacher1)
        with pytest.raises(AttributeError):
            m.raw = 0.7


class TestMembershipOperators:
    """Value-level operators evaluate immediately."""

    def test_yager_inf_ops(self):
        x = Membership(0.5, YagerInf)
        y = Membership(0.3, YagerInf)
        assert (~y).as_raw() == pytest.approx(0.7)
        assert (x & y).as_raw() == pytest.approx(0.3)
        assert (x | y).as_raw() == pytest.approx(0.5)

    def test_result_keeps_opset(self):
        x = Membership(0.5, YagerInf)
        assert (x | x).opset is YagerInf

    def test_mixing_opsets_raises(self):
        with pytest.raises(OpsetMismatchError, match="YagerInf"):
            Membership(0.5, YagerInf) & Membership(0.5, Hamacher1)

    def test_ordering(self):
        low = Hamacher1.member(0.2)
        high = Hamacher1.member(0.7)
        assert low < high
        assert high >= low
        assert low <= 0.2
        assert high > 0.5

    def test_ordering_across_opsets_raises(self):
        with pytest.raises(OpsetMismatchError):
            Hamacher1.member(0.2) < YagerInf.member(0.7)

    def test_str_and_repr(self):
        m = Hamacher1.member(0.1)
        assert str(m) == "0.1"
        assert repr(m) == "Membership(0.1, Hamacher1)"
        assert str(Hamacher1.member(1)) == "1"
        assert float(m) == 0.1


class ThreatLevel(FuzzyValue, Enum):
    LOW = 0.2
    MEDIUM = 0.5
    HIGH = 0.7

    def membership(self) -> Membership:
        return Membership(self.value, Hamacher1)


class TestFuzzyValue:
    """Domain types become fuzzy values through membership()."""

    def test_threats_accumulate(self):
        combined = ThreatLevel.MEDIUM | ThreatLevel.HIGH
        assert combined.as_raw() == pytest.approx(0.85)
        assert combined > ThreatLevel.MEDIUM.membership()
        assert combined > ThreatLevel.HIGH.membership()

    def test_to_expr_with_labels(self):
        d = (
            ThreatLevel.MEDIUM.to_expr().with_label("medium")
            | ThreatLevel.HIGH.to_expr().with_label("high")
        )
        assert str(d) == "(medium | high)"
        assert d.evaluate() == ThreatLevel.MEDIUM | ThreatLevel.HIGH

    def test_missing_membership_raises(self):
        class Broken(FuzzyValue):
            pass

        with pytest.raises(NotImplementedError, match="Broken"):
            Broken().membership()
