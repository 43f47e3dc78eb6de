"""
Tests for wellbeing_core/desire.py - Three-gate desire validation.

Gates run in order (existence, rationality, reasonableness) and the
first failure is reported.
"""

import logging
from types import SimpleNamespace

import pytest

from wellbeing_core import (
    Desire,
    DesireVerdict,
    Gate,
    InvalidStateError,
    RejectionReason,
    evaluate_desire,
    evaluate_desires,
    is_rational_desire,
    is_reasonable_desire,
    is_valid_desire,
)

from conftest import needs_at


class TestRejectionReason:

    def test_tags(self):
        assert RejectionReason.EXISTENCE.value == "ExistenceTestFailure"
        assert RejectionReason.RATIONALITY.value == "RationalityTestFailure"
        assert RejectionReason.REASONABILITY.value == "ReasonabilityTestFailure"

    def test_gate_of_verdict(self):
        verdict = DesireVerdict(admitted=False, reason=RejectionReason.RATIONALITY)
        assert verdict.gate == Gate.RATIONALITY
        assert DesireVerdict(admitted=True).gate is None


class TestExistenceGate:

    def test_states_pass(self, neutral_state, make_state):
        assert is_valid_desire(neutral_state, make_state(desires=3)).admitted

    @pytest.mark.parametrize("bad", [None, {}, "wish", 42])
    def test_non_state_current(self, bad, neutral_state):
        verdict = evaluate_desire(bad, neutral_state)
        assert not verdict.admitted
        assert verdict.reason == RejectionReason.EXISTENCE
        assert "current" in verdict.detail

    def test_non_state_wished(self, neutral_state):
        verdict = evaluate_desire(neutral_state, object())
        assert verdict.reason == RejectionReason.EXISTENCE
        assert "wished" in verdict.detail

    def test_duck_typed_states_accepted(self):
        shaped = SimpleNamespace(
            potential_desires=["a"],
            needs=needs_at(),
            affected_others_current=[],
            affected_others_result=[],
        )
        assert evaluate_desire(shaped, shaped).admitted

    def test_duck_typed_without_basic_needs_rejected(self, neutral_state):
        shaped = SimpleNamespace(
            potential_desires=["a", "b"],
            needs={"hunger": 9},
            affected_others_current=[],
            affected_others_result=[],
        )
        verdict = evaluate_desire(neutral_state, shaped)
        assert verdict.reason == RejectionReason.EXISTENCE
        assert "needs" in verdict.detail

    def test_malformed_third_party_rejected(self, neutral_state):
        wished = SimpleNamespace(
            potential_desires=["a", "b"],
            needs=needs_at(),
            affected_others_current=[None],
            affected_others_result=[neutral_state],
        )
        verdict = evaluate_desire(neutral_state, wished)
        assert verdict.reason == RejectionReason.EXISTENCE
        assert "affected_others_current[0]" in verdict.detail


class TestRationalityGate:

    def test_same_state_is_rational(self, neutral_state):
        assert is_rational_desire(neutral_state, neutral_state).admitted

    def test_more_desires_and_better_needs(self, neutral_state, make_state):
        wished = make_state(desires=4, needs=needs_at(8))
        assert is_rational_desire(neutral_state, wished).admitted

    def test_fewer_potential_desires(self, make_state):
        """The sport car bought at the cost of the family's future."""
        current = make_state(desires=3)
        wished = make_state(desires=1, needs=needs_at(9))
        verdict = evaluate_desire(current, wished)
        assert verdict.reason == RejectionReason.RATIONALITY
        assert verdict.desire_deficit == 2
        assert verdict.offending_need is None

    @pytest.mark.parametrize("need", ["hunger", "thirst", "health", "security", "housing"])
    def test_single_need_regression_rejects(self, need, neutral_state, make_state):
        wished = make_state(desires=5, needs=needs_at(10, **{need: 4.5}))
        verdict = evaluate_desire(neutral_state, wished)
        assert not verdict.admitted
        assert verdict.reason == RejectionReason.RATIONALITY
        assert verdict.offending_need == need
        assert need in verdict.detail

    def test_desire_count_checked_before_needs(self, make_state):
        current = make_state(desires=2)
        wished = make_state(desires=1, needs=needs_at(5, hunger=1))
        verdict = is_rational_desire(current, wished)
        assert verdict.desire_deficit == 1
        assert verdict.offending_need is None

    def test_extra_needs_ignored(self, neutral_state, make_state):
        current = make_state(desires=2, needs=needs_at(5, leisure=9))
        wished = make_state(desires=2, needs=needs_at(5, leisure=0))
        assert evaluate_desire(current, wished).admitted


class TestReasonablenessGate:

    def test_no_third_parties_passes(self):
        assert is_reasonable_desire([], []).admitted

    def test_third_party_unharmed(self, make_state):
        before = make_state(needs=needs_at(5))
        after = make_state(needs=needs_at(6))
        assert is_reasonable_desire([before], [after]).admitted

    def test_first_disadvantaged_index(self, make_state):
        fine = make_state(needs=needs_at(5))
        harmed = make_state(needs=needs_at(5, security=2))
        verdict = is_reasonable_desire([fine, fine, fine], [fine, harmed, harmed])
        assert verdict.reason == RejectionReason.REASONABILITY
        assert verdict.third_party_index == 1
        assert verdict.offending_need == "security"

    def test_unpaired_sequences_raise(self, make_state):
        with pytest.raises(InvalidStateError):
            is_reasonable_desire([make_state()], [])

    def test_applied_to_wished_state(self, neutral_state, make_state):
        before = make_state(needs=needs_at(5))
        after = make_state(needs=needs_at(5, housing=0))
        wished = make_state(desires=2, current_others=[before], result_others=[after])
        verdict = evaluate_desire(neutral_state, wished)
        assert verdict.reason == RejectionReason.REASONABILITY
        assert verdict.third_party_index == 0

    def test_others_in_current_state_not_compared(self, neutral_state, make_state):
        before = make_state(needs=needs_at(5))
        after = make_state(needs=needs_at(5, housing=0))
        current = make_state(desires=2, current_others=[before], result_others=[after])
        assert evaluate_desire(current, neutral_state).admitted


class TestEvaluateDesire:

    def test_admitted(self, neutral_state, make_state):
        verdict = evaluate_desire(neutral_state, make_state(desires=3, needs=needs_at(6)))
        assert verdict.admitted
        assert verdict.reason is None
        assert verdict.to_dict() == {"admitted": True}

    def test_short_circuits_on_rationality(self, neutral_state, make_state):
        """A rational failure is reported even if others are harmed too."""
        harmed_before = make_state(needs=needs_at(5))
        harmed_after = make_state(needs=needs_at(0))
        wished = make_state(
            desires=0,
            current_others=[harmed_before],
            result_others=[harmed_after],
        )
        assert evaluate_desire(neutral_state, wished).reason == RejectionReason.RATIONALITY

    def test_empty_others_never_block(self, neutral_state):
        assert evaluate_desire(neutral_state, neutral_state).admitted

    def test_rejection_to_dict(self, neutral_state, make_state):
        verdict = evaluate_desire(neutral_state, make_state(desires=2, needs=needs_at(5, thirst=1)))
        data = verdict.to_dict()
        assert data["admitted"] is False
        assert data["reason"] == "RationalityTestFailure"
        assert "thirst" in data["detail"]

    def test_does_not_mutate_states(self, neutral_state, make_state):
        wished = make_state(desires=3)
        before = (neutral_state.to_dict(), wished.to_dict())
        evaluate_desire(neutral_state, wished)
        assert (neutral_state.to_dict(), wished.to_dict()) == before

    def test_rejection_logged(self, caplog, neutral_state):
        with caplog.at_level(logging.DEBUG, logger="wellbeing_core.desire"):
            evaluate_desire(None, neutral_state)
        assert "existence gate" in caplog.text


class TestDesirePairs:

    def test_desire_evaluate(self, neutral_state, make_state):
        desire = Desire(current=neutral_state, wished=make_state(desires=1))
        assert desire.evaluate().reason == RejectionReason.RATIONALITY

    def test_evaluate_desires_in_order(self, neutral_state, make_state):
        verdicts = evaluate_desires([
            Desire(neutral_state, make_state(desires=2)),
            (neutral_state, make_state(desires=0)),
            (neutral_state, None),
        ])
        assert [v.admitted for v in verdicts] == [True, False, False]
        assert verdicts[1].reason == RejectionReason.RATIONALITY
        assert verdicts[2].reason == RejectionReason.EXISTENCE

    def test_desire_hashable(self, neutral_state, make_state):
        desire = Desire(neutral_state, make_state(desires=3))
        assert desire in {desire}

    def test_evaluate_desires_empty(self):
        assert evaluate_desires([]) == []
