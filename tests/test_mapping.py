from dataclasses import dataclass

import pytest

from finitestate.errors import InvalidEpsilonUsage, InvalidMapping
from finitestate.fsa import DEAD, DFA, EPSILON, NFA


@dataclass(frozen=True)
class Custom:
    a: int
    b: int


def custom_dfa():
    return DFA.from_map(
        Custom(12, 5),
        {
            Custom(12, 5): (True, {"abc": Custom(-24, 6)}),
            Custom(-24, 6): (False, {"bar": Custom(-24, 6), "foo": Custom(12, 5)}),
        },
    )


def test_custom_states():
    dfa = custom_dfa()
    assert dfa.is_accepting(Custom(12, 5))
    assert not dfa.is_accepting(Custom(-24, 6))
    assert dfa.run([])
    assert not dfa.run(["abc", "invalid"])
    assert dfa.run(["abc", "foo"])
    assert dfa.run(["abc", "bar", "bar", "foo"])
    assert not dfa.run(["abc", "bar"])


def test_dfa_round_trip():
    dfa = custom_dfa()
    view = dfa.to_map()
    assert view == {
        Custom(12, 5): (True, {"abc": Custom(-24, 6)}),
        Custom(-24, 6): (False, {"bar": Custom(-24, 6), "foo": Custom(12, 5)}),
    }
    assert DFA.from_map(dfa.initial, view) == dfa


def test_nfa_round_trip():
    nfa = NFA.from_map(
        "s",
        {
            "s": (False, {EPSILON: ["m"], "a": ("s", "m")}),
            "m": (True, {"b": {"s"}}),
        },
    )
    view = nfa.to_map()
    assert view == {
        "s": (False, {EPSILON: frozenset(["m"]), "a": frozenset(["s", "m"])}),
        "m": (True, {"b": frozenset(["s"])}),
    }
    assert NFA.from_map(nfa.initial, view) == nfa
    assert nfa.run("")
    assert nfa.run("ab")


def test_undeclared_destination_is_added():
    dfa = DFA.from_map(0, {0: (False, {"a": 1})})
    assert dfa.has_state(1)
    assert not dfa.is_accepting(1)
    assert not dfa.run("a")

    nfa = NFA.from_map(0, {0: (True, {"a": {1, 2}})})
    assert nfa.states() == {0, 1, 2}
    assert not nfa.is_accepting(2)


def test_undeclared_initial_is_added():
    dfa = DFA.from_map("start", {"end": (True, {})})
    assert dfa.has_state("start")
    assert not dfa.is_accepting("start")
    assert not dfa.run([])


def test_declared_later_keeps_flag():
    # The destination is declared after the state that refers to it
    dfa = DFA.from_map(0, {0: (False, {"a": 1}), 1: (True, {})})
    assert dfa.is_accepting(1)
    assert dfa.run("a")


def test_strict_passes_through():
    dfa = DFA.from_map(0, {0: (False, {"a": 0})}, strict=True)
    assert dfa.strict


def test_list_entries():
    dfa = DFA.from_map(0, {0: [False, {"b": 1}], 1: [True, {"b": 1}]})
    assert dfa.run("bbb")


@pytest.mark.parametrize(
    "mapping",
    [
        [(0, (True, {}))],
        {0: True},
        {0: (True,)},
        {0: (True, {}, "extra")},
        {0: ("yes", {})},
        {0: (True, [("a", 0)])},
        {0: (False, {"a": [1, 2]})},
        {0: (False, {"a": {1}})},
    ],
)
def test_malformed_maps(mapping):
    with pytest.raises(InvalidMapping):
        DFA.from_map(0, mapping)


@pytest.mark.parametrize("dests", ["ab", 1, None])
def test_malformed_nfa_destinations(dests):
    with pytest.raises(InvalidMapping):
        NFA.from_map("a", {"a": (False, {"x": dests})})


def test_epsilon_in_dfa_map():
    with pytest.raises(InvalidEpsilonUsage):
        DFA.from_map(0, {0: (False, {EPSILON: 0})})


@pytest.mark.parametrize(
    "cls, initial, mapping",
    [
        (DFA, EPSILON, {}),
        (DFA, 0, {DEAD: (True, {})}),
        (DFA, 0, {0: (False, {"a": DEAD})}),
        (NFA, 0, {0: (False, {"a": [1, EPSILON]})}),
    ],
)
def test_markers_in_maps(cls, initial, mapping):
    with pytest.raises(InvalidMapping):
        cls.from_map(initial, mapping)
