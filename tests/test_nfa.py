import pytest

from finitestate.errors import UnknownState
from finitestate.fsa import DEAD, EPSILON, NFA, Transition


def epsilon_nfa():
    nfa = NFA(0)
    nfa.add_state(1)
    nfa.add_state(2, accepting=True)
    nfa.add_transition(0, EPSILON, 1)
    nfa.add_transition(1, "x", 2)
    return nfa


def test_construct():
    nfa = NFA.with_state(0, False)
    nfa.add_state(1, True)
    nfa.add_transition(0, "a", 0)
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(0, "a", 1)

    assert nfa.has_state(0)
    assert nfa.has_state(1)
    assert not nfa.is_accepting(0)
    assert nfa.start() == frozenset([0])
    assert sorted(nfa.transitions()) == [Transition(0, "a", 0), Transition(0, "a", 1)]


def test_run():
    nfa = NFA(0)
    nfa.add_state(1)
    nfa.add_state(2, True)
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(0, "a", 2)
    nfa.add_transition(1, "b", 1)

    assert nfa.run("a")
    assert not nfa.run("ab")
    assert not nfa.run("")
    assert not nfa.run("b")


def test_epsilon_run():
    nfa = epsilon_nfa()
    assert nfa.run(["x"])
    assert not nfa.run([])
    assert not nfa.run(["x", "x"])
    assert not nfa.run(["y"])


def test_start_is_closed():
    nfa = epsilon_nfa()
    assert nfa.start() == frozenset([0, 1])
    assert not nfa.is_final(nfa.start())


def test_closure_idempotent():
    nfa = epsilon_nfa()
    closed = nfa.closure({0})
    assert closed == frozenset([0, 1])
    assert nfa.closure(closed) == closed
    assert nfa.closure(set()) == frozenset()


def test_closure_cycles():
    nfa = NFA("a")
    for name in "bcd":
        nfa.add_state(name)
    nfa.add_transition("a", EPSILON, "b")
    nfa.add_transition("b", EPSILON, "c")
    nfa.add_transition("c", EPSILON, "a")
    nfa.add_transition("c", EPSILON, "c")
    nfa.add_transition("d", EPSILON, "a")

    assert nfa.closure({"a"}) == frozenset("abc")
    assert nfa.closure({"d"}) == frozenset("abcd")


def test_closure_does_not_modify_argument():
    nfa = epsilon_nfa()
    states = {0}
    nfa.closure(states)
    assert states == {0}


def test_next_state():
    nfa = epsilon_nfa()
    assert nfa.next_state(nfa.start(), "x") == frozenset([2])
    assert nfa.next_state(nfa.start(), "y") is DEAD
    assert nfa.next_state(frozenset([0]), "x") is DEAD


def test_empty_active_set_rejects():
    nfa = NFA(0, accepting=True)
    nfa.add_transition(0, "a", 0)
    assert nfa.run("aaa")
    assert not nfa.run("aab")
    assert not nfa.run("baa")


def test_epsilon_to_accepting():
    nfa = NFA(0)
    nfa.add_state(1, True)
    nfa.add_transition(0, EPSILON, 1)
    assert nfa.run([])
    assert not nfa.run(["a"])


def test_epsilon_after_input():
    nfa = NFA(0)
    nfa.add_state(1)
    nfa.add_state(2, True)
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(1, EPSILON, 2)
    nfa.add_transition(2, "b", 0)
    assert nfa.run("a")
    assert nfa.run("aba")
    assert not nfa.run("ab")


def test_unknown_state():
    nfa = epsilon_nfa()
    before = nfa.to_map()
    with pytest.raises(UnknownState):
        nfa.add_transition(0, "z", 99)
    with pytest.raises(UnknownState):
        nfa.add_transition(99, EPSILON, 0)
    with pytest.raises(UnknownState):
        nfa.add_transitions([(0, "z", 1), (42, "z", 1)])
    with pytest.raises(UnknownState):
        nfa.is_accepting(99)
    assert nfa.to_map() == before


def test_readd_state_keeps_transitions():
    nfa = epsilon_nfa()
    nfa.add_state(1, accepting=True)
    assert nfa.run([])
    assert nfa.run(["x"])
    assert len(nfa.transitions()) == 2


def test_alphabet_excludes_epsilon():
    assert epsilon_nfa().alphabet() == {"x"}


def test_run_is_pure():
    nfa = epsilon_nfa()
    before = nfa.to_map()
    assert nfa.run(["x"]) == nfa.run(["x"])
    assert nfa.to_map() == before
