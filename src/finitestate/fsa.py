# Copyright 2026 The finitestate authors. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE AUTHORS ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL THE AUTHORS OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of the finitestate authors.

"""
Deterministic and non-deterministic finite state automata.

States and input labels can be any hashable values. Both kinds of automaton
keep a registry of states with their accepting flags and a transition table,
and share the same simulation loop in :meth:`FSA.run`. :meth:`NFA.to_dfa`
builds an equivalent DFA with the subset construction and
:meth:`DFA.to_nfa` promotes a DFA back to an NFA.
"""

import itertools
import sys
from collections import namedtuple
from collections.abc import Hashable, Iterable, Mapping

from loguru import logger

from finitestate.errors import (
    DuplicateTransition,
    InvalidEpsilonUsage,
    InvalidMapping,
    UnknownState,
)

logger.disable("finitestate")


# Marker constants


class Marker:
    """
    A named sentinel object.

    Markers compare by identity, so they can't collide with any label or state
    value a caller uses.

    Example:
        >>> EPSILON
        <EPSILON>
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


# Label of a transition taken without consuming input (NFA only)
EPSILON = Marker("EPSILON")
# Returned by next_state() when there's nowhere to go
DEAD = Marker("DEAD")
# Default for arguments where None is a valid state
_DEFAULT = Marker("DEFAULT")


Transition = namedtuple("Transition", ["src", "label", "dest"])


def _check_mapped_state(state):
    if isinstance(state, Marker):
        raise InvalidMapping(f"{state!r} is reserved and can't be used as a state")


# Base class


class FSA:
    """
    Finite State Automaton (FSA) base class.

    An automaton owns a registry mapping every state to its accepting flag and
    a transition table keyed by source state and label. Subclasses define how
    the table stores destinations and implement the three hooks the simulation
    loop is written against: :meth:`start`, :meth:`next_state` and
    :meth:`is_final`.

    States must be added with :meth:`add_state` before a transition can refer
    to them. The initial state is registered by the constructor.

    Automata do no locking. Don't mutate an instance from more than one thread
    at a time; :meth:`run` and the other queries are safe to call concurrently
    as long as nothing is modifying the automaton.

    Attributes:
        initial (object): The initial state of the automaton.
    """

    def __init__(self, initial, accepting=False):
        """
        Args:
            initial (object): The initial state.
            accepting (bool): Whether the initial state is accepting.
        """
        self._check_state(initial)
        self.initial = initial
        self._registry = {initial: bool(accepting)}
        self._table = {}

    @classmethod
    def with_state(cls, initial, accepting=False, **kwargs):
        """
        Creates an automaton with a single state.

        Args:
            initial (object): The initial (and only) state.
            accepting (bool): Whether the state is accepting.
            **kwargs: Passed on to the class initializer.

        Returns:
            FSA: The new automaton.
        """
        return cls(initial, accepting, **kwargs)

    @classmethod
    def from_map(cls, initial, mapping, **kwargs):
        """
        Creates an automaton from a nested mapping.

        The mapping associates each state with an ``(accepting, transitions)``
        pair, where ``transitions`` maps labels to destinations (a single
        state for a DFA, a collection of states for an NFA). This is the same
        shape :meth:`to_map` returns, so ``cls.from_map(fsa.initial,
        fsa.to_map())`` rebuilds ``fsa``.

        All the states in the mapping are added first, then every transition
        goes through :meth:`add_transition`. A destination that isn't a key of
        the mapping is added as a non-accepting state, and so is the initial
        state if it's missing from the mapping.

        Args:
            initial (object): The initial state.
            mapping (Mapping): The states and their transitions.
            **kwargs: Passed on to the class initializer.

        Returns:
            FSA: The new automaton.

        Raises:
            InvalidMapping: If an entry isn't a ``(bool, Mapping)`` pair, a DFA
                destination isn't hashable, an NFA destination isn't a
                collection of states, or a reserved marker is used as a state.
            InvalidEpsilonUsage: If a DFA entry uses the EPSILON label.

        Example:
            >>> dfa = DFA.from_map(0, {0: (False, {"a": 1}), 1: (True, {})})
            >>> dfa.run(["a"])
            True
        """
        if not isinstance(mapping, Mapping):
            raise InvalidMapping(f"Expected a mapping of states, got {mapping!r}")

        _check_mapped_state(initial)

        entries = []
        for state, entry in mapping.items():
            _check_mapped_state(state)
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise InvalidMapping(
                    f"Entry for {state!r} must be an (accepting, transitions) "
                    f"pair, got {entry!r}"
                )
            accepting, trans = entry
            if not isinstance(accepting, bool):
                raise InvalidMapping(
                    f"Accepting flag for {state!r} must be a bool, got {accepting!r}"
                )
            if not isinstance(trans, Mapping):
                raise InvalidMapping(
                    f"Transitions for {state!r} must be a mapping, got {trans!r}"
                )
            entries.append((state, accepting, trans))

        fsa = cls(initial, **kwargs)
        for state, accepting, _ in entries:
            fsa.add_state(state, accepting)

        for state, _, trans in entries:
            for label, dests in trans.items():
                for dest in fsa._map_dests(state, label, dests):
                    _check_mapped_state(dest)
                    if not fsa.has_state(dest):
                        logger.debug(
                            "Adding undeclared state {!r} reached from {!r}",
                            dest,
                            state,
                        )
                        fsa.add_state(dest, False)
                    fsa.add_transition(state, label, dest)
        return fsa

    def __len__(self):
        """
        Returns the number of states in the automaton.
        """
        return len(self._registry)

    def __contains__(self, state):
        return self.has_state(state)

    def __eq__(self, other):
        """
        Two automata are equal when they're the same kind and have the same
        initial state, states, accepting flags and transitions.
        """
        if not isinstance(other, FSA):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.initial == other.initial
            and self._registry == other._registry
            and self._table == other._table
        )

    def __repr__(self):
        return (
            f"<{type(self).__name__} initial={self.initial!r} "
            f"states={len(self)} transitions={len(self.transitions())}>"
        )

    # Registry

    def _check_state(self, state):
        if isinstance(state, Marker):
            raise ValueError(f"{state!r} is reserved and can't be used as a state")

    def _require(self, *states):
        for state in states:
            if state not in self._registry:
                raise UnknownState(state)

    def has_state(self, state):
        """
        Returns True if the state was added to this automaton.
        """
        return state in self._registry

    def add_state(self, state, accepting=False):
        """
        Adds a state to the automaton.

        Adding a state that's already there only updates its accepting flag;
        its transitions are kept.

        Args:
            state (object): The state to add.
            accepting (bool): Whether the state is accepting.

        Raises:
            ValueError: If ``state`` is one of the reserved markers.
        """
        self._check_state(state)
        self._registry[state] = bool(accepting)

    def is_accepting(self, state):
        """
        Checks whether a state is accepting.

        Args:
            state (object): A state of this automaton.

        Returns:
            bool: True if the state is accepting.

        Raises:
            UnknownState: If the state was never added.
        """
        self._require(state)
        return self._registry[state]

    def states(self):
        """
        Returns a frozenset of all the states in the automaton.
        """
        return frozenset(self._registry)

    # Transition table

    def add_transition(self, src, label, dest):
        """
        Adds a transition from ``src`` to ``dest`` on ``label``.

        Both states must already be in the automaton. If the transition is
        rejected the automaton is left unchanged.

        Args:
            src (object): The source state.
            label (object): The input label.
            dest (object): The destination state.

        Raises:
            UnknownState: If ``src`` or ``dest`` was never added.
        """
        self._validate_transition(src, label, dest, {})
        self._insert(src, label, dest)

    def add_transitions(self, triples):
        """
        Adds several ``(src, label, dest)`` transitions at once.

        Every transition is checked before any of them is inserted, so either
        they're all added or the automaton is unchanged.

        Args:
            triples (iterable): The transitions to add.
        """
        triples = [tuple(t) for t in triples]
        pending = {}
        for src, label, dest in triples:
            self._validate_transition(src, label, dest, pending)
            pending[src, label] = dest
        for src, label, dest in triples:
            self._insert(src, label, dest)

    def transitions(self):
        """
        Returns a list of all the transitions as :class:`Transition` triples.
        """
        return [t for src in self._table for t in self._edges(src)]

    def alphabet(self):
        """
        Returns the set of input labels used by the transitions, not
        including EPSILON.
        """
        labels = set()
        for trans in self._table.values():
            labels.update(trans)
        labels.discard(EPSILON)
        return labels

    def _validate_transition(self, src, label, dest, pending):
        raise NotImplementedError

    def _insert(self, src, label, dest):
        raise NotImplementedError

    def _edges(self, src):
        raise NotImplementedError

    def _map_dests(self, state, label, dests):
        raise NotImplementedError

    def _resolve_start(self, start):
        raise NotImplementedError

    def to_map(self):
        """
        Returns a plain nested mapping of the automaton's states and
        transitions, in the shape :meth:`from_map` accepts.
        """
        raise NotImplementedError

    # Simulation

    def start(self):
        """
        Returns the state the simulation starts in.
        """
        raise NotImplementedError

    def next_state(self, state, label):
        """
        Returns the state reached from ``state`` on ``label``, or DEAD if
        there's no transition.
        """
        raise NotImplementedError

    def is_final(self, state):
        """
        Returns True if the simulation accepts when it ends in ``state``.
        """
        raise NotImplementedError

    def run(self, labels):
        """
        Checks if a sequence of input labels is accepted by the automaton.

        The automaton moves from :meth:`start` through :meth:`next_state` for
        each label. As soon as there's no move the input is rejected without
        looking at the rest of it. Running never modifies the automaton.

        Args:
            labels (iterable): The input labels.

        Returns:
            bool: True if the input is accepted, False otherwise.

        Example:
            >>> dfa = DFA(0)
            >>> dfa.add_state(1, accepting=True)
            >>> dfa.add_transition(0, "a", 1)
            >>> dfa.run("a"), dfa.run("b")
            (True, False)
        """
        state = self.start()
        for label in labels:
            state = self.next_state(state, label)
            if state is DEAD:
                logger.trace("No transition on {!r}, rejecting", label)
                return False
        return self.is_final(state)

    def runner(self, start=_DEFAULT):
        """
        Returns a :class:`~finitestate.runner.Runner` that steps through
        input one label at a time.

        Args:
            start (object, optional): The state to start in. Defaults to
                :meth:`start`. For an NFA this can also be a collection of
                states.

        Raises:
            UnknownState: If ``start`` isn't a state of this automaton.
        """
        from finitestate.runner import Runner

        if start is _DEFAULT:
            start = self.start()
        else:
            start = self._resolve_start(start)
        return Runner(self, start)

    # Conversion

    def to_dfa(self):
        raise NotImplementedError

    def to_nfa(self):
        raise NotImplementedError

    def dump(self, stream=sys.stdout):
        """
        Prints a textual listing of the automaton to a stream.

        The initial state is marked with ``@`` and accepting states with
        ``||``. Each state is followed by its outgoing transitions.

        Args:
            stream (file): Where to print. Defaults to sys.stdout.

        Example:
            >>> dfa = DFA(0)
            >>> dfa.add_state(1, True)
            >>> dfa.add_transition(0, "a", 1)
            >>> dfa.dump()
            @ 0
                'a' -> 1
              1 ||
        """
        for src, accepting in self._registry.items():
            beg = "@" if src == self.initial else " "
            end = " ||" if accepting else ""
            print(beg, f"{src!r}{end}", file=stream)
            for _, label, dest in self._edges(src):
                print(f"    {label!r} -> {dest!r}", file=stream)


# Implementations


class NFA(FSA):
    """
    Non-deterministic finite automaton.

    Each ``(src, label)`` pair can lead to any number of destinations, and
    transitions labeled with :data:`EPSILON` are followed without consuming
    input. While running, the automaton is in a frozenset of states at once.
    """

    def start(self):
        """
        Returns the epsilon-closure of the initial state as a frozenset.
        """
        return self.closure((self.initial,))

    def closure(self, states):
        """
        Expands a set of states by following epsilon transitions.

        The result contains the given states and every state reachable from
        them through EPSILON transitions only. Cycles of epsilon transitions
        are fine, and closing an already closed set gives the same set back.

        Args:
            states (iterable): The states to expand.

        Returns:
            frozenset: The expanded set of states.

        Example:
            >>> nfa = NFA(0)
            >>> nfa.add_state(1)
            >>> nfa.add_transition(0, EPSILON, 1)
            >>> sorted(nfa.closure({0}))
            [0, 1]
        """
        transitions = self._table
        reached = set(states)
        frontier = list(reached)
        while frontier:
            state = frontier.pop()
            for dest in transitions.get(state, {}).get(EPSILON, ()):
                if dest not in reached:
                    reached.add(dest)
                    frontier.append(dest)
        return frozenset(reached)

    def next_state(self, states, label):
        """
        Returns the set of states that can be reached from the given states
        with the specified label.

        The destinations of every state in ``states`` are collected and then
        epsilon-closed.

        Args:
            states (frozenset): The current states.
            label (object): The input label.

        Returns:
            frozenset: The reachable states, or DEAD if there are none.
        """
        transitions = self._table
        dest_states = set()
        for state in states:
            if state in transitions:
                xs = transitions[state]
                if label in xs:
                    dest_states.update(xs[label])
        if not dest_states:
            return DEAD
        return self.closure(dest_states)

    def is_final(self, states):
        """
        Checks if any of the given states is accepting.
        """
        registry = self._registry
        return any(registry.get(state, False) for state in states)

    def _validate_transition(self, src, label, dest, pending):
        self._require(src, dest)

    def _insert(self, src, label, dest):
        self._table.setdefault(src, {}).setdefault(label, set()).add(dest)

    def _edges(self, src):
        for label, dests in self._table.get(src, {}).items():
            for dest in dests:
                yield Transition(src, label, dest)

    def _map_dests(self, state, label, dests):
        if isinstance(dests, (str, bytes)) or not isinstance(dests, Iterable):
            raise InvalidMapping(
                f"Destinations of {state!r} on {label!r} must be a collection "
                f"of states, got {dests!r}"
            )
        return dests

    def _resolve_start(self, start):
        try:
            known = start in self._registry
        except TypeError:
            known = False

        if known:
            states = (start,)
        elif isinstance(start, (set, frozenset, list, tuple)):
            states = tuple(start)
            self._require(*states)
        else:
            raise UnknownState(start)
        return self.closure(states)

    def to_map(self):
        table = self._table
        return {
            state: (
                accepting,
                {label: frozenset(dests) for label, dests in table.get(state, {}).items()},
            )
            for state, accepting in self._registry.items()
        }

    def to_nfa(self):
        """
        Returns a reference to itself.
        """
        return self

    def to_dfa(self):
        """
        Converts the NFA to an equivalent DFA with the subset construction.

        Each state of the DFA is the frozenset of NFA states the NFA can be in
        at the same time, starting from the epsilon-closure of the initial
        state. Only sets reachable from the start are created, and a label
        that leads nowhere gets no transition, so the DFA rejects there just
        like the NFA does.

        Returns:
            DFA: The converted DFA. Its states are frozensets of this NFA's
            states.

        Example:
            >>> nfa = NFA(0)
            >>> nfa.add_state(1, accepting=True)
            >>> nfa.add_transition(0, "a", 0)
            >>> nfa.add_transition(0, "a", 1)
            >>> dfa = nfa.to_dfa()
            >>> sorted(dfa.next_state(dfa.start(), "a"))
            [0, 1]
        """
        start = self.start()
        dfa = DFA(start, self.is_final(start))
        labels = self.alphabet()
        frontier = [start]
        while frontier:
            current = frontier.pop()
            for label in labels:
                new_state = self.next_state(current, label)
                if new_state is DEAD:
                    continue
                if not dfa.has_state(new_state):
                    dfa.add_state(new_state, self.is_final(new_state))
                    frontier.append(new_state)
                dfa.add_transition(current, label, new_state)

        logger.debug(
            "Subset construction built {} DFA states from {} NFA states",
            len(dfa),
            len(self),
        )
        return dfa


class DFA(FSA):
    """
    Deterministic finite automaton.

    Each ``(src, label)`` pair has at most one destination. By default adding
    a transition for a pair that already has one replaces the destination;
    with ``strict=True`` it raises :class:`~finitestate.errors.DuplicateTransition`
    instead. EPSILON can't be used as a label.

    Attributes:
        strict (bool): Whether conflicting transitions are rejected.
    """

    def __init__(self, initial, accepting=False, strict=False):
        super().__init__(initial, accepting)
        self.strict = strict

    def start(self):
        return self.initial

    def next_state(self, src, label):
        """
        Returns the state reached from ``src`` on ``label``, or DEAD.

        Example:
            >>> dfa = DFA("A")
            >>> dfa.add_state("B")
            >>> dfa.add_transition("A", "a", "B")
            >>> dfa.next_state("A", "a")
            'B'
            >>> dfa.next_state("B", "b")
            <DEAD>
        """
        return self._table.get(src, {}).get(label, DEAD)

    def is_final(self, state):
        return self._registry.get(state, False)

    def _validate_transition(self, src, label, dest, pending):
        if label is EPSILON:
            raise InvalidEpsilonUsage("A DFA can't have EPSILON transitions")
        self._require(src, dest)
        if self.strict:
            existing = pending.get((src, label), self.next_state(src, label))
            if existing is not DEAD and existing != dest:
                raise DuplicateTransition(src, label, existing, dest)

    def _insert(self, src, label, dest):
        self._table.setdefault(src, {})[label] = dest

    def _edges(self, src):
        for label, dest in self._table.get(src, {}).items():
            yield Transition(src, label, dest)

    def _map_dests(self, state, label, dest):
        if not isinstance(dest, Hashable):
            raise InvalidMapping(
                f"Destination of {state!r} on {label!r} must be a single state, "
                f"got {dest!r}"
            )
        return (dest,)

    def _resolve_start(self, start):
        self._require(start)
        return start

    def to_map(self):
        table = self._table
        return {
            state: (accepting, dict(table.get(state, {})))
            for state, accepting in self._registry.items()
        }

    def to_dfa(self):
        """
        Returns a reference to itself.
        """
        return self

    def to_nfa(self):
        """
        Promotes the DFA to an NFA with the same states and a single
        destination per transition. No EPSILON transitions are added.

        Returns:
            NFA: The equivalent NFA.
        """
        nfa = NFA(self.initial, self._registry[self.initial])
        for state, accepting in self._registry.items():
            nfa.add_state(state, accepting)
        nfa.add_transitions(self.transitions())
        return nfa


# Useful functions


def to_dfa(fsa):
    """
    Returns a DFA that accepts the same inputs as ``fsa``.

    A DFA is returned as is; an NFA goes through :meth:`NFA.to_dfa`.
    """
    return fsa.to_dfa()


def to_nfa(fsa):
    """
    Returns an NFA that accepts the same inputs as ``fsa``.

    An NFA is returned as is; a DFA goes through :meth:`DFA.to_nfa`.
    """
    return fsa.to_nfa()


def renumber_dfa(dfa, base=0):
    """
    Renumber the states of a DFA with consecutive integers.

    The DFAs built by :meth:`NFA.to_dfa` use frozensets of NFA states as their
    states; this gives them compact names. States are numbered in the order
    they're found walking the registry, so the initial state gets ``base``.

    Args:
        dfa (DFA): The DFA to renumber.
        base (int, optional): The first number to use. Defaults to 0.

    Returns:
        DFA: A new DFA with integer states and the same transitions.

    Example:
        >>> nfa = NFA("s")
        >>> nfa.add_state("e", True)
        >>> nfa.add_transition("s", "a", "e")
        >>> renumber_dfa(nfa.to_dfa()).to_map()
        {0: (False, {'a': 1}), 1: (True, {})}
    """
    c = itertools.count(base)
    mapping = {}

    def remap(state):
        if state in mapping:
            newnum = mapping[state]
        else:
            newnum = next(c)
            mapping[state] = newnum
        return newnum

    newdfa = DFA(remap(dfa.initial), dfa.is_accepting(dfa.initial), strict=dfa.strict)
    for state, (accepting, _) in dfa.to_map().items():
        newdfa.add_state(remap(state), accepting)
    for src, label, dest in dfa.transitions():
        newdfa.add_transition(remap(src), label, remap(dest))
    return newdfa
