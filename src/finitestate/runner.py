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

from finitestate.fsa import DEAD


class Runner:
    """
    Steps an automaton through its input one label at a time.

    A runner keeps the current state itself, so the automaton it runs is never
    modified and several runners can walk the same automaton independently.
    Get one from :meth:`FSA.runner() <finitestate.fsa.FSA.runner>`.

    Example:
        >>> dfa = DFA(0)
        >>> dfa.add_state(1, True)
        >>> dfa.add_transition(0, "a", 1)
        >>> r = dfa.runner()
        >>> r.step("a").accepts()
        True
        >>> r.step("a").is_dead
        True
    """

    def __init__(self, fsa, start):
        self.fsa = fsa
        self.start = start
        self._state = start

    def __repr__(self):
        return f"<{type(self).__name__} {self.current!r} on {self.fsa!r}>"

    @property
    def current(self):
        """
        The current state (a frozenset of states for an NFA), or None once
        the runner has hit a missing transition.
        """
        if self._state is DEAD:
            return None
        return self._state

    @property
    def is_dead(self):
        return self._state is DEAD

    def step(self, label):
        """
        Consumes one input label. A dead runner stays dead.

        Returns:
            Runner: self, so calls can be chained.
        """
        if self._state is not DEAD:
            self._state = self.fsa.next_state(self._state, label)
        return self

    def feed(self, labels):
        """
        Consumes a sequence of input labels, stopping early if the runner
        dies.

        Returns:
            Runner: self, so calls can be chained.
        """
        for label in labels:
            self.step(label)
            if self._state is DEAD:
                break
        return self

    def accepts(self):
        """
        Returns True if the automaton would accept the input consumed so far.
        """
        if self._state is DEAD:
            return False
        return self.fsa.is_final(self._state)

    def reset(self):
        """
        Goes back to the state the runner started in.
        """
        self._state = self.start
        return self
