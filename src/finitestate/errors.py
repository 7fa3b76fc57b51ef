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
Exceptions raised while building automata.

Simulation never raises: a missing transition or an empty set of active
states is a rejection, not an error. Everything in this module is raised
synchronously by the construction methods before the automaton is touched.
"""


class AutomatonError(Exception):
    """Base class for all errors raised by finitestate."""


class UnknownState(AutomatonError, KeyError):
    """
    Raised when a transition or a query references a state that was never
    added to the automaton.

    Attributes:
        state (object): The offending state.
    """

    def __init__(self, state):
        AutomatonError.__init__(self, state)
        self.state = state

    def __str__(self):
        return f"Unknown state {self.state!r}"


class DuplicateTransition(AutomatonError, ValueError):
    """
    Raised by a strict DFA when a second, different destination is added
    for a ``(src, label)`` pair that already has one.

    Attributes:
        src (object): The source state.
        label (object): The input label.
        existing (object): The destination already in the table.
        dest (object): The rejected destination.
    """

    def __init__(self, src, label, existing, dest):
        AutomatonError.__init__(self, src, label, existing, dest)
        self.src = src
        self.label = label
        self.existing = existing
        self.dest = dest

    def __str__(self):
        return (
            f"{self.src!r} already goes to {self.existing!r} on {self.label!r}, "
            f"can't add a transition to {self.dest!r}"
        )


class InvalidEpsilonUsage(AutomatonError, ValueError):
    """Raised when the epsilon marker is used where only real input is allowed."""


class InvalidMapping(AutomatonError, ValueError):
    """Raised by ``from_map`` when an entry doesn't have the expected shape."""
