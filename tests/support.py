"""Shared helpers for the dinodash test suite."""


class ScriptedRandom:
    """Deterministic stand-in for ``random.Random``.

    Returns the scripted values in order, then ``default`` forever.
    """

    def __init__(self, values=(), default=0.9):
        self._values = list(values)
        self.default = default
        self.calls = 0

    def push(self, *values):
        self._values.extend(values)

    def random(self):
        self.calls += 1
        if self._values:
            return self._values.pop(0)
        return self.default
