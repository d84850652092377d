"""Exceptions raised by ringpoly."""


class RingMismatchError(ValueError):
    """Raised when an operation combines values from two different rings."""

    def __init__(self, left, right):
        super().__init__(f"Cannot combine values over {left!r} and {right!r}")
        self.left = left
        self.right = right
