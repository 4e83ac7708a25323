from typing import Protocol, TypeVar, runtime_checkable

X = TypeVar("X", covariant=True)
Y = TypeVar("Y", covariant=True)
Z = TypeVar("Z", covariant=True)


@runtime_checkable
class Triplet(Protocol[X, Y, Z]):
    """Read access to a value made of three independently typed slots.

    Generic code operating over triplet-capable values should depend only on
    these accessors. Any object providing them counts as a ``Triplet`` for
    ``isinstance`` checks.
    """

    def get_x(self) -> X:
        """Return the x (first) value."""
        ...

    def get_y(self) -> Y:
        """Return the y (second) value."""
        ...

    def get_z(self) -> Z:
        """Return the z (third) value."""
        ...
