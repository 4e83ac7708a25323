from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .triplet import Triplet

logger = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")
Z = TypeVar("Z")

ToStringFunc = Callable[[Triplet], str]
HashCodeFunc = Callable[[Triplet], int]
EqualsFunc = Callable[[Triplet, Any], bool]


def _format_slot(value: Any) -> str:
    return "null" if value is None else str(value)


def _hash_slot(value: Any) -> int:
    if type(value).__hash__ is None:
        # Unhashable values of one type share a bucket, equal values still hash equal.
        return hash(type(value).__qualname__)
    return hash(value)


class DelegatingTriplet(Generic[X, Y, Z]):
    """Mutable :class:`Triplet` whose ``==``, ``hash()`` and ``str()`` can be delegated to functions.

    Every slot may hold ``None``; the default constructor leaves all three
    empty. Without overrides the triplet behaves as a plain record:

    - equality compares x, y and z against any other ``Triplet``;
    - the hash combines the three slots in order;
    - ``str()`` renders ``DelegatingTriplet(x=..., y=..., z=...)`` with
      ``None`` shown as ``null``.

    Each override receives the triplet itself (and, for equality, the raw
    object it is compared with) and its result is returned unchanged.
    Exceptions raised by an override propagate to the caller.

    Example:
        >>> t = DelegatingTriplet(1, "a", None)
        >>> str(t)
        'DelegatingTriplet(x=1, y=a, z=null)'
        >>> str(t.set_to_string_func(lambda tr: f"<{tr.get_x()}>"))
        '<1>'
    """

    def __init__(self, x: X = None, y: Y = None, z: Z = None) -> None:
        self._to_string_func: Optional[ToStringFunc] = None
        self._hash_code_func: Optional[HashCodeFunc] = None
        self._equals_func: Optional[EqualsFunc] = None
        self.set(x, y, z)

    def get_x(self) -> X:
        """Return the x (first) value."""
        return self.x

    def get_y(self) -> Y:
        """Return the y (second) value."""
        return self.y

    def get_z(self) -> Z:
        """Return the z (third) value."""
        return self.z

    def set_x(self, x: X) -> None:
        """Replace the x (first) value."""
        self.x = x

    def set_y(self, y: Y) -> None:
        """Replace the y (second) value."""
        self.y = y

    def set_z(self, z: Z) -> None:
        """Replace the z (third) value."""
        self.z = z

    def set(self, x: X, y: Y, z: Z) -> None:
        """Replace all three slot values."""
        self.x = x
        self.y = y
        self.z = z

    def get_to_string_func(self) -> Optional[ToStringFunc]:
        """Return the ``str()`` override, or ``None`` if the default format is used."""
        return self._to_string_func

    def get_hash_code_func(self) -> Optional[HashCodeFunc]:
        """Return the ``hash()`` override, or ``None`` if the default hash is used."""
        return self._hash_code_func

    def get_equals_func(self) -> Optional[EqualsFunc]:
        """Return the ``==`` override, or ``None`` if default equality is used."""
        return self._equals_func

    def set_to_string_func(self, to_string_func: Optional[ToStringFunc]) -> DelegatingTriplet[X, Y, Z]:
        """Set or remove (``None``) the function used by ``str()``.

        Args:
            to_string_func: Called with this triplet, must return a string.
                ``None`` restores the default format.

        Returns:
            This triplet, for chaining.
        """
        self._to_string_func = to_string_func
        logger.debug("to_string override %s", "set" if to_string_func is not None else "cleared")
        return self

    def set_hash_code_func(self, hash_code_func: Optional[HashCodeFunc]) -> DelegatingTriplet[X, Y, Z]:
        """Set or remove (``None``) the function used by ``hash()``.

        Args:
            hash_code_func: Called with this triplet, must return an int.
                ``None`` restores the default slot-wise hash.

        Returns:
            This triplet, for chaining.
        """
        self._hash_code_func = hash_code_func
        logger.debug("hash_code override %s", "set" if hash_code_func is not None else "cleared")
        return self

    def set_equals_func(self, equals_func: Optional[EqualsFunc]) -> DelegatingTriplet[X, Y, Z]:
        """Set or remove (``None``) the function used by ``==``.

        Args:
            equals_func: Called with this triplet and the untyped object it is
                compared with; it must do its own type checks on the latter.
                ``None`` restores the default slot-wise equality.

        Returns:
            This triplet, for chaining.
        """
        self._equals_func = equals_func
        logger.debug("equals override %s", "set" if equals_func is not None else "cleared")
        return self

    def __eq__(self, other: Any) -> bool:
        func = self._equals_func
        if func is not None:
            return func(self, other)
        if other is self:
            return True
        if not isinstance(other, Triplet):
            return False
        # Tuple comparison treats identical slot values as equal before calling ==.
        return (self.get_x(), self.get_y(), self.get_z()) == (other.get_x(), other.get_y(), other.get_z())

    def __hash__(self) -> int:
        func = self._hash_code_func
        if func is not None:
            return func(self)
        return hash((_hash_slot(self.get_x()), _hash_slot(self.get_y()), _hash_slot(self.get_z())))

    def __str__(self) -> str:
        func = self._to_string_func
        if func is not None:
            return func(self)
        return self._default_str()

    def __repr__(self) -> str:
        return self._default_str()

    def _default_str(self) -> str:
        return (
            f"DelegatingTriplet(x={_format_slot(self.get_x())}, "
            f"y={_format_slot(self.get_y())}, z={_format_slot(self.get_z())})"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Instances only, no coercion from tuples or dicts.
        return core_schema.is_instance_schema(cls)
