from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from sharedtuples import DelegatingTriplet, Triplet


class PlainTriplet:
    """Triplet-capable value that is not a DelegatingTriplet."""

    def __init__(self, x, y, z):
        self.x = x
        self.y = y
        self.z = z

    def get_x(self):
        return self.x

    def get_y(self):
        return self.y

    def get_z(self):
        return self.z


class TripletRecord(BaseModel):
    name: str
    triplet: DelegatingTriplet
    previous: Optional[DelegatingTriplet] = None


def test_delegating_triplet_is_a_triplet():
    assert isinstance(DelegatingTriplet(), Triplet)
    assert isinstance(PlainTriplet(1, 2, 3), Triplet)


def test_tuples_are_not_triplets():
    assert not isinstance((1, 2, 3), Triplet)


def test_equal_to_any_triplet_with_same_slots():
    assert DelegatingTriplet(1, "a", None) == PlainTriplet(1, "a", None)
    assert DelegatingTriplet(1, "a", None) != PlainTriplet(1, "b", None)


def test_pydantic_field_accepts_instance():
    triplet = DelegatingTriplet(1, "a", None)

    record = TripletRecord(name="first", triplet=triplet)

    assert record.triplet is triplet
    assert record.previous is None


def test_pydantic_field_rejects_other_values():
    with pytest.raises(ValidationError):
        TripletRecord(name="first", triplet=(1, "a", None))

    with pytest.raises(ValidationError):
        TripletRecord(name="first", triplet=PlainTriplet(1, "a", None))
