from .triplet import Triplet
from .delegating_triplet import DelegatingTriplet, EqualsFunc, HashCodeFunc, ToStringFunc

__all__ = ["Triplet", "DelegatingTriplet", "EqualsFunc", "HashCodeFunc", "ToStringFunc"]
