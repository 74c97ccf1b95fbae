"""
Object management helpers: shuffling and shallow pick/omit.
"""

import random
from typing import Any, Dict, List, Mapping, Sequence, TypeVar

from ..core.errors import InvalidArrayError, InvalidObjectError
from ..validations import is_array_valid, is_object_valid

T = TypeVar("T")


def _validate_object_and_keys(obj: Any, keys: Any) -> None:
    if not is_object_valid(obj):
        raise InvalidObjectError("The input must be a valid and non-empty object.")
    if not is_array_valid(keys):
        raise InvalidArrayError("The keys must be a valid and non-empty list of strings.")


def shuffle_array(items: Sequence[T]) -> List[T]:
    """
    Shuffled copy of items (Fisher-Yates). The input is not modified.

    Raises:
        InvalidArrayError: If items is not a list/tuple of at least 2 elements
    """
    if not is_array_valid(items) or len(items) < 2:
        raise InvalidArrayError("For an array to be shuffled it must contain at least 2 items.")
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = random.randint(0, i)
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def pick_props(obj: Mapping[str, Any], keys: Sequence[str]) -> Dict[str, Any]:
    """
    Shallow copy holding only the given keys, in the order of keys.

    Keys missing from obj are skipped.

    Raises:
        InvalidObjectError: If obj is not a non-empty mapping
        InvalidArrayError: If keys is not a non-empty list
    """
    _validate_object_and_keys(obj, keys)
    return {k: obj[k] for k in keys if k in obj}


def omit_props(obj: Mapping[str, Any], keys: Sequence[str]) -> Dict[str, Any]:
    """
    Shallow copy without the given keys.

    Raises:
        InvalidObjectError: If obj is not a non-empty mapping
        InvalidArrayError: If keys is not a non-empty list
    """
    _validate_object_and_keys(obj, keys)
    omitted = set(keys)
    return {k: v for k, v in obj.items() if k not in omitted}
