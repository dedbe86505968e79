from typing import Any, Callable, Iterable, List, MutableSequence, Optional, Sequence

from .errors import DuplicateSelectionError, NullSequenceError, OutOfRangeError

#-------------------------------------------------------------------------------
# Lookup
#-------------------------------------------------------------------------------

def contains_duplicates(items: Iterable[Any]) -> bool:
    """Checks whether two items compare equal. Unhashable items are compared
    pairwise."""
    if items is None:
        raise NullSequenceError("items")

    items = list(items)
    try:
        return len(set(items)) != len(items)
    except TypeError:
        pass

    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] == items[j]:
                return True

    return False

def is_null_or_empty(collection) -> bool:
    return collection is None or len(collection) == 0

def index_of(sequence: Sequence[Any], item: Any) -> int:
    """Index of the first element equal to item, or -1."""
    if callable(getattr(sequence, "index", None)):
        try:
            return sequence.index(item)
        except ValueError:
            return -1

    # numpy arrays and other sequences without .index()
    for i in range(len(sequence)):
        if sequence[i] == item:
            return i

    return -1

def get_indices(sequence: Sequence[Any], *items: Any, allow_duplicates: bool = True) -> List[int]:
    """Indices of the items within the sequence, -1 where an item is missing."""
    if sequence is None:
        raise NullSequenceError("sequence")

    if not allow_duplicates:
        duplicates = [item for i, item in enumerate(items) if item in items[:i]]
        if duplicates:
            raise DuplicateSelectionError("items", duplicates)

    return [index_of(sequence, item) for item in items]

def is_valid_index(sequence: Sequence[Any], index: int) -> bool:
    if sequence is None:
        raise NullSequenceError("sequence")
    return 0 <= index < len(sequence)

#-------------------------------------------------------------------------------
# Sorting
#-------------------------------------------------------------------------------

def insertion_sort(
    sequence: MutableSequence[Any],
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> None:
    """Stable in-place insertion sort; key and reverse behave like list.sort()."""
    if sequence is None:
        raise NullSequenceError("sequence")

    if key is None:
        key = lambda x: x

    for i in range(1, len(sequence)):
        item = sequence[i]
        item_key = key(item)
        j = i
        while j > 0:
            prev_key = key(sequence[j - 1])
            out_of_order = prev_key < item_key if reverse else item_key < prev_key
            if not out_of_order:
                break
            sequence[j] = sequence[j - 1]
            j -= 1
        sequence[j] = item

def sort_copy(items: Iterable[Any]) -> List[Any]:
    return sorted(items)

def reverse_sort_copy(items: Iterable[Any]) -> List[Any]:
    return sorted(items, reverse=True)

#-------------------------------------------------------------------------------
# Removal
#-------------------------------------------------------------------------------

def remove_items(lst: MutableSequence[Any], *items: Any) -> bool:
    """Removes the first occurrence of each item. Returns True if every item
    was found."""
    if lst is None:
        raise NullSequenceError("lst")

    all_removed = True
    for item in items:
        try:
            lst.remove(item)
        except ValueError:
            all_removed = False

    return all_removed

def remove_at(lst: MutableSequence[Any], *indices: int) -> None:
    """Removes the elements at the given positions. All indices are checked
    before anything is removed."""
    if lst is None:
        raise NullSequenceError("lst")

    if not indices:
        return

    for index in indices:
        if not is_valid_index(lst, index):
            raise OutOfRangeError("indices", index, len(lst))

    ordered = sorted(indices, reverse=True)
    duplicates = [a for a, b in zip(ordered, ordered[1:]) if a == b]
    if duplicates:
        raise DuplicateSelectionError("indices", duplicates)

    for index in ordered:
        del lst[index]

def remove_first(lst: MutableSequence[Any], predicate: Callable[[Any], bool]) -> bool:
    for i, item in enumerate(lst):
        if predicate(item):
            del lst[i]
            return True
    return False

def remove_where(lst: MutableSequence[Any], predicate: Callable[[Any], bool]) -> bool:
    kept = [item for item in lst if not predicate(item)]
    any_removed = len(kept) != len(lst)
    lst[:] = kept
    return any_removed

#-------------------------------------------------------------------------------
# Copies
#-------------------------------------------------------------------------------

def trim_nones_from_start(items: Sequence[Any]) -> List[Any]:
    # NOTE: keeps everything *before* the first None, not after it
    if items is None:
        raise NullSequenceError("items")

    trimmed = []
    for item in items:
        if item is None:
            break
        trimmed.append(item)
    return trimmed

def trim_nones_from_end(items: Sequence[Any]) -> List[Any]:
    if items is None:
        raise NullSequenceError("items")

    end = len(items)
    while end > 0 and items[end - 1] is None:
        end -= 1
    return list(items[:end])

def remove_nones(items: Iterable[Any]) -> List[Any]:
    if items is None:
        raise NullSequenceError("items")
    return [item for item in items if item is not None]

def combine(first: Iterable[Any], second: Iterable[Any]) -> List[Any]:
    if first is None:
        raise NullSequenceError("first")
    if second is None:
        raise NullSequenceError("second")
    return [*first, *second]
