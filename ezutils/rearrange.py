import logging
import operator
from typing import Any, Iterable, List, Protocol

from .collection_utils import index_of
from .errors import DuplicateSelectionError, NotFoundError, NullSequenceError, OutOfRangeError

logger = logging.getLogger(__name__)

class IndexableSequence(Protocol):
    """Anything with a length that can be read and written by position:
    lists, 1-D numpy arrays, MutableSequence implementations, ..."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...

    def __setitem__(self, index: int, value: Any) -> None: ...

#-------------------------------------------------------------------------------
# Validation
#-------------------------------------------------------------------------------

def _check_sequence(sequence) -> int:
    if sequence is None:
        raise NullSequenceError("sequence")

    if not hasattr(sequence, "__setitem__"):
        raise TypeError(f"'sequence' must support item assignment, got {type(sequence).__name__}")

    return len(sequence)

def _check_index(name: str, index: Any, length: int, inclusive: bool) -> int:
    try:
        index = operator.index(index)
    except TypeError:
        raise TypeError(f"'{name}' must be an integer, got {type(index).__name__}") from None

    upper = length if inclusive else length - 1
    if index < 0 or index > upper:
        raise OutOfRangeError(name, index, length, inclusive=inclusive)

    return index

def _check_unique(name: str, positions: List[int], labels: List[Any]) -> None:
    seen = set()
    duplicates = []
    for position, label in zip(positions, labels):
        if position in seen:
            duplicates.append(label)
        seen.add(position)

    if duplicates:
        raise DuplicateSelectionError(name, duplicates)

def _resolve_items(sequence, items: Iterable[Any]) -> List[int]:
    items = list(items)
    positions = [index_of(sequence, item) for item in items]

    missing = [item for item, position in zip(items, positions) if position == -1]
    if missing:
        raise NotFoundError(missing)

    _check_unique("items", positions, items)
    return positions

def _resolve_indices(source_indices: Iterable[Any], length: int) -> List[int]:
    positions = [_check_index("source_indices", i, length, inclusive=False) for i in source_indices]
    _check_unique("source_indices", positions, positions)
    return positions

#-------------------------------------------------------------------------------
# Moves
#-------------------------------------------------------------------------------

def _shift_single(sequence: IndexableSequence, source: int, destination: int) -> None:
    # every element strictly between source and destination moves one
    # step toward source
    if source == destination:
        return

    item = sequence[source]
    step = 1 if destination > source else -1
    for i in range(source, destination, step):
        sequence[i] = sequence[i + step]

    sequence[destination] = item

def _move_block(sequence: IndexableSequence, target_index: int, positions: List[int]) -> None:
    left_selected = sum(1 for p in positions if p < target_index)
    adjusted_target = target_index - left_selected

    if len(positions) == 1:
        _shift_single(sequence, positions[0], adjusted_target)
        return

    selected = sorted(positions)
    items = [sequence[p] for p in selected]
    marked = set(selected)

    min_index = selected[0]
    max_index = selected[-1]
    right_selected = len(selected) - left_selected

    # number of non-selected elements in [min_index, target_index) and in
    # [target_index, max_index]; either can be <= 0
    left_shift = target_index - min_index - left_selected
    right_shift = max_index - target_index - right_selected + 1

    # close the gaps left of the target by pulling elements left...
    source = min_index
    for i in range(min_index, min_index + left_shift):
        source += 1
        while source in marked:
            source += 1
        sequence[i] = sequence[source]

    # ...and right of the target by pushing elements right
    source = max_index
    for i in range(max_index, max_index - right_shift, -1):
        source -= 1
        while source in marked:
            source -= 1
        sequence[i] = sequence[source]

    for offset, item in enumerate(items):
        sequence[adjusted_target + offset] = item

#-------------------------------------------------------------------------------
# Public API
#-------------------------------------------------------------------------------

def rearrange_by_value(sequence: IndexableSequence, target_index: int, *items: Any) -> None:
    """
    Moves items within a sequence so that they form a contiguous block.

    The block is inserted before the element currently at target_index
    (target_index == len(sequence) appends it), so after the call it starts
    at target_index minus the number of moved items that were left of it.
    Both the moved items and the rest keep their relative order. Items are
    located with an equality lookup (first match).

    Raises:
      - NullSequenceError: sequence is None.
      - OutOfRangeError: target_index is outside [0, len(sequence)].
      - NotFoundError: one or more items are not in the sequence.
      - DuplicateSelectionError: two items resolve to the same position.

    Nothing is modified when an error is raised.
    """
    length = _check_sequence(sequence)
    target_index = _check_index("target_index", target_index, length, inclusive=True)

    if not items:
        return

    positions = _resolve_items(sequence, items)

    logger.debug("Rearranging %d item(s) to index %d", len(positions), target_index)
    _move_block(sequence, target_index, positions)

def rearrange_by_index(sequence: IndexableSequence, target_index: int, *source_indices: int) -> None:
    """
    Same as rearrange_by_value(), but the elements to move are given by
    their current positions. Source indices must lie in [0, len(sequence));
    negative indices are rejected rather than counted from the end.
    """
    length = _check_sequence(sequence)
    target_index = _check_index("target_index", target_index, length, inclusive=True)

    if not source_indices:
        return

    positions = _resolve_indices(source_indices, length)

    logger.debug("Rearranging indices %s to index %d", positions, target_index)
    _move_block(sequence, target_index, positions)

def move_single(sequence: IndexableSequence, target_index: int, item: Any) -> None:
    """
    Moves one item so that it ends up at target_index, shifting only the
    elements in between. Equivalent to
    sequence.insert(target_index, sequence.pop(sequence.index(item)));
    target_index == len(sequence) moves the item to the end.
    """
    length = _check_sequence(sequence)
    target_index = _check_index("target_index", target_index, length, inclusive=True)

    source = index_of(sequence, item)
    if source == -1:
        raise NotFoundError([item])

    _shift_single(sequence, source, min(target_index, length - 1))

def move_single_index(sequence: IndexableSequence, target_index: int, source_index: int) -> None:
    """Like move_single(), with the item given by its current position."""
    length = _check_sequence(sequence)
    target_index = _check_index("target_index", target_index, length, inclusive=True)
    source_index = _check_index("source_index", source_index, length, inclusive=False)

    _shift_single(sequence, source_index, min(target_index, length - 1))

class SequenceRearranger:
    rearrange_by_value = staticmethod(rearrange_by_value)
    rearrange_by_index = staticmethod(rearrange_by_index)
    move_single = staticmethod(move_single)
    move_single_index = staticmethod(move_single_index)
