import random

import numpy as np
import pytest

from ezutils import (
    SequenceRearranger, rearrange_by_value, rearrange_by_index,
    move_single, move_single_index,
    NullSequenceError, OutOfRangeError, DuplicateSelectionError, NotFoundError
)

def reference_rearrange(items, target_index, source_indices):
    """Remove the selected elements, then insert them before target_index."""
    selected = sorted(source_indices)
    block = [items[i] for i in selected]
    rest = [x for i, x in enumerate(items) if i not in set(selected)]
    start = target_index - sum(1 for i in selected if i < target_index)
    return rest[:start] + block + rest[start:]

#-------------------------------------------------------------------------------
# Documented scenarios
#-------------------------------------------------------------------------------

def test_move_two_to_front():
    seq = list("ABCDE")
    rearrange_by_index(seq, 0, 1, 3)
    assert seq == list("BDACE")

def test_move_single_to_last_position():
    seq = list("ABCDE")
    move_single(seq, 4, "C")
    assert seq == list("ABDEC")

def test_select_everything_is_unchanged():
    seq = [1, 2, 3]
    rearrange_by_index(seq, 0, 0, 1, 2)
    assert seq == [1, 2, 3]

def test_empty_selection_is_noop():
    seq = ["X", "Y"]
    rearrange_by_index(seq, 1)
    rearrange_by_value(seq, 1)
    assert seq == ["X", "Y"]

def test_duplicate_index_rejected():
    seq = list("ABC")
    with pytest.raises(DuplicateSelectionError) as info:
        rearrange_by_index(seq, 1, 0, 0)
    assert info.value.duplicates == [0]
    assert seq == list("ABC")

def test_target_out_of_range_rejected():
    seq = list("ABC")
    with pytest.raises(OutOfRangeError):
        rearrange_by_index(seq, 5, 0)
    with pytest.raises(OutOfRangeError):
        rearrange_by_value(seq, -1, "A")
    assert seq == list("ABC")

#-------------------------------------------------------------------------------
# Target semantics
#-------------------------------------------------------------------------------

def test_insert_before_original_position():
    seq = list("ABCDE")
    rearrange_by_index(seq, 4, 0, 2)
    assert seq == list("BDACE")

def test_target_inside_selection():
    seq = list("ABCDE")
    rearrange_by_index(seq, 2, 0, 4)
    assert seq == list("BAECD")

def test_append_at_end():
    seq = list("ABCDE")
    rearrange_by_index(seq, 5, 1, 0)
    assert seq == list("CDEAB")

def test_single_index_uses_insert_before_semantics():
    seq = list("ABCDE")
    rearrange_by_index(seq, 4, 2)
    assert seq == list("ABDCE")

def test_block_keeps_original_order_regardless_of_argument_order():
    seq = list("ABCDEF")
    rearrange_by_value(seq, 6, "E", "B")
    assert seq == list("ACDFBE")

def test_rearrange_to_current_position_is_noop():
    seq = list("ABCDEF")
    rearrange_by_index(seq, 2, 2, 3)
    assert seq == list("ABCDEF")
    rearrange_by_index(seq, 4, 2, 3)
    assert seq == list("ABCDEF")

def test_by_value_and_by_index_agree():
    by_value = list("ABCDEFGH")
    by_index = list("ABCDEFGH")
    rearrange_by_value(by_value, 3, "G", "A", "E")
    rearrange_by_index(by_index, 3, 6, 0, 4)
    assert by_value == by_index == reference_rearrange(list("ABCDEFGH"), 3, [0, 4, 6])

def test_matches_reference_on_random_inputs():
    rng = random.Random(1234)
    for _ in range(300):
        n = rng.randint(1, 12)
        original = list(range(n))
        k = rng.randint(1, n)
        selection = rng.sample(range(n), k)
        target = rng.randint(0, n)

        seq = list(original)
        rearrange_by_index(seq, target, *selection)

        assert seq == reference_rearrange(original, target, selection)
        assert len(seq) == n
        assert sorted(seq) == original

#-------------------------------------------------------------------------------
# Errors and atomicity
#-------------------------------------------------------------------------------

def test_none_sequence():
    with pytest.raises(NullSequenceError):
        rearrange_by_index(None, 0, 1)
    with pytest.raises(TypeError):
        move_single(None, 0, "A")

def test_not_found_leaves_sequence_untouched():
    seq = list("ABC")
    with pytest.raises(NotFoundError) as info:
        rearrange_by_value(seq, 0, "C", "Z")
    assert info.value.items == ["Z"]
    assert seq == list("ABC")

def test_duplicate_values_rejected():
    seq = list("ABC")
    with pytest.raises(DuplicateSelectionError):
        rearrange_by_value(seq, 0, "B", "B")
    assert seq == list("ABC")

def test_source_index_out_of_range():
    seq = list("ABC")
    with pytest.raises(OutOfRangeError):
        rearrange_by_index(seq, 0, 1, 3)
    with pytest.raises(OutOfRangeError):
        rearrange_by_index(seq, 0, -1)
    assert seq == list("ABC")

def test_errors_are_builtin_subclasses():
    seq = list("ABC")
    with pytest.raises(IndexError):
        rearrange_by_index(seq, 4, 0)
    with pytest.raises(ValueError):
        rearrange_by_value(seq, 0, "Q")

def test_immutable_sequence_rejected():
    with pytest.raises(TypeError):
        rearrange_by_index((1, 2, 3), 0, 2)

def test_non_integer_target():
    with pytest.raises(TypeError):
        rearrange_by_index([1, 2, 3], 1.5, 0)

#-------------------------------------------------------------------------------
# Single moves
#-------------------------------------------------------------------------------

def test_move_single_left():
    seq = list("ABCDE")
    move_single(seq, 0, "D")
    assert seq == list("DABCE")

def test_move_single_matches_pop_insert():
    for source in range(5):
        for target in range(6):
            expected = list("ABCDE")
            expected.insert(target, expected.pop(source))

            seq = list("ABCDE")
            move_single_index(seq, target, source)
            assert seq == expected, (source, target)

def test_move_single_errors():
    seq = list("ABC")
    with pytest.raises(NotFoundError):
        move_single(seq, 0, "Z")
    with pytest.raises(OutOfRangeError):
        move_single(seq, 4, "A")
    with pytest.raises(OutOfRangeError):
        move_single_index(seq, 0, 3)
    assert seq == list("ABC")

#-------------------------------------------------------------------------------
# Other sequence types
#-------------------------------------------------------------------------------

def test_numpy_array():
    array = np.arange(8)
    rearrange_by_index(array, 6, 1, 2, 5)
    assert array.tolist() == reference_rearrange(list(range(8)), 6, [1, 2, 5])

def test_numpy_array_by_value():
    array = np.array([10, 20, 30, 40])
    rearrange_by_value(array, 0, 40, 30)
    assert array.tolist() == [30, 40, 10, 20]

def test_numpy_integer_indices():
    seq = list("ABCD")
    rearrange_by_index(seq, np.int64(0), np.int64(3))
    assert seq == list("DABC")

def test_static_facade():
    seq = list("ABCDE")
    SequenceRearranger.rearrange_by_index(seq, 0, 1, 3)
    SequenceRearranger.move_single(seq, 4, "B")
    assert seq == list("DACEB")
