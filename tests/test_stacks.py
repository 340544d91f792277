import pytest

from minilib.stacks import StackError, Stacks

VALUES = [5, 3, 8, 1, 4]


def test_initial_state():
    s = Stacks(VALUES)
    assert s.a == VALUES
    assert s.b == []
    assert s.operations == []


def test_pb_moves_top_of_a():
    s = Stacks(VALUES)
    s.pb()
    assert s.b == [VALUES[-1]]
    assert s.a == VALUES[:-1]
    assert s.operations == ["pb"]


def test_pa_pb_round_trip():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    s.pa()
    s.pa()
    assert s.a == VALUES
    assert s.b == []
    assert s.operations == ["pb", "pb", "pa", "pa"]


def test_pa_on_empty_b_raises():
    s = Stacks(VALUES)
    with pytest.raises(StackError):
        s.pa()
    assert s.operations == []


def test_pb_on_empty_a_raises():
    with pytest.raises(StackError):
        Stacks().pb()


def test_sa_swaps_top_two():
    s = Stacks(VALUES)
    s.sa()
    assert s.a == VALUES[:-2] + [VALUES[-1], VALUES[-2]]
    assert s.operations == ["sa"]


def test_sa_twice_restores():
    s = Stacks(VALUES)
    s.sa()
    s.sa()
    assert s.a == VALUES


def test_sa_and_sb_ignore_short_stacks():
    s = Stacks([9])
    s.sa()
    s.sb()
    assert s.a == [9]
    assert s.operations == []


def test_ss_requires_both_stacks():
    s = Stacks(VALUES)
    s.pb()
    s.ss()
    assert s.operations == ["pb"]
    s.pb()
    s.ss()
    assert s.operations == ["pb", "pb", "ss"]
    assert s.b == [VALUES[-2], VALUES[-1]]
    assert s.a == VALUES[:-4] + [VALUES[-3], VALUES[-4]]


def test_ra_moves_top_to_bottom():
    s = Stacks(VALUES)
    s.ra()
    assert s.a == VALUES[-1:] + VALUES[:-1]
    assert s.operations == ["ra"]


def test_rra_moves_bottom_to_top():
    s = Stacks(VALUES)
    s.rra()
    assert s.a == VALUES[1:] + VALUES[:1]
    assert s.operations == ["rra"]


def test_ra_rra_inverse():
    s = Stacks(VALUES)
    s.ra()
    s.rra()
    assert s.a == VALUES


def test_full_rotation_is_identity():
    s = Stacks(VALUES)
    for _ in VALUES:
        s.ra()
    assert s.a == VALUES
    assert s.operations == ["ra"] * len(VALUES)


def test_rotations_on_empty_still_recorded():
    s = Stacks()
    s.ra()
    s.rrb()
    assert s.a == [] and s.b == []
    assert s.operations == ["ra", "rrb"]


def test_rr_and_rrr_affect_both():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    s.pb()
    a_before, b_before = list(s.a), list(s.b)
    s.rr()
    assert s.a == a_before[-1:] + a_before[:-1]
    assert s.b == b_before[-1:] + b_before[:-1]
    s.rrr()
    assert s.a == a_before
    assert s.b == b_before
    assert s.operations[-2:] == ["rr", "rrr"]


def test_rb_rrb_inverse():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    b_before = list(s.b)
    s.rb()
    s.rrb()
    assert s.b == b_before
    assert s.operations[-2:] == ["rb", "rrb"]


def test_operations_preserve_elements():
    s = Stacks(VALUES)
    for op in (s.pb, s.ra, s.pb, s.sa, s.rrr, s.ss, s.pa, s.rb, s.pa):
        op()
    assert sorted(s.a + s.b) == sorted(VALUES)