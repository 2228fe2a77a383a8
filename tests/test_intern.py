import threading

import pytest

from feap.intern import Interned, Interner


def test_same_value_interns_to_equal_handles():
    interner = Interner()
    first = interner.intern("schedule")
    second = interner.intern("sched" + "ule")
    assert first == second
    assert first.value is second.value


def test_different_values_intern_to_different_handles():
    interner = Interner()
    assert interner.intern("a") != interner.intern("b")


def test_first_value_is_kept():
    interner = Interner()
    original = tuple([1, 2, 3])
    duplicate = tuple([1, 2, 3])
    interner.intern(original)
    assert interner.intern(duplicate).value is original


def test_len_counts_distinct_values():
    interner = Interner()
    for word in ["x", "y", "x", "z", "y"]:
        interner.intern(word)
    assert len(interner) == 3


def test_handles_compare_by_identity_not_equality():
    left = tuple([1, 2])
    right = tuple([1, 2])
    assert left == right
    assert Interned(left) != Interned(right)
    assert Interned(left) == Interned(left)


def test_handles_from_separate_interners_differ():
    value_a = tuple(["label"])
    value_b = tuple(["label"])
    first = Interner().intern(value_a)
    second = Interner().intern(value_b)
    assert first != second


def test_handles_work_as_set_members():
    interner = Interner()
    handles = {interner.intern(word) for word in ["p", "q", "p", "q", "p"]}
    assert len(handles) == 2


def test_interning_a_handle_returns_it():
    interner = Interner()
    handle = interner.intern("value")
    assert interner.intern(handle) is handle


def test_attribute_access_is_forwarded():
    handle = Interner().intern("hello")
    assert handle.upper() == "HELLO"


def test_handle_is_immutable():
    handle = Interned("fixed")
    with pytest.raises(AttributeError):
        handle.value = "other"
    assert handle.value == "fixed"


def test_repr_is_that_of_the_value():
    assert repr(Interned("text")) == repr("text")


def test_unhashable_value_is_rejected():
    with pytest.raises(TypeError):
        Interner().intern([1, 2])


def test_concurrent_interning_yields_one_handle():
    interner = Interner()
    results = []
    lock = threading.Lock()

    def work():
        handle = interner.intern("shared-" + "key")
        with lock:
            results.append(handle)

    threads = [threading.Thread(target=work) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(set(results)) == 1
    assert len(interner) == 1