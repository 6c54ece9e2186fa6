import pytest
from crutches.functional.sequences import from_, shorten, split, to, without


@pytest.fixture
def letters():
    return ["a", "b", "c", "d"]


def test_without_removes_listed_elements():
    assert without(["David", "Rafael"], ["David"]) == ["Rafael"]
    assert without(["David", "Rafael", "Aaron", "Todd"], ["Aaron", "Todd"]) == [
        "David",
        "Rafael",
    ]


def test_without_checks_each_duplicate():
    assert without([1, 1, 2, 1, 4], [1, 2]) == [4]
    assert without([3, 3, 5], [1]) == [3, 3, 5]


def test_without_empty_inputs():
    assert without([], [1]) == []
    assert without([1, 2], []) == [1, 2]


def test_without_counts_add_up():
    collection = [1, 2, 2, 3, 4, 4, 4, 5]
    elements = [2, 4, 9]
    result = without(collection, elements)

    assert all(item in collection and item not in elements for item in result)
    removed = sum(1 for item in collection if item in elements)
    assert len(result) + removed == len(collection)


def test_without_does_not_mutate_input():
    collection = ["x", "y"]
    without(collection, ["x"])
    assert collection == ["x", "y"]


def test_from_positive_positions(letters):
    assert from_(letters, 0) == ["a", "b", "c", "d"]
    assert from_(letters, 2) == ["c", "d"]
    assert from_(letters, 10) == []
    assert from_([], 0) == []


def test_from_negative_positions(letters):
    assert from_(letters, -2) == ["c", "d"]
    assert from_(letters, -1) == ["d"]
    # Positions before the start clamp to the first element
    assert from_(letters, -10) == ["a", "b", "c", "d"]


def test_to_positions(letters):
    assert to(["a", "b", "c"], 0) == ["a"]
    assert to(["a", "b", "c"], 1) == ["a", "b"]
    assert to(["a", "b", "c"], 20) == ["a", "b", "c"]


def test_to_negative_position_is_always_empty(letters):
    # Negative positions are not resolved from the end
    assert to(["a", "b", "c"], -1) == []
    assert to(letters, -3) == []


def test_to_and_from_reconstruct_the_list(letters):
    for position in range(len(letters)):
        assert to(letters, position) + from_(letters, position + 1) == letters


def test_shorten_drops_trailing_elements():
    assert shorten(["one", "two", "three"], 2) == ["one"]
    assert shorten(["one", "two", "three"]) == ["one", "two"]
    assert shorten([1, 2, 3], 0) == [1, 2, 3]


def test_shorten_exact_length_gives_empty_list():
    result = shorten([5, 6], 2)
    assert result == []
    assert result is not None


def test_shorten_too_short_gives_none():
    assert shorten([5, 6, 7, 8], 5) is None
    assert shorten([], 1) is None


def test_shorten_reconstructs_the_list():
    items = list(range(7))
    for amount in range(len(items) + 1):
        assert shorten(items, amount) + items[len(items) - amount :] == items


def test_shorten_rejects_negative_amount():
    with pytest.raises(ValueError, match="non-negative"):
        shorten([1, 2], -1)


def test_split_by_value():
    assert split(["a", "b", "c", "d", "c", "e"], "c") == [["a", "b"], ["d"], ["e"]]
    assert split(["c", "a", "b"], "c") == [[], ["a", "b"]]
    assert split(["a", "b"], "z") == [["a", "b"]]


def test_split_empty_input():
    assert split([], 1) == [[]]


def test_split_by_predicate():
    assert split([1, 2, 3, 4, 5, 6, 7, 8], lambda x: x % 2 == 0) == [
        [1],
        [3],
        [5],
        [7],
        [],
    ]


def test_split_consumes_ranges_and_generators():
    expected = [[1, 2], [4, 5], [7, 8], [10, 11], [13, 14], []]
    assert split(range(1, 16), lambda x: x % 3 == 0) == expected
    assert split((x for x in range(1, 16)), lambda x: x % 3 == 0) == expected


def test_split_run_count_matches_separators():
    items = [0, 1, 0, 0, 2, 3, 0]
    runs = split(items, 0)
    assert len(runs) == items.count(0) + 1

    rebuilt = []
    for index, run in enumerate(runs):
        if index:
            rebuilt.append(0)
        rebuilt.extend(run)
    assert rebuilt == items
