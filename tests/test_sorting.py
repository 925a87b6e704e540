from underbar.core.sorting import sort_by


def test_sort_by_property_name():
    records = [{"n": "b"}, {"n": "a"}, {"n": "c"}]
    assert [r["n"] for r in sort_by(records, "n")] == ["a", "b", "c"]


def test_sort_by_function():
    people = [{"name": "curly", "age": 50}, {"name": "moe", "age": 30}]
    result = sort_by(people, lambda person: person["age"])
    assert [p["name"] for p in result] == ["moe", "curly"]


def test_sort_by_attribute(people):
    people.reverse()
    assert [p.name for p in sort_by(people, "age")] == ["moe", "larry", "curly"]


def test_stable_for_equal_keys():
    records = [
        {"key": 2, "id": "a"},
        {"key": 1, "id": "b"},
        {"key": 2, "id": "c"},
        {"key": 1, "id": "d"},
        {"key": 2, "id": "e"},
    ]
    assert [r["id"] for r in sort_by(records, "key")] == ["b", "d", "a", "c", "e"]


def test_falsy_keys_sort_last_in_visiting_order():
    values = [None, 4, 1, None, 3, 2]
    assert sort_by(values, lambda value: value) == [1, 2, 3, 4, None, None]


def test_zero_key_sorts_last():
    assert sort_by([3, 0, 1], lambda value: value) == [1, 3, 0]


def test_truthy_key_moves_ahead_of_earlier_falsy_key():
    assert sort_by([5, None, 7], lambda value: value) == [5, 7, None]


def test_missing_properties_sort_last():
    records = [{"id": "x"}, {"id": "y", "n": 2}, {"id": "z", "n": 1}]
    assert [r["id"] for r in sort_by(records, "n")] == ["z", "y", "x"]


def test_mapping_values():
    mapping = {"first": {"n": 3}, "second": {"n": 1}, "third": {"n": 2}}
    assert sort_by(mapping, "n") == [{"n": 1}, {"n": 2}, {"n": 3}]


def test_returns_new_list():
    values = [3, 1, 2]
    result = sort_by(values, lambda v: v)
    assert result == [1, 2, 3]
    assert values == [3, 1, 2]


def test_empty_collection():
    assert sort_by([], "n") == []
