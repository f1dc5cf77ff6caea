"""
Tests for the state diff.
"""

from reactions.core.diff import changed_paths, state_changes


def test_scalar_change():
    """A changed top-level scalar is reported by its key."""
    old = {"a": 1, "b": 2, "c": 3}
    new = dict(old, b=2.1)
    assert state_changes(old, new) == "b;"


def test_nested_mapping_changes():
    """Changed mappings are reported before their changed children."""
    old = {"a": {"a1": 11, "a2": 12}, "b": 2, "c": {"c1": "c1", "c2": "c2"}}
    new = dict(old, a=dict(old["a"], a2="122"), c=dict(old["c"], c1="111"))
    assert state_changes(old, new) == "a;a.a2;c;c.c1;"


def test_sequence_element_changes():
    """Same-length sequences are compared element by element."""
    old = {"a": [{"a1": 11}, {"a2": 12}], "b": 2, "c": ["c1", "c2"]}
    new = dict(old, a=list(old["a"]), c=list(old["c"]))
    new["a"][1] = {"a2": 122}
    new["c"][0] = "c11"
    assert state_changes(old, new) == "a;a.1;a.1.a2;c;c.0;"


def test_identical_states_have_no_changes():
    """Diffing a state with itself yields nothing."""
    state = {"a": [1, {"b": None}], "c": "x"}
    assert state_changes(state, state) == ""
    assert changed_paths(state, state) == []


def test_length_change_reported_at_sequence_only():
    """Sequences whose length changed are not compared per element."""
    old = {"items": [{"id": 0}, {"id": 1}]}
    new = {"items": [{"id": 5}]}
    assert changed_paths(old, new) == ["items"]


def test_scalars_compare_by_value():
    """Equal scalars are unchanged even when they are different objects."""
    big = 10 ** 20
    old = {"n": big, "s": "".join(["ab", "c"])}
    new = {"n": int(str(big)), "s": "abc"}
    assert changed_paths(old, new) == []


def test_scalar_type_change_reported():
    """True and 1 are different values."""
    assert changed_paths({"flag": 1}, {"flag": True}) == ["flag"]


def test_new_keys_reported_removed_keys_not():
    """Traversal follows the new state's keys."""
    old = {"a": 1, "gone": 2}
    new = {"a": 1, "added": {"x": 1}}
    assert changed_paths(old, new) == ["added"]


def test_equal_content_different_containers():
    """Containers compare by identity, so a copied mapping is reported."""
    old = {"m": {"k": 1}}
    new = {"m": {"k": 1}}
    assert changed_paths(old, new) == ["m"]


def test_order_follows_new_state():
    """Reported order is the new state's insertion order."""
    old = {"x": 1, "y": 1}
    new = {"y": 2, "x": 2}
    assert changed_paths(old, new) == ["y", "x"]


def test_equal_numbers_of_different_types_unchanged():
    """1 and 1.0 are the same value."""
    assert changed_paths({"n": 1, "m": 2.5}, {"n": 1.0, "m": 2.5}) == []
    assert changed_paths({"n": 1}, {"n": 1.5}) == ["n"]
    assert changed_paths({"flag": True}, {"flag": 1.0}) == ["flag"]
