"""
Tests for reaction trie compilation.
"""

from reactions import Reactions
from reactions.core.paths import Literal, Matcher
from reactions.core.trie import ReactionTrie, substitute
from reactions.core.effects import SliceEffect
from reactions.core.remap import normalize_substitutions

from .todo_reactions import TODO_LIST, matches_item


def child(node, key):
    return node.children[Literal(key).trie_key]


def test_trie_shape_for_todo_list():
    """Every reaction compiles into one trie whose leaves hold its effects."""
    r = Reactions()
    r.add_reactions(TODO_LIST)

    for action_type in ("AddItem", "DeleteItem", "ToggleItem", "FilterList"):
        assert action_type in r.trie

    add = r.trie.get("AddItem")
    assert child(add, "domain").effects == []
    assert len(child(child(add, "domain"), "todoList").effects) == 1
    assert len(child(child(add, "domain"), "nextId").effects) == 1
    assert child(add, "app").effects == []
    assert len(child(child(add, "app"), "filter").effects) == 1

    toggle_list = child(child(r.trie.get("ToggleItem"), "domain"), "todoList")
    assert toggle_list.effects == []
    (item,) = toggle_list.children.values()
    assert item.matcher == Matcher(matches_item)
    assert len(item.effects) == 1


def test_pure_actions_have_no_trie():
    """A reaction without state effects registers an action only."""
    r = Reactions()
    r.add_reactions(TODO_LIST)

    assert "AddItemWithThunk" in r.actions
    assert "AddItemWithThunk" not in r.trie


def test_effects_at_same_node_keep_registration_order():
    """Effects sharing a path accumulate on one node in order."""
    trie = ReactionTrie()
    first = SliceEffect.from_mapping({"slice": ["a", "b"], "set": lambda a, s, v: 1}, "T")
    second = SliceEffect.from_mapping({"slice": ["a", "b"], "set": lambda a, s, v: 2}, "T")
    trie.add("T", first)
    node = trie.add("T", second)

    assert node.effects == [first, second]
    assert len(trie.get("T").children) == 1


def test_shared_predicate_shares_node():
    """Slices using the same predicate object meet at the same node."""
    trie = ReactionTrie()
    pred = lambda a, s, v, k: True
    trie.add("T", SliceEffect.from_mapping({"slice": ["l", pred, "x"], "set": lambda a, s, v: 1}, "T"))
    trie.add("T", SliceEffect.from_mapping({"slice": ["l", pred, "y"], "set": lambda a, s, v: 1}, "T"))

    (pred_node,) = child(trie.get("T"), "l").children.values()
    assert len(pred_node.children) == 2


def test_substitute_replaces_first_segment():
    """A substituted top-level property is replaced by the substitution path."""
    subs = normalize_substitutions({"domain": ["domain", "list2"]}, "test")
    path = (Literal("domain"), Literal("nextId"))

    assert substitute(path, subs) == (Literal("domain"), Literal("list2"), Literal("nextId"))
    assert substitute((Literal("app"),), subs) == (Literal("app"),)
    assert substitute(path, None) == path


def test_substituted_predicates_bypass_remapping():
    """Predicate segments coming from a substitution are compiled with remap=False."""
    active = lambda a, s, v, k: True
    r = Reactions()
    r.add_reactions(TODO_LIST, {"domain": ["domain", "lists", active]})

    lists = child(child(r.trie.get("AddItem"), "domain"), "lists")
    (active_node,) = lists.children.values()
    assert active_node.matcher == Matcher(active, remap=False)
    assert set(active_node.children) == {Literal("nextId").trie_key, Literal("todoList").trie_key}

    toggle_lists = child(child(r.trie.get("ToggleItem"), "domain"), "lists")
    (toggle_active,) = toggle_lists.children.values()
    (item,) = child(toggle_active, "todoList").children.values()
    assert item.matcher == Matcher(matches_item)
    assert item.matcher.remap is True
