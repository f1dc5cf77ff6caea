"""
Tests for bound actions and connect_props.
"""

import copy
from functools import partial

from reactions import Reactions
from reactions.binding import BoundAction, bind_action_creators, connect_props

from .todo_reactions import TODO_LIST, SimpleStore, initial_state

THREE_LISTS_STATE = {
    "domain": {
        "list1": {"todoList": [], "nextId": 0},
        "list2": {"todoList": [], "nextId": 0},
        "list3": {"todoList": [], "nextId": 0},
    },
    "app": {
        "list1": {"filter": "SHOW_ALL"},
        "list2": {"filter": "SHOW_ALL"},
        "list3": {"filter": "SHOW_ALL"},
    },
}


def list_map(name):
    return {"app": ["app", name], "domain": ["domain", name]}


def todo_list_prop(state, own_props):
    return {"todoList": state["domain"]["todoList"]}


def make_setup():
    r = Reactions()
    r.add_reactions(TODO_LIST, list_map("list1"), "list1")
    r.add_reactions(TODO_LIST, list_map("list2"), "list2")
    domain_selector = {"todoList": lambda state: state["domain"]["todoList"]}
    r.add_reactions([TODO_LIST, domain_selector], list_map("list3"), "list3")
    store = SimpleStore(r.reduce, copy.deepcopy(THREE_LISTS_STATE))
    return r, store


def test_default_action_mapping_with_thunk():
    """Group actions are bound to the store and thunks reach them through props."""
    r, store = make_setup()

    props = connect_props(r, store, "list1", todo_list_prop)
    assert props["todoList"] == []

    props["AddItemWithThunk"]("foo")

    assert r.group_state(store.get_state(), "list1")["domain"]["todoList"][0]["text"] == "foo"
    assert store.dispatched[-1].type == "list1.AddItem"


def test_explicit_action_mapping():
    """map_dispatch adds actions next to the group's bound actions."""
    r, store = make_setup()

    props = connect_props(
        r,
        store,
        "list2",
        todo_list_prop,
        lambda own_props, actions: bind_action_creators(
            {"BoundItemAdd": partial(actions["AddItem"], "Bound")}, store
        ),
    )
    assert isinstance(props["AddItem"], BoundAction)

    props["BoundItemAdd"]()
    props["AddItem"]("Default")

    texts = [item["text"] for item in r.group_state(store.get_state(), "list2")["domain"]["todoList"]]
    assert texts == ["Bound", "Default"]
    assert store.get_state()["domain"]["list1"]["todoList"] == []


def test_map_dispatch_overrides_only_its_own_entries():
    """Entries returned by map_dispatch win; other group actions stay bound."""
    r, store = make_setup()

    props = connect_props(r, store, "list1", map_dispatch=lambda own_props, actions: {"Extra": 1, "DeleteItem": None})

    assert props["Extra"] == 1
    assert props["DeleteItem"] is None
    assert set(r.actions_group["list1"]) - {"DeleteItem"} <= set(props)

    props["AddItem"]("kept")
    assert store.get_state()["domain"]["list1"]["todoList"][0]["text"] == "kept"


def test_selectors_and_default_mapping():
    """Selectors registered with a group feed its props."""
    r, store = make_setup()

    props = connect_props(r, store, "list3")
    props["AddItem"]("foo")
    props["AddItemWithThunk"]("bar")

    texts = [item["text"] for item in r.group_state(store.get_state(), "list3")["domain"]["todoList"]]
    assert texts == ["foo", "bar"]

    after = connect_props(r, store, "list3")
    assert [item["text"] for item in after["todoList"]] == ["foo", "bar"]


def test_mapping_dispatch_and_own_props():
    """A mapping map_dispatch is bound as is; own_props win over everything."""
    r, store = make_setup()

    props = connect_props(
        r,
        store,
        "list1",
        map_dispatch={"Add": r.actions_group["list1"]["AddItem"], "label": "static"},
        own_props={"todoList": "own"},
    )
    props["Add"]("via mapping")

    assert props["label"] == "static"
    assert props["todoList"] == "own"
    assert store.get_state()["domain"]["list1"]["todoList"][0]["text"] == "via mapping"


def test_bound_actions_get_props_context():
    """Every bound action in props carries the props dict itself as context."""
    r, store = make_setup()

    props = connect_props(r, store, "list1", own_props={"title": "Mine"})

    assert isinstance(props["AddItem"], BoundAction)
    assert props["AddItem"].context is props
    assert props["AddItemWithThunk"].context["title"] == "Mine"


def test_two_phase_bind():
    """with_context returns a new handle; the store-bound handle is unchanged."""
    r = Reactions()
    r.add_reactions(TODO_LIST)
    store = SimpleStore(r.reduce, initial_state())
    seen = []

    def spy_thunk(text):
        def thunk(context, dispatch, get_state):
            seen.append((context, get_state()["domain"]["nextId"]))
            return dispatch(r.actions["AddItem"](text))
        return thunk

    bound = bind_action_creators({"Spy": spy_thunk, "count": 3}, store)
    assert bound["count"] == 3

    with_ctx = bound["Spy"].with_context({"me": 1})
    assert bound["Spy"].context is None
    with_ctx("a")
    bound["Spy"]("b")

    assert seen == [({"me": 1}, 0), (None, 1)]
    assert store.get_state()["domain"]["nextId"] == 2


def test_ungrouped_connect_uses_all_actions():
    """Without a group every registered action is bound."""
    r = Reactions()
    r.add_reactions(TODO_LIST)
    store = SimpleStore(r.reduce, initial_state())

    props = connect_props(r, store, map_state=lambda state, own: {"count": len(state["domain"]["todoList"])})
    props["AddItem"]("x")

    assert props["count"] == 0
    assert connect_props(r, store, map_state=lambda state, own: {"count": len(state["domain"]["todoList"])})["count"] == 1
