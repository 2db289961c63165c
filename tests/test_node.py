import random

import pytest

from markov_chain.core.errors import InvalidArgumentError
from markov_chain.core.registry import NodeRegistry
from markov_chain.models.node import ChainNode


def test_value_node_requires_token():
    with pytest.raises(InvalidArgumentError):
        ChainNode(None)
    with pytest.raises(InvalidArgumentError):
        ChainNode(42)


def test_equality_and_hash_follow_value():
    left = ChainNode("猫")
    right = ChainNode("猫")
    assert left == right
    assert hash(left) == hash(right)
    assert left != ChainNode("狗")
    assert ChainNode.anchor() == ChainNode.anchor()
    assert ChainNode.anchor() != left
    assert len({left, right}) == 1


def test_add_successor_matches_by_value():
    node = ChainNode("x")
    node.add_successor(ChainNode("y"))
    node.add_successor(ChainNode("y"))
    assert node.successor_count == 1
    assert node.transition_count("y") == 2
    assert node.transition_count("z") == 0


def test_self_loop():
    node = ChainNode("a")
    node.add_successor(node)
    assert node.next_successor(random.Random(0)) is node


def test_next_successor_without_successors():
    assert ChainNode("a").next_successor(random.Random(0)) is None


def test_next_successor_requires_rng():
    node = ChainNode("a")
    node.add_successor(ChainNode("b"))
    with pytest.raises(InvalidArgumentError):
        node.next_successor(None)


def test_next_successor_ignores_transition_counts():
    node = ChainNode("start")
    p = ChainNode("p")
    q = ChainNode("q")
    for _ in range(5):
        node.add_successor(p)
    node.add_successor(q)
    assert node.transition_count("p") == 5
    assert node.transition_count("q") == 1

    rng = random.Random(1234)
    trials = 10000
    picks = [node.next_successor(rng).value for _ in range(trials)]
    ratio = picks.count("p") / trials
    # 等概率抽取，而不是 5:1 加权（加权时约为 0.83）
    assert 0.45 < ratio < 0.55


def test_registry_lookup_and_count():
    registry = NodeRegistry()
    assert registry.count() == 1
    assert registry.lookup_or_none("a") is None
    node = registry.create("a")
    assert registry.lookup_or_none("a") is node
    assert registry.resolve("a") is node
    assert registry.count() == 2
    assert "a" in registry
    assert list(registry)[0] is registry.anchor


def test_registry_anchor_value_never_matches():
    registry = NodeRegistry()
    assert registry.lookup_or_none(None) is None
    assert registry.lookup_or_none("") is None


def test_registry_register_does_not_deduplicate():
    registry = NodeRegistry()
    first = registry.create("a")
    registry.register(ChainNode("a"))
    assert registry.count() == 3
    assert registry.lookup_or_none("a") is first


def test_registry_create_rejects_missing_token():
    with pytest.raises(InvalidArgumentError):
        NodeRegistry().create(None)
