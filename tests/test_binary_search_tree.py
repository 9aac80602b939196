import pytest

from algokit.data_structures.binary_search_tree import BinarySearchTree

BACK_AWAY = "back away...I will deal with this jedi slime myself"


@pytest.fixture
def prequel_memes_tree():
    tree = BinarySearchTree()
    for value in [
        "hello there",
        "general kenobi",
        "you are a bold one",
        "kill him",
        BACK_AWAY,
        "your move",
        "you fool",
    ]:
        tree.insert(value)
    return tree


def test_search(prequel_memes_tree):
    tree = prequel_memes_tree
    assert tree.search("hello there")
    assert tree.search("you are a bold one")
    assert tree.search("general kenobi")
    assert tree.search("you fool")
    assert tree.search("kill him")
    assert not tree.search(
        "but i was going to tosche station to pick up some power converters"
    )
    assert not tree.search("only a sith deals in absolutes")
    assert not tree.search("you underestimate my power")


def test_contains_operator(prequel_memes_tree):
    assert "kill him" in prequel_memes_tree
    assert "only a sith deals in absolutes" not in prequel_memes_tree


def test_maximum_and_minimum(prequel_memes_tree):
    assert prequel_memes_tree.maximum() == "your move"
    assert prequel_memes_tree.minimum() == BACK_AWAY

    tree = BinarySearchTree()
    assert tree.maximum() is None
    assert tree.minimum() is None
    tree.insert(0)
    assert tree.minimum() == 0
    assert tree.maximum() == 0
    tree.insert(-5)
    assert tree.minimum() == -5
    assert tree.maximum() == 0
    tree.insert(5)
    assert tree.minimum() == -5
    assert tree.maximum() == 5


def test_floor_and_ceil(prequel_memes_tree):
    tree = prequel_memes_tree
    assert tree.floor("hello there") == "hello there"
    assert tree.floor("these are not the droids you're looking for") == "kill him"
    assert tree.floor("another death star") is None
    assert tree.floor("you fool") == "you fool"
    assert tree.floor("but i was going to tasche station") == BACK_AWAY
    assert tree.floor("you underestimate my power") == "you fool"
    assert tree.floor("your new empire") == "your move"
    assert tree.ceil("hello there") == "hello there"
    assert (
        tree.ceil("these are not the droids you're looking for")
        == "you are a bold one"
    )
    assert tree.ceil("another death star") == BACK_AWAY
    assert tree.ceil("you fool") == "you fool"
    assert tree.ceil("but i was going to tasche station") == "general kenobi"
    assert tree.ceil("you underestimate my power") == "your move"
    assert tree.ceil("your new empire") is None


def test_iterator(prequel_memes_tree):
    iterator = iter(prequel_memes_tree)
    assert next(iterator) == BACK_AWAY
    assert next(iterator) == "general kenobi"
    assert next(iterator) == "hello there"
    assert next(iterator) == "kill him"
    assert next(iterator) == "you are a bold one"
    assert next(iterator) == "you fool"
    assert next(iterator) == "your move"
    assert next(iterator, None) is None
    assert next(iterator, None) is None


def test_empty_tree_iterates_nothing():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert tree.floor(3) is None
    assert tree.ceil(3) is None
    assert not tree.search(3)


def test_duplicates_are_kept_in_order():
    tree = BinarySearchTree()
    for value in [3, 1, 3, 2, 1]:
        tree.insert(value)
    assert list(tree) == [1, 1, 2, 3, 3]