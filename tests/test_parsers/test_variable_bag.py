import pytest

from optbag.parser import VariableBag


def test_empty_bag():
    bag = VariableBag()
    assert bag.input == []
    assert bag.as_dict() == {"input": []}
    assert "input" in bag
    assert bag.has("input")
    assert len(bag) == 1


def test_store_and_read():
    bag = VariableBag()
    bag.store("begin", 1)
    bag.append_input("file.txt")
    assert bag["begin"] == 1
    assert bag["input"] == ["file.txt"]
    assert bag.get("end") is None
    assert bag.get("end", 5) == 5
    assert bag.has("begin")
    assert not bag.has("end")
    assert list(bag) == ["input", "begin"]
    assert bag == {"input": ["file.txt"], "begin": 1}
    with pytest.raises(KeyError):
        bag["end"]


def test_false_is_a_stored_value():
    bag = VariableBag()
    bag.store("on", False)
    assert bag.has("on")


def test_reset():
    bag = VariableBag()
    bag.store("begin", 1)
    bag.append_input("x")
    bag.reset()
    assert bag.as_dict() == {"input": []}


def test_bags_are_independent():
    first, second = VariableBag(), VariableBag()
    first.append_input("x")
    first.store("a", 1)
    assert second.as_dict() == {"input": []}
