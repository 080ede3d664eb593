import pytest

from lstree.file_system_tree.tree_options import TreeOptions


def test_defaults():
    options = TreeOptions()
    assert options.max_leaf is None
    assert options.ignore_patterns == ()
    assert options.ignore_file_name == ".gitignore"


def test_ignore_patterns_stored_as_tuple():
    options = TreeOptions(ignore_patterns=["*.log", "tmp/"])  # type: ignore[arg-type]
    assert options.ignore_patterns == ("*.log", "tmp/")


@pytest.mark.parametrize("max_leaf", [0, -1, True, 2.5, 3.0, "3"])
def test_invalid_max_leaf(max_leaf):
    with pytest.raises(ValueError, match="max_leaf"):
        TreeOptions(max_leaf=max_leaf)


@pytest.mark.parametrize("name", ["", "sub/.gitignore"])
def test_invalid_ignore_file_name(name):
    with pytest.raises(ValueError, match="ignore_file_name"):
        TreeOptions(ignore_file_name=name)


def test_options_are_frozen():
    options = TreeOptions(max_leaf=5)
    with pytest.raises(AttributeError):
        options.max_leaf = 6  # type: ignore[misc]
