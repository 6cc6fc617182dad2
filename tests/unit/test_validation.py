"""Tests for configuration, root and directive validation."""

import numpy as np
import pytest

from focuswalk import (
    InvalidArgumentError,
    MoveDirection,
    NavigationConfig,
    NavigationError,
    UnsupportedOperationError,
    get_target,
)
from tests.unit.structure_fixtures import (
    Element,
    TextNode,
    accept_all,
    radio_group,
    role_filter,
    sample_tree,
)


@pytest.mark.parametrize(
    "direction",
    [MoveDirection.PARENT, MoveDirection.CHILD, MoveDirection.LAST_CHILD],
)
def test_hierarchical_directives_on_group_raise(direction):
    _, radios = radio_group()
    config = NavigationConfig(root=radios, filter=accept_all)
    with pytest.raises(UnsupportedOperationError, match=direction.name):
        get_target(config, radios[1], direction)


def test_hierarchical_directives_on_flat_container_raise():
    container, radios = radio_group()
    config = NavigationConfig(root=container, flat=True)
    with pytest.raises(UnsupportedOperationError):
        get_target(config, radios[0], MoveDirection.CHILD)


@pytest.mark.parametrize(
    "direction", [-1, 9, 2.0, True, "sideways", " NEXT ", object()]
)
def test_unrecognized_directive_raises(direction):
    tree = sample_tree()
    config = NavigationConfig(root=tree.root, filter=role_filter)
    with pytest.raises(InvalidArgumentError, match="unrecognized move directive"):
        get_target(config, tree["tree1"], direction)


@pytest.mark.parametrize("direction", [2, "next", "Next", np.int64(2)])
def test_directive_aliases_are_accepted(direction):
    tree = sample_tree()
    config = NavigationConfig(root=tree.root, filter=role_filter)
    assert get_target(config, tree["tree1"], direction) is tree["tree2"]


def test_missing_configuration_raises():
    with pytest.raises(InvalidArgumentError, match="configuration required"):
        get_target(None, None, None)


def test_missing_configuration_is_a_type_error():
    with pytest.raises(TypeError):
        get_target(None, None, None)


def test_empty_mapping_configuration_raises():
    with pytest.raises(InvalidArgumentError, match="root required"):
        get_target({}, None, None)


def test_configuration_without_root_raises():
    with pytest.raises(InvalidArgumentError):
        get_target(NavigationConfig(), None, None)


@pytest.mark.parametrize("root", [TextNode(), "tree", b"tree", 8, 1.5])
def test_non_structural_root_raises(root):
    with pytest.raises(InvalidArgumentError):
        get_target({"root": root}, None, None)


def test_unknown_configuration_key_raises():
    tree = sample_tree()
    with pytest.raises(InvalidArgumentError, match="Unsupported configuration key"):
        get_target({"root": tree.root, "wrap": True}, tree["tree1"], MoveDirection.NEXT)


def test_configuration_of_wrong_type_raises():
    tree = sample_tree()
    with pytest.raises(InvalidArgumentError):
        get_target([tree.root], tree["tree1"], MoveDirection.NEXT)


def test_tree_mode_rejects_sequence_root():
    _, radios = radio_group()
    config = NavigationConfig(root=radios, flat=False)
    with pytest.raises(InvalidArgumentError, match="structural root"):
        get_target(config, radios[0], MoveDirection.NEXT)


def test_noop_checks_precede_directive_validation():
    tree = sample_tree()
    config = NavigationConfig(root=tree.root)
    assert get_target(config, None, -1) is None
    _, radios = radio_group()
    assert get_target(NavigationConfig(root=radios), None, MoveDirection.PARENT) is None


def test_root_validation_precedes_noop_checks():
    with pytest.raises(InvalidArgumentError):
        get_target({"root": TextNode()}, None, None)


def test_start_outside_root_raises():
    tree = sample_tree()
    other = sample_tree()
    config = NavigationConfig(root=tree.root, filter=role_filter)
    with pytest.raises(InvalidArgumentError, match="not inside"):
        get_target(config, other["tree1"], MoveDirection.NEXT)


def test_start_outside_group_raises():
    _, radios = radio_group()
    _, others = radio_group()
    with pytest.raises(InvalidArgumentError):
        get_target(NavigationConfig(root=radios), others[0], MoveDirection.NEXT)


def test_parent_cycle_is_reported():
    tree = sample_tree()
    first = Element("loop-a")
    second = Element("loop-b")
    first.parent = second
    second.parent = first
    with pytest.raises(InvalidArgumentError, match="cycle"):
        get_target(NavigationConfig(root=tree.root), first, MoveDirection.NEXT)


def test_filter_must_return_a_verdict():
    tree = sample_tree()
    config = NavigationConfig(root=tree.root, filter=lambda item: 1)
    with pytest.raises(InvalidArgumentError, match="Verdict"):
        get_target(config, tree["tree1"], MoveDirection.NEXT)


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, NavigationError)
    assert issubclass(InvalidArgumentError, TypeError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(UnsupportedOperationError, NavigationError)
    assert issubclass(UnsupportedOperationError, ValueError)
