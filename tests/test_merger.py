"""Tests for result merging."""

from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from hydratree import HydratedModel, Node
from hydratree.core import merge, merge_layer, merge_root


async def noop(value=None):
    return value


@pytest.fixture
def root():
    return Node('movie', noop)


def test_root_mapping_spread_to_top_level(root):
    model = merge_root(root, {'id': 1, 'title': 'Movie title'})

    assert isinstance(model, HydratedModel)
    assert model == {'id': 1, 'title': 'Movie title'}


def test_root_dataclass_spread(root):
    @dataclass
    class Movie:
        id: int
        title: str

    model = merge_root(root, Movie(2, 'Other'))
    assert model == {'id': 2, 'title': 'Other'}


def test_root_namespace_spread(root):
    model = merge_root(root, SimpleNamespace(id=3))
    assert model == {'id': 3}


def test_root_scalar_kept_under_root_name(root):
    assert merge_root(root, 42) == {'movie': 42}
    assert merge_root(root, [1, 2]) == {'movie': [1, 2]}


def test_root_output_not_aliased(root):
    output = {'id': 1}
    model = merge_root(root, output)
    model['extra'] = True

    assert output == {'id': 1}


def test_merge_returns_new_model():
    original = HydratedModel({'id': 1})
    merged = merge(original, 'progress', {'watched': '2%'})

    assert merged == {'id': 1, 'progress': {'watched': '2%'}}
    assert original == {'id': 1}
    assert isinstance(merged, HydratedModel)


def test_merge_layer_adds_every_node(root):
    images = Node('images', noop, root)
    progress = Node('progress', noop, root)
    original = HydratedModel({'id': 1})

    merged = merge_layer(original, [(images, ['a.jpg']), (progress, None)])

    assert merged == {'id': 1, 'images': ['a.jpg'], 'progress': None}
    assert original == {'id': 1}


def test_attribute_access():
    model = HydratedModel({'three': {'value': 3}})

    assert model.three == {'value': 3}
    with pytest.raises(AttributeError):
        model.four


def test_attribute_listing_and_repr():
    model = HydratedModel({'value': 20})

    assert 'value' in dir(model)
    assert repr(model) == "HydratedModel({'value': 20})"


def test_copy_keeps_attribute_access():
    model = HydratedModel({'three': {'value': 3}})
    copied = model.copy()

    assert isinstance(copied, HydratedModel)
    assert copied.three == {'value': 3}
    assert copied is not model
