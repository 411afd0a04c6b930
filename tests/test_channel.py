import pytest

from gumble.channel import Channel, Channels
from gumble.user import Users


def _add(channels, channel_id, name, parent):
    channel = channels.create(channel_id)
    channel.name = name
    channel.parent = parent
    if parent is not None:
        parent.children[channel_id] = channel
    return channel


@pytest.fixture
def tree():
    channels = Channels()
    root = _add(channels, 0, "Root", None)
    _add(channels, 1, "Child 1", root)
    child2 = _add(channels, 2, "Child 2", root)
    _add(channels, 3, "Child 2.1", child2)
    child22 = _add(channels, 4, "Child 2.2", child2)
    _add(channels, 5, "Child 2.2.1", child22)
    _add(channels, 6, "Child 3", root)
    return channels


def test_find_documented_path(tree):
    found = tree[0].find("Child 2", "Child 2.2", "Child 2.2.1")
    assert found is tree[5]
    assert found.name == "Child 2.2.1"


def test_channel_find_without_names_returns_self(tree):
    assert tree[2].find() is tree[2]


def test_channel_find_missing_returns_none(tree):
    assert tree[0].find("Child 2", "Nope") is None
    assert tree[0].find("Child 2.1") is None


def test_channels_find_from_root(tree):
    assert tree.find("Child 2", "Child 2.1") is tree[3]
    assert tree.find() is tree[0]


def test_channels_find_without_root():
    channels = Channels()
    channels.create(7)
    assert channels.find() is None
    assert channels.find("anything") is None


def test_is_root(tree):
    assert tree[0].is_root()
    assert not tree[4].is_root()


def test_create_initialises_empty_collections():
    channels = Channels()
    channel = channels.create(9)
    assert channels[9] is channel
    assert channel.id == 9
    assert isinstance(channel.children, Channels) and len(channel.children) == 0
    assert isinstance(channel.links, Channels) and len(channel.links) == 0
    assert isinstance(channel.users, Users) and len(channel.users) == 0
    assert channel.parent is None
    assert channel.description_hash is None


def test_create_overwrites_existing():
    channels = Channels()
    first = channels.create(3)
    first.name = "old"
    second = channels.create(3)
    assert channels[3] is second
    assert second is not first
    assert second.name == ""


def test_collections_not_shared_between_channels():
    a = Channel(id=1)
    b = Channel(id=2)
    a.children[5] = b
    assert 5 not in b.children
    assert a.users is not b.users