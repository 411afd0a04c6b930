import pytest

from gumble.events import (
    ChannelChangeEvent,
    ChannelChangeType,
    DisconnectType,
    PermissionDeniedType,
    ServerConfigEvent,
    TextMessageEvent,
    UserChangeEvent,
    UserChangeType,
)
from gumble.user import User


@pytest.mark.parametrize("flag", list(UserChangeType)[1:])
def test_user_change_combined_has_each(flag):
    combined = UserChangeType(UserChangeType.CONNECTED | UserChangeType.CHANNEL | flag)
    assert combined.has(flag)
    assert combined.has(UserChangeType.CONNECTED)


def test_user_change_missing_flag():
    mask = UserChangeType(UserChangeType.NAME | UserChangeType.AUDIO)
    assert not mask.has(UserChangeType.KICKED)
    assert not mask.has(UserChangeType(UserChangeType.NAME | UserChangeType.KICKED))


def test_channel_change_has():
    mask = ChannelChangeType(ChannelChangeType.CREATED | ChannelChangeType.NAME)
    assert mask.has(ChannelChangeType.NAME)
    assert not mask.has(ChannelChangeType.REMOVED)


def test_disconnect_type_has_is_bitwise():
    assert DisconnectType.KICKED.has(DisconnectType.KICKED)
    assert DisconnectType.BANNED.has(DisconnectType.KICKED)
    assert not DisconnectType.KICKED.has(DisconnectType.BANNED)


def test_permission_denied_has():
    assert PermissionDeniedType.PERMISSION.has(PermissionDeniedType.PERMISSION)
    assert not PermissionDeniedType.PERMISSION.has(PermissionDeniedType.SUPER_USER)


def test_text_message_event_is_text_message():
    sender = User(session=2)
    event = TextMessageEvent(sender=sender, users=[User(session=6)], message="hey", client="c")
    assert event.recipients().sessions == [6]
    assert event.sender is sender
    assert event.client == "c"


def test_user_change_event_fields():
    user = User(session=1)
    event = UserChangeEvent(type=UserChangeType.DISCONNECTED | UserChangeType.KICKED, user=user)
    assert event.type.has(UserChangeType.KICKED)
    assert event.actor is None


def test_channel_change_event_default_type():
    assert ChannelChangeEvent().type == ChannelChangeType.NONE


def test_server_config_event_defaults_unset():
    event = ServerConfigEvent(maximum_users=10)
    assert event.maximum_users == 10
    assert event.welcome_message is None
    assert event.codec_opus is None