from gumble.channel import Channel
from gumble.textmessage import TextMessage
from gumble.user import User


def test_empty_message_has_no_recipients():
    recipients = TextMessage(message="hi").recipients()
    assert recipients.sessions == []
    assert recipients.channel_ids == []
    assert recipients.tree_ids == []


def test_recipients_carry_ids_in_order():
    users = [User(session=5), User(session=2)]
    channels = [Channel(id=3)]
    trees = [Channel(id=0), Channel(id=8)]
    message = TextMessage(users=users, channels=channels, trees=trees, message="hello")
    recipients = message.recipients()
    assert recipients.sessions == [5, 2]
    assert recipients.channel_ids == [3]
    assert recipients.tree_ids == [0, 8]


def test_sender_not_among_recipients():
    sender = User(session=11)
    message = TextMessage(sender=sender, users=[User(session=4)])
    assert message.recipients().sessions == [4]
    assert message.sender is sender


def test_default_lists_are_independent():
    first, second = TextMessage(), TextMessage()
    first.users.append(User(session=1))
    assert second.recipients().sessions == []