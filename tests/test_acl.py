from gumble.acl import (
    ACL,
    ACL_GROUP_EVERYONE,
    ACLGroup,
    ACLRule,
    ACLUser,
)
from gumble.channel import Channel
from gumble.permission import Permission


def _group(add=(), remove=(), inherited=()):
    return ACLGroup(
        name="admins",
        users_add={i: ACLUser(i) for i in add},
        users_remove={i: ACLUser(i) for i in remove},
        users_inherited={i: ACLUser(i) for i in inherited},
    )


def test_builtin_group_names():
    group = ACLGroup(name=ACL_GROUP_EVERYONE, users_add={1: ACLUser(1)})
    assert group.name == "all"
    assert group.contains(1) is True


def test_contains_added_user():
    assert _group(add=[5]).contains(5) is True


def test_contains_inherited_user():
    assert _group(inherited=[7]).contains(7) is True


def test_removed_user_not_contained():
    assert _group(add=[5], remove=[5]).contains(5) is False
    assert _group(inherited=[5], remove=[5]).contains(5) is False


def test_unknown_user_not_contained():
    assert _group(add=[1]).contains(2) is False


def test_rule_defaults():
    rule = ACLRule()
    assert rule.granted == Permission.NONE
    assert rule.denied == Permission.NONE
    assert rule.user is None and rule.group is None


def test_rule_permissions():
    rule = ACLRule(granted=Permission.SPEAK | Permission.ENTER)
    assert rule.granted.has(Permission.SPEAK)
    assert not rule.granted.has(Permission.KICK)


def test_acl_holds_channel_groups_and_rules():
    channel = Channel(id=3, name="Lobby")
    group = _group(add=[1])
    rule = ACLRule(group=group)
    acl = ACL(channel=channel, groups=[group], rules=[rule], inherits=True)
    assert acl.channel is channel
    assert acl.rules[0].group is acl.groups[0]
    assert acl.inherits is True


def test_acl_defaults_are_independent():
    first, second = ACL(), ACL()
    first.groups.append(_group())
    assert second.groups == []