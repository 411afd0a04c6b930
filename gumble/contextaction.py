"""Context actions added by server-side plugins."""

from dataclasses import dataclass
from enum import IntFlag


class ContextActionType(IntFlag):
    """The contexts in which a context action can be triggered."""

    NONE = 0
    SERVER = 0x01
    CHANNEL = 0x02
    USER = 0x04


@dataclass(eq=False)
class ContextAction:
    """A triggerable item added by a server-side plugin."""

    name: str
    type: ContextActionType = ContextActionType.NONE
    label: str = ""
    """The user-friendly description of the action."""


class ContextActions(dict):
    """A mapping of action names to context actions."""

    def create(self, action: str) -> ContextAction:
        """Add a new context action with the given name, replacing any existing one."""
        context_action = ContextAction(name=action)
        self[action] = context_action
        return context_action