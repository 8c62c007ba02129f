"""Ordered-section message builder used by the rule-based coach."""

from typing import List, Optional, Sequence

from ..models import MAX_ACTION_ITEMS, CoachingMessage, MessageSource, MessageType


# Used to pad morning briefings, in priority order
DEFAULT_FILLER_ACTIONS = (
    "Hydrate first: 500ml water before coffee.",
    "5-minute breathing exercise to anchor your day.",
    "Set your top-3 priorities before checking messages.",
    "Get sunlight exposure in the first hour of your day.",
    "A short walk after lunch boosts afternoon focus.",
)


def pad_action_items(
    triggered: Sequence[str],
    fillers: Sequence[str] = DEFAULT_FILLER_ACTIONS,
    limit: int = MAX_ACTION_ITEMS,
) -> List[str]:
    """
    Build the final action list.

    Triggered items come first, in the order they fired, and are cut at
    `limit`. Remaining slots are filled from `fillers` in priority order,
    skipping anything already in the list. The result has no duplicates and
    is shorter than `limit` only if the fillers run out.
    """
    actions: List[str] = []
    for item in triggered:
        if len(actions) >= limit:
            break
        if item not in actions:
            actions.append(item)

    for item in fillers:
        if len(actions) >= limit:
            break
        if item not in actions:
            actions.append(item)

    return actions


class MessageBuilder:
    """Collects content sections and triggered actions for one message."""

    def __init__(
        self,
        message_type: MessageType,
        separator: str = "\n\n",
        fillers: Optional[Sequence[str]] = None,
    ) -> None:
        self.message_type = message_type
        self.separator = separator
        self.fillers = tuple(fillers) if fillers is not None else ()
        self._sections: List[str] = []
        self._actions: List[str] = []

    def add_section(self, text: str) -> "MessageBuilder":
        self._sections.append(text)
        return self

    def add_action(self, text: str) -> "MessageBuilder":
        self._actions.append(text)
        return self

    @property
    def triggered_actions(self) -> List[str]:
        return list(self._actions)

    def build(self) -> CoachingMessage:
        """Join the sections and apply the action-item policy."""
        actions = pad_action_items(self._actions, self.fillers)
        return CoachingMessage(
            type=self.message_type,
            content=self.separator.join(self._sections),
            action_items=tuple(actions),
            source=MessageSource.RULE_BASED,
        )
