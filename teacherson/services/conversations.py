"""
Conversation grouping for the messages page.

The caller fetches every message involving the current user and these
functions reduce that flat list in memory. Nothing here does I/O. After a
message is sent the caller refetches the whole history and aggregates again;
there is no incremental update of a previous result.
"""

import logging
from typing import Dict, Iterable, List, Literal, Optional

from teacherson.schemas.message import ConversationSummary, Message

logger = logging.getLogger(__name__)

# "scan": on equal timestamps the message seen later in the input wins.
# "id": on equal timestamps the larger message id wins, independent of input order.
TieBreak = Literal["scan", "id"]


def counterparty_of(current_user_id: str, message: Message) -> Optional[str]:
    """Return the other side of `message` or None if the user is not part of it.

    A message the user sent to themselves has the user as counterparty.
    """
    if message.sender_id == current_user_id:
        return message.receiver_id
    if message.receiver_id == current_user_id:
        return message.sender_id
    return None


def _supersedes(candidate: Message, current: Message, tie_break: TieBreak) -> bool:
    if candidate.timestamp != current.timestamp:
        return candidate.timestamp > current.timestamp
    if tie_break == "id":
        return candidate.id > current.id
    return True


def aggregate_conversations(
    current_user_id: str,
    messages: Iterable[Message],
    tie_break: TieBreak = "scan",
) -> List[ConversationSummary]:
    """
    Reduce messages to one summary per counterparty.

    - Summaries come back in the order each counterparty is first seen in
      `messages`, not sorted by recency.
    - Each summary holds the message with the greatest timestamp exchanged
      with that counterparty; ties are settled by `tie_break`.
    - Messages that do not involve `current_user_id` are dropped.
    """
    if not current_user_id:
        raise ValueError("current_user_id is required")
    if tie_break not in ("scan", "id"):
        raise ValueError(f"Unknown tie_break mode: {tie_break!r}")

    latest: Dict[str, Message] = {}
    foreign = 0
    for message in messages:
        other = counterparty_of(current_user_id, message)
        if other is None:
            foreign += 1
            continue
        best = latest.get(other)
        # re-assigning an existing key keeps its first-insertion position
        if best is None or _supersedes(message, best, tie_break):
            latest[other] = message

    if foreign:
        logger.debug("Ignored %d message(s) not involving user %s", foreign, current_user_id)

    return [
        ConversationSummary(
            counterparty_id=other,
            last_message_content=message.content,
            last_message_timestamp=message.timestamp,
        )
        for other, message in latest.items()
    ]


def filter_thread(current_user_id: str, counterparty_id: str, messages: Iterable[Message]) -> List[Message]:
    """Messages exchanged between the two users, in input order."""
    if not current_user_id:
        raise ValueError("current_user_id is required")
    if not counterparty_id:
        raise ValueError("counterparty_id is required")
    pair = {current_user_id, counterparty_id}
    return [m for m in messages if {m.sender_id, m.receiver_id} == pair]
