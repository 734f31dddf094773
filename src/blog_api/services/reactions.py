"""Like/dislike toggle for a single (post, user) pair.

A user is in at most one of ``likes`` and ``dislikes``. Applying an action
first removes the user from the opposite list, then toggles membership in
the action's own list, which yields:

    neutral  + like    -> liked       neutral  + dislike -> disliked
    liked    + like    -> neutral     liked    + dislike -> disliked
    disliked + dislike -> neutral     disliked + like    -> liked
"""

from collections.abc import Sequence
from enum import Enum

from ..core.exceptions import BadRequestException


class ReactionAction(str, Enum):
    LIKE = "like"
    DISLIKE = "dislike"


class ReactionState(str, Enum):
    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"


def parse_action(value: str | None) -> ReactionAction:
    try:
        return ReactionAction(value)
    except ValueError:
        raise BadRequestException('Invalid action. Use "like" or "dislike"') from None


def reaction_state(user_id: int, likes: Sequence[int], dislikes: Sequence[int]) -> ReactionState:
    if user_id in likes:
        return ReactionState.LIKED
    if user_id in dislikes:
        return ReactionState.DISLIKED
    return ReactionState.NEUTRAL


def apply_reaction(
    user_id: int,
    action: ReactionAction,
    likes: Sequence[int],
    dislikes: Sequence[int],
) -> tuple[list[int], list[int]]:
    """Return new ``(likes, dislikes)`` lists after ``action`` by ``user_id``.

    The input sequences are not modified. Order of the remaining ids is kept
    and a newly added id goes to the end.
    """
    if action is ReactionAction.LIKE:
        own, opposite = list(likes), list(dislikes)
    else:
        own, opposite = list(dislikes), list(likes)

    opposite = [uid for uid in opposite if uid != user_id]
    if user_id in own:
        own = [uid for uid in own if uid != user_id]
    else:
        own.append(user_id)

    if action is ReactionAction.LIKE:
        return own, opposite
    return opposite, own
