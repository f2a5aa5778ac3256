"""Actor Reuse Tracker: caps how often one actor can be the connection within a game."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from src.connection.rules import ACTOR_REUSE_CAP
from src.core.models import ActorId, CastMember


@dataclass(frozen=True)
class ReuseCheck:
    allowed: bool
    overused_actor_name: Optional[str] = None


def actor_usage(prior_common_casts: Iterable[list[CastMember]]) -> Counter[ActorId]:
    """Number of successful turns each actor connected. A turn counts once per distinct actor."""
    usage: Counter[ActorId] = Counter()
    for common_cast in prior_common_casts:
        usage.update({member.id for member in common_cast})
    return usage


def check_reuse(
    prior_common_casts: Iterable[list[CastMember]],
    candidate_common_cast: list[CastMember],
    cap: int = ACTOR_REUSE_CAP,
) -> ReuseCheck:
    """
    Decide if a successful guess may be credited with 'candidate_common_cast'.

    NOTE a failed guess (empty common cast) is never subject to this check.
    """
    if not candidate_common_cast:
        return ReuseCheck(allowed=True)

    usage = actor_usage(prior_common_casts)
    for member in candidate_common_cast:
        if usage[member.id] >= cap:
            return ReuseCheck(allowed=False, overused_actor_name=member.name)
    return ReuseCheck(allowed=True)
