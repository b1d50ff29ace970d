"""Search algorithms and value functions."""

from .action_policy import ActionPolicy
from .cancellation import CancellationToken
from .value_fn import StateValueFn
from .minimax_policy import MinimaxConfig, MinimaxPolicy, SearchCancelled, SearchResult

__all__ = [
    "ActionPolicy",
    "CancellationToken",
    "StateValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchCancelled",
    "SearchResult",
]
