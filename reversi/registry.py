"""Name-based lookup for rules and agent constructors."""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

Factory = Callable[..., Any]


class Registry:
    """Maps ids to a factory plus the keyword arguments it is called with by default."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: Dict[str, Tuple[Factory, Dict[str, Any]]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def register(self, name: str, factory: Factory, **defaults: Any) -> None:
        if name in self._entries:
            raise ValueError(f"{self.kind} '{name}' is already registered")
        self._entries[name] = (factory, defaults)

    def entry(self, name: str) -> Tuple[Factory, Dict[str, Any]]:
        """Factory and a copy of its defaults."""
        try:
            factory, defaults = self._entries[name]
        except KeyError:
            raise KeyError(f"Unknown {self.kind} '{name}'; known: {', '.join(self.names())}") from None
        return factory, dict(defaults)

    def make(self, name: str, **overrides: Any) -> Any:
        factory, defaults = self.entry(name)
        defaults.update(overrides)
        return factory(**defaults)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._entries)


GAMES = Registry("game")
AGENTS = Registry("agent")


def make_game(game_id: str, **overrides: Any) -> Any:
    return GAMES.make(game_id, **overrides)


def make_agent(agent_id: str, **kwargs: Any) -> Any:
    return AGENTS.make(agent_id, **kwargs)

