"""
Registry of available thinkers.

The registry is an ordinary object created at startup and handed to whatever
builds the match; there is no process-wide instance.
"""

from typing import Callable, Dict, List, Optional

from color_shape_links.config import MatchConfig
from color_shape_links.exceptions import UnknownThinkerError
from color_shape_links.thinkers.base import AbstractThinker
from color_shape_links.thinkers.human import HumanThinker, InputSource, KeyboardInput
from color_shape_links.thinkers.minimax import MinimaxThinker

ThinkerFactory = Callable[[MatchConfig], AbstractThinker]


class ThinkerRegistry:
    """Maps thinker names to factories ``(config) -> thinker``."""

    def __init__(self):
        self._factories: Dict[str, ThinkerFactory] = {}

    def register(self, name: str, factory: ThinkerFactory) -> None:
        if name in self._factories:
            raise ValueError(f"Thinker '{name}' is already registered")
        self._factories[name] = factory

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def create(
        self,
        name: str,
        config: Optional[MatchConfig] = None,
        params: str = ''
    ) -> AbstractThinker:
        """
        Build and configure a thinker.

        Raises:
            UnknownThinkerError: If ``name`` is not registered
        """
        try:
            factory = self._factories[name]
        except KeyError:
            raise UnknownThinkerError(name, self.names()) from None
        thinker = factory(config or MatchConfig())
        thinker.configure(params)
        return thinker


def default_registry(input_source: Optional[InputSource] = None) -> ThinkerRegistry:
    """
    Registry with the built-in thinkers.

    Every human thinker it creates reads from the same ``input_source``. When
    none is given, one ``KeyboardInput`` on stdin is started on first use.
    """
    def create_human(config: MatchConfig) -> HumanThinker:
        nonlocal input_source
        if input_source is None:
            input_source = KeyboardInput()
        return HumanThinker(config, input_source=input_source)

    registry = ThinkerRegistry()
    registry.register('minimax', MinimaxThinker)
    registry.register('human', create_human)
    return registry
