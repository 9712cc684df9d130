"""
Holder for the currently selected prompt style.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from .catalog import DEFAULT_STYLE_NAME, PREDEFINED_STYLES
from .styles import PromptStyle
from ..exceptions import UnknownPromptStyleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleSnapshot:
    """The current style as of one read. ``version`` increases on every swap."""
    name: str
    style: PromptStyle
    version: int


class StyleRegistry:
    """Versioned, atomically swapped current prompt style.

    Pipeline runs call ``snapshot()`` once and pass the result along, so a
    style change never affects a run that has already started.
    """

    def __init__(self,
                 initial: str = DEFAULT_STYLE_NAME,
                 styles: Optional[Dict[str, PromptStyle]] = None):
        self._styles = dict(styles if styles is not None else PREDEFINED_STYLES)
        if initial not in self._styles:
            raise UnknownPromptStyleError(initial, self.available_styles())
        self._lock = threading.Lock()
        self._current = StyleSnapshot(name=initial, style=self._styles[initial], version=1)

    def available_styles(self) -> List[str]:
        return sorted(self._styles)

    def snapshot(self) -> StyleSnapshot:
        return self._current

    def select(self, name: str) -> StyleSnapshot:
        """Make the named catalog style current."""
        style = self._styles.get(name)
        if style is None:
            raise UnknownPromptStyleError(name, self.available_styles())
        return self._swap(name, style)

    def set_custom(self, style: PromptStyle, name: str = "custom") -> StyleSnapshot:
        """Make an ad-hoc style current without adding it to the catalog."""
        return self._swap(name, style)

    def _swap(self, name: str, style: PromptStyle) -> StyleSnapshot:
        with self._lock:
            previous = self._current
            self._current = StyleSnapshot(name=name, style=style, version=previous.version + 1)
        logger.info(f"Prompt style changed: {previous.name} -> {name} (version {self._current.version})")
        return self._current
