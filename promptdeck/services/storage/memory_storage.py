import copy
import logging
from typing import Any

from promptdeck.services.storage.storage_base import BaseStorage

logger = logging.getLogger(__name__)


class MemoryStorage(BaseStorage):
    """
    Storage class that keeps values in a dict. Used by tests and ephemeral sessions.
    """

    def __init__(self):
        super().__init__()
        self._values: dict[str, Any] = {}

    def load(self, key: str, default: Any = None) -> Any:
        if key not in self._values:
            return default
        # callers get their own copy, as they would from a file
        return copy.deepcopy(self._values[key])

    def save(self, key: str, value: Any) -> bool:
        self._values[key] = copy.deepcopy(value)
        logger.debug("Saved key %s in memory", key)
        return True

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
