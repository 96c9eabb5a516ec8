from abc import ABC, abstractmethod
import os
from typing import Any, Optional
import promptdeck.data as data


class BaseStorage(ABC):
    """
    Base class for key-value storage of JSON-compatible values
    """

    def __init__(self, base_dir: Optional[str] = None):
        if base_dir is None:
            base_dir = os.path.dirname(data.__file__)
        self.base_dir = base_dir

    @abstractmethod
    def load(self, key: str, default: Any = None) -> Any:
        """
        Load the value stored under a key.

        Args:
            key (str): Storage key
            default (Any): Value returned when nothing is stored or the stored value cannot be read

        Returns:
            Any: The decoded value, or ``default``
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, key: str, value: Any) -> bool:
        """
        Store a value under a key. Best effort: failures are logged, never raised.

        Args:
            key (str): Storage key
            value (Any): JSON-compatible value

        Returns:
            bool: Whether the value was written
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError
