"""Abstract base class for term dictionary loaders."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

# dictionary[i] is the term assigned index i; unassigned slots are None
Dictionary = List[Optional[str]]


class BaseDictionaryLoader(ABC):
    """
    Abstract base class that all dictionary loaders must implement.

    Ensures consistent interface across:
    - Flat text dictionary files
    - Sharded binary record stores
    """

    @abstractmethod
    def load(self, source: Union[str, Path]) -> Dictionary:
        """
        Load a term dictionary.

        Args:
            source: File path or glob pattern

        Returns:
            List where entry i is the term with index i

        Raises:
            FileNotFoundError: If the source doesn't exist
            DictionaryFormatError: If the source cannot be parsed
        """
        pass

    @abstractmethod
    def can_load(self, source: Union[str, Path]) -> bool:
        """Check if this loader can handle the given source."""
        pass
