"""Factory for creating dictionary loaders with registry pattern."""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Type, Union

from vecdump.dictionary.base import BaseDictionaryLoader, Dictionary
from vecdump.dictionary.exceptions import UnsupportedDictionarySourceError

logger = logging.getLogger(__name__)

# Registry to hold loader classes
_LOADER_REGISTRY: Dict[str, Type[BaseDictionaryLoader]] = {}

# Cache for loader instances
_LOADER_INSTANCES: Dict[str, BaseDictionaryLoader] = {}


def register_loader(name: str) -> Callable:
    """
    Decorator to register a dictionary loader class.

    Usage:
        @register_loader("text")
        class TextDictionaryLoader(BaseDictionaryLoader):
            ...
    """
    def decorator(cls: Type[BaseDictionaryLoader]) -> Type[BaseDictionaryLoader]:
        if name in _LOADER_REGISTRY:
            logger.warning(f"Overwriting existing loader: {name}")
        _LOADER_REGISTRY[name] = cls
        _LOADER_INSTANCES.pop(name, None)
        logger.debug(f"Registered loader: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_loaders() -> List[str]:
    """Return list of registered loader names."""
    return list(_LOADER_REGISTRY.keys())


def _get_loader_instance(name: str) -> BaseDictionaryLoader:
    if name not in _LOADER_INSTANCES:
        _LOADER_INSTANCES[name] = _LOADER_REGISTRY[name]()
    return _LOADER_INSTANCES[name]


class DictionaryLoaderFactory:
    """
    Factory that picks a dictionary loader for a source.

    Usage:
        dictionary = DictionaryLoaderFactory.load("dictionary.txt")

        # Sharded stores are addressed by glob pattern or directory
        dictionary = DictionaryLoaderFactory.load("out/dictionary.file-*")

        # Or force a loader
        dictionary = DictionaryLoaderFactory.load("out/dict-0", kind="sharded")
    """

    AUTO = "auto"

    @classmethod
    def get_loader(cls, source: Union[str, Path], kind: str = AUTO) -> BaseDictionaryLoader:
        """
        Get a loader for a dictionary source.

        Args:
            source: File path, directory or glob pattern
            kind: Registered loader name, or "auto" to detect

        Returns:
            Loader that can handle this source

        Raises:
            UnsupportedDictionarySourceError: If kind is unknown or no
                loader accepts the source
        """
        if kind != cls.AUTO:
            if kind not in _LOADER_REGISTRY:
                raise UnsupportedDictionarySourceError(
                    f"Unknown dictionary loader: {kind}. "
                    f"Available: {get_registered_loaders()}"
                )
            return _get_loader_instance(kind)

        for name in _LOADER_REGISTRY:
            loader = _get_loader_instance(name)
            if loader.can_load(source):
                return loader

        raise UnsupportedDictionarySourceError(
            f"No dictionary loader found for source: {source}"
        )

    @classmethod
    def load(cls, source: Union[str, Path], kind: str = AUTO) -> Dictionary:
        """Load a dictionary with the loader chosen for the source."""
        loader = cls.get_loader(source, kind)
        logger.info(f"Loading dictionary {source} with {loader.__class__.__name__}")
        return loader.load(source)
