"""
Lazy sequence generator base classes and registry.

Contract:
- Construction validates parameters and positions the generator at the
  first element of its family. There is no separate start call.
- has_next() is True until the family is exhausted.
- advance() mutates the state in place to the next element.
- current() returns the current element. Sequence families return a
  read-only view of the internal array which the next advance() overwrites;
  copy it to keep it.
- advance()/current() after exhaustion raise ExhaustedSequence.
- Iterating a generator yields detached snapshots (int or tuple of int)
  and consumes it. Forward only, single pass.

ClassVars:
- KEY: Unique registry key (e.g., 'gray_code')
- DESCRIPTION: One line description of the family and its order
- PARAMS: Constructor parameter names, dtype excluded
- VALUE_KIND: 'integer' or 'sequence'
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Literal, Optional, Tuple, Union

import numpy as np

from . import config
from .dtypes import resolve_dtype
from .errors import ExhaustedSequence

logger = logging.getLogger(__name__)

ValueKind = Literal['integer', 'sequence']


class SequenceGenerator(ABC):
    """Base class for all generators."""

    KEY: ClassVar[str]
    DESCRIPTION: ClassVar[str] = ''
    PARAMS: ClassVar[Tuple[str, ...]] = ()
    VALUE_KIND: ClassVar[ValueKind]

    def __init__(self, dtype: Optional[Any] = None):
        self._dtype = resolve_dtype(dtype)
        self._exhausted = False
        self._log_exhaustion = bool(config.get('logging', 'log_exhaustion', True))

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def has_next(self) -> bool:
        """True while current() refers to an element of the family."""
        return not self._exhausted

    def advance(self) -> None:
        """
        Step to the next element.

        Raises:
            ExhaustedSequence: If the generator is already exhausted
        """
        self._require_live('advance')
        if not self._step():
            self._exhausted = True
            if self._log_exhaustion:
                logger.debug(f"{self.KEY}: exhausted after {self.count()} elements")

    def current(self):
        """
        Return the current element.

        Raises:
            ExhaustedSequence: If the generator is already exhausted
        """
        self._require_live('current')
        return self._value()

    @abstractmethod
    def count(self) -> int:
        """Total number of elements in the family."""
        pass

    @abstractmethod
    def params(self) -> Dict[str, Any]:
        """Construction parameters, dtype excluded."""
        pass

    @abstractmethod
    def _step(self) -> bool:
        """Move to the successor. Return False if there is none."""
        pass

    @abstractmethod
    def _value(self):
        pass

    @abstractmethod
    def _snapshot(self) -> Union[int, Tuple[int, ...]]:
        """Current element detached from the internal state."""
        pass

    def _require_live(self, operation: str) -> None:
        if self._exhausted:
            raise ExhaustedSequence(
                f"{self.KEY}: {operation}() called on an exhausted generator"
            )

    def __iter__(self) -> 'SequenceGenerator':
        return self

    def __next__(self) -> Union[int, Tuple[int, ...]]:
        if self._exhausted:
            raise StopIteration
        item = self._snapshot()
        self.advance()
        return item

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{self.__class__.__name__}({args}, dtype={self._dtype})"


class ScalarGenerator(SequenceGenerator):
    """Generator whose elements are integers held in a Python int."""

    VALUE_KIND: ClassVar[ValueKind] = 'integer'

    def __init__(self, dtype: Optional[Any] = None):
        super().__init__(dtype)
        self._n = 0

    def _value(self) -> np.integer:
        return self._dtype.type(self._n)

    def _snapshot(self) -> int:
        return self._n


class ArrayGenerator(SequenceGenerator):
    """Generator whose elements are integer vectors held in one numpy array."""

    VALUE_KIND: ClassVar[ValueKind] = 'sequence'

    def _bind_state(self, state: np.ndarray) -> None:
        """Take ownership of the state array and expose a read-only view."""
        self._state = state
        self._view = state.view()
        self._view.flags.writeable = False

    def _value(self) -> np.ndarray:
        return self._view

    def _snapshot(self) -> Tuple[int, ...]:
        return tuple(self._state.tolist())


# Registry
_REGISTRY: Dict[str, type] = {}
GENERATOR_REGISTRY = _REGISTRY  # Public alias for tests


def register_generator(cls: type) -> type:
    """
    Decorator to register a generator class.

    Raises:
        ValueError: If KEY is missing or duplicate
    """
    key = getattr(cls, 'KEY', None)
    if not key:
        raise ValueError(f"{cls.__name__} is missing KEY ClassVar")

    if key in _REGISTRY:
        raise ValueError(f"Duplicate generator KEY: {key}")

    _REGISTRY[key] = cls
    return cls


def get_generator(name: str) -> type:
    """
    Get a generator class by name.

    Raises:
        KeyError: If generator not found
    """
    if name not in _REGISTRY:
        raise KeyError(
            f"Unknown generator: {name}. Available: {list(_REGISTRY.keys())}"
        )
    return _REGISTRY[name]


def list_generators() -> List[str]:
    """Return sorted list of registered generator KEYs."""
    return sorted(_REGISTRY.keys())


def generator_exists(name: str) -> bool:
    """Check if a generator is registered."""
    return name in _REGISTRY


def create_generator(name: str, **params) -> SequenceGenerator:
    """Instantiate a registered generator with keyword parameters."""
    return get_generator(name)(**params)


def get_generator_info(name: str) -> Dict[str, Any]:
    """
    Get information about a generator.

    Returns:
        Dict with generator metadata
    """
    cls = get_generator(name)

    return {
        'key': cls.KEY,
        'class': cls.__name__,
        'description': cls.DESCRIPTION,
        'params': list(cls.PARAMS),
        'value_kind': cls.VALUE_KIND,
    }
