"""Filter registration and the boolean call contract.

Every public filter is declared with :func:`byte_filter`, which records it
under its family and converts rejected calls into a ``False`` result.
"""

import functools
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from engines.errors import FilterError, KernelNotImplementedError
from utils.constants import FAMILIES

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

BUFFER_PARAMETERS = ('src', 'src1', 'src2', 'dest')
GEOMETRY_PARAMETERS = ('length', 'rows', 'columns')


@dataclass(frozen=True)
class FilterInfo:
    """Registry entry for one filter."""

    name: str
    family: str
    func: Callable[..., bool]
    parameters: Tuple[str, ...]

    @property
    def options(self) -> Tuple[str, ...]:
        """Parameters that are neither buffers nor geometry."""
        skip = BUFFER_PARAMETERS + GEOMETRY_PARAMETERS
        return tuple(p for p in self.parameters if p not in skip)

    @property
    def sources(self) -> Tuple[str, ...]:
        return tuple(p for p in self.parameters if p.startswith('src'))


_REGISTRY: Dict[str, FilterInfo] = {}


def byte_filter(family: str) -> Callable[[F], F]:
    """Register a filter and give it the ``bool`` result contract.

    The decorated function signals rejection by raising a
    :class:`~engines.errors.FilterError`; the wrapper logs the reason and
    returns ``False``. Any other exception is a bug and propagates.
    """
    if family not in FAMILIES:
        raise ValueError(f"Unknown filter family: {family}")

    def decorator(func: F) -> F:
        name = func.__name__
        if name in _REGISTRY:
            raise ValueError(f"Filter already registered: {name}")

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> bool:
            try:
                func(*args, **kwargs)
            except KernelNotImplementedError as e:
                logger.debug("%s: %s", name, e)
                return False
            except FilterError as e:
                logger.debug("%s rejected (%s): %s", name, e.reason, e)
                return False
            return True

        parameters = tuple(inspect.signature(func).parameters)
        _REGISTRY[name] = FilterInfo(name, family, wrapper, parameters)
        return wrapper  # type: ignore[return-value]

    return decorator


def _load_builtin_filters() -> None:
    # Filter modules register themselves when the package is imported.
    import engines  # noqa: F401


def get_filter(name: str) -> FilterInfo:
    """Look up a filter by name."""
    _load_builtin_filters()
    try:
        return _REGISTRY[name]
    except KeyError:
        raise ValueError(f"Unknown filter: {name}") from None


def list_filters(family: Optional[str] = None) -> List[FilterInfo]:
    """All registered filters, optionally restricted to one family."""
    _load_builtin_filters()
    if family is not None and family not in FAMILIES:
        raise ValueError(f"Unknown filter family: {family}")
    return [info for info in _REGISTRY.values()
            if family is None or info.family == family]
