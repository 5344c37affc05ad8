import logging
from typing import Dict, List, Type

from pyinterplib.algorithms.linear_interpolator import LinearInterpolator1D
from pyinterplib.core.exceptions import InvalidInputError
from pyinterplib.core.interfaces import Interpolator1D
from pyinterplib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)

LINEAR_KEY = 'linear'

_INTERPOLATORS: Dict[str, Type[Interpolator1D]] = {
    LINEAR_KEY: LinearInterpolator1D,
}


def available_interpolators() -> List[str]:
    """Names accepted by ``get_interpolator``."""
    return sorted(_INTERPOLATORS)


def get_interpolator(name: str) -> Interpolator1D:
    """Return a new interpolator for a registered name (case-insensitive)."""
    if not isinstance(name, str):
        raise InvalidInputError(f"Interpolator name must be a string, got {type(name).__name__}")
    key = name.strip().lower()
    if key not in _INTERPOLATORS:
        raise InvalidInputError(ErrorMessages.UNKNOWN_INTERPOLATOR.format(
            name=name, available=", ".join(available_interpolators())))
    logger.debug("Resolved interpolator '%s' -> %s", name, _INTERPOLATORS[key].__name__)
    return _INTERPOLATORS[key]()
