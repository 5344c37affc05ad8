from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BoundedValues:
    """
    The samples bracketing a query abscissa.

    Attributes:
        lower_bound_index (int): Index of the largest key not greater than the query,
            or 0 when the query lies below the first key.
        lower_bound_key (float): Key at ``lower_bound_index``.
        lower_bound_value (float): Value at ``lower_bound_index``.
        higher_bound_key (Optional[float]): Key at ``lower_bound_index + 1``, or None when the
            query is at or after the last key.
        higher_bound_value (Optional[float]): Value paired with ``higher_bound_key``.
    """
    lower_bound_index: int
    lower_bound_key: float
    lower_bound_value: float
    higher_bound_key: Optional[float] = None
    higher_bound_value: Optional[float] = None

    @property
    def has_higher_bound(self) -> bool:
        return self.higher_bound_key is not None
