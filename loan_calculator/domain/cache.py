"""Per-calculator memo table for derived loan quantities"""

from functools import wraps
from typing import Callable, Dict, Optional, Tuple, Union

from loan_calculator.domain.models import Quantity

# Key for values that do not vary by month
WHOLE_SCHEDULE = "ALL"

CacheKey = Tuple[Quantity, Union[int, str]]


class QuantityCache:
    """Mapping of (quantity, month) to a computed value"""

    def __init__(self) -> None:
        self._values: Dict[CacheKey, float] = {}

    def get(self, quantity: Quantity, key: Union[int, str]) -> Optional[float]:
        return self._values.get((quantity, key))

    def put(self, quantity: Quantity, key: Union[int, str], value: float) -> None:
        self._values[(quantity, key)] = value

    def has(self, quantity: Quantity, key: Union[int, str]) -> bool:
        return (quantity, key) in self._values

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)


def memoized(quantity: Quantity, first_month: int = 1, schedule_constant: bool = False) -> Callable:
    """
    Cache a calculator method's result in the instance's QuantityCache.

    Month-dependent methods take the month as their only argument; it is
    range-checked against first_month..term_months before the lookup.
    Schedule-constant methods take no argument and are stored under
    WHOLE_SCHEDULE; callers may still pass a month, which is checked and
    otherwise ignored.

    The decorated object must expose `cache` (QuantityCache) and
    `check_month(month, first_month)`.
    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(self, month: Optional[int] = None) -> float:
            if month is None:
                if not schedule_constant:
                    raise TypeError(f"{method.__name__}() missing required argument: 'month'")
            else:
                self.check_month(month, first_month)

            key = WHOLE_SCHEDULE if schedule_constant else month
            cached = self.cache.get(quantity, key)
            if cached is not None:
                return cached

            value = method(self) if schedule_constant else method(self, month)
            self.cache.put(quantity, key, value)
            return value

        return wrapper

    return decorator
