"""
Aggregate strategies for weather attribute series.

Each strategy reduces an ordered sequence of numbers to a single number
(or, for mode, to the list of most frequent values). The AggregationContext
applies the current strategy and normalizes every result to 2 decimals.
"""

import logging
import math
import statistics
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Union, Tuple, Iterable

from ..core import constants
from ..core.exceptions import EmptySeriesForAggregate

AggregateResult = Union[float, List[float]]


def round_half_up(value: float, decimals: int = constants.AGGREGATE_DECIMALS) -> float:
    """
    Round to a fixed number of decimals, halves away from zero.

    Works on the exact binary value of the float, so 1.005 rounds to 1.0
    while 0.125 rounds to 0.13. Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class AggregateStrategy(ABC):
    """Base class for a named statistical reducer."""

    name: str = ""

    @abstractmethod
    def calculate(self, values: Sequence[float]) -> AggregateResult:
        """Reduce a non-empty sequence of numbers."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SumStrategy(AggregateStrategy):
    name = "sum"

    def calculate(self, values: Sequence[float]) -> float:
        return sum(values)


class MeanStrategy(AggregateStrategy):
    name = "mean"

    def calculate(self, values: Sequence[float]) -> float:
        return statistics.mean(values)


class ModeStrategy(AggregateStrategy):
    """All values tied at the highest frequency, in ascending order."""

    name = "mode"

    def calculate(self, values: Sequence[float]) -> List[float]:
        return sorted(statistics.multimode(values))


class MinStrategy(AggregateStrategy):
    name = "min"

    def calculate(self, values: Sequence[float]) -> float:
        return min(values)


class MaxStrategy(AggregateStrategy):
    name = "max"

    def calculate(self, values: Sequence[float]) -> float:
        return max(values)


class MedianStrategy(AggregateStrategy):
    name = "median"

    def calculate(self, values: Sequence[float]) -> float:
        return statistics.median(values)


class VarianceStrategy(AggregateStrategy):
    """Population variance (divides by N)."""

    name = "variance"

    def calculate(self, values: Sequence[float]) -> float:
        return statistics.pvariance(values)


class StandardDeviationStrategy(AggregateStrategy):
    name = "standard_deviation"

    def calculate(self, values: Sequence[float]) -> float:
        return math.sqrt(VarianceStrategy().calculate(values))


# Fixed registry; selected strategies are always applied in this order
STRATEGIES: Tuple[AggregateStrategy, ...] = (
    SumStrategy(),
    MeanStrategy(),
    ModeStrategy(),
    MinStrategy(),
    MaxStrategy(),
    MedianStrategy(),
    VarianceStrategy(),
    StandardDeviationStrategy(),
)


def get_selected_strategies(aggregates: Iterable[str]) -> List[AggregateStrategy]:
    """
    Get the registered strategies matching the requested aggregate names.

    Args:
        aggregates: Requested aggregate names

    Returns:
        Matching strategies in registry order (duplicates collapse)
    """
    requested = set(aggregates)
    return [strategy for strategy in STRATEGIES if strategy.name in requested]


class AggregationContext:
    """Applies one strategy at a time and rounds its output to 2 decimals."""

    def __init__(
        self,
        strategy: Optional[AggregateStrategy] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize aggregation context.

        Args:
            strategy: Initial strategy (defaults to mean)
            logger: Logger instance
        """
        self.strategy = strategy or MeanStrategy()
        self.logger = logger or logging.getLogger(__name__)

    def set_strategy(self, strategy: AggregateStrategy) -> None:
        self.strategy = strategy

    def execute(self, values: Sequence[float]) -> AggregateResult:
        """
        Apply the current strategy.

        Args:
            values: Attribute series

        Returns:
            Rounded number, or list of rounded numbers for mode

        Raises:
            EmptySeriesForAggregate: If values is empty
        """
        if len(values) == 0:
            raise EmptySeriesForAggregate(
                f"Cannot calculate {self.strategy.name} of an empty series"
            )

        result = self.strategy.calculate(values)
        if isinstance(result, list):
            return [round_half_up(value) for value in result]
        return round_half_up(result)
