"""
Aggregate query resolution.

Maps a user's aggregate request onto the attributes present in the data.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Union

from ..core import constants
from ..core.exceptions import InvalidAggregate

AggregateSelection = Union[str, Sequence[str], None]


def parse_aggregates(aggregate: AggregateSelection) -> List[str]:
    """
    Parse and validate a comma-separated aggregate string.

    Args:
        aggregate: e.g. "mean, max"; a list of names is accepted too.
                   Empty or None selects every aggregate.

    Returns:
        A new list of aggregate names

    Raises:
        InvalidAggregate: If any name is outside the vocabulary
    """
    if not aggregate:
        return list(constants.DEFAULT_AGGREGATES)

    if isinstance(aggregate, str):
        names = [value.strip() for value in aggregate.split(",")]
    else:
        names = [str(value).strip() for value in aggregate]

    invalid = [name for name in names if name not in constants.DEFAULT_AGGREGATES]
    if invalid:
        raise InvalidAggregate(
            f"Invalid aggregate values provided: {', '.join(repr(name) for name in invalid)}"
        )

    return names


def resolve_query(
    attributes: Sequence[str],
    query: Optional[Mapping[str, AggregateSelection]],
    aggregates: AggregateSelection = None
) -> Dict[str, List[str]]:
    """
    Resolve which aggregates to compute for which attributes.

    Args:
        attributes: Attributes discovered in the data
        query: Per-attribute aggregate selection (selective mode), or None
        aggregates: Aggregates for every attribute (uniform mode, used when query is None)

    Returns:
        Mapping of attribute name to validated aggregate names

    Raises:
        InvalidAggregate: If any requested name is invalid (nothing is partially applied)
    """
    if query is None:
        names = parse_aggregates(aggregates)
        return {attribute: list(names) for attribute in attributes}

    return {attribute: parse_aggregates(selection) for attribute, selection in query.items()}
