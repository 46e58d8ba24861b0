from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from oner._dataset import DatasetView


@dataclass(frozen=True)
class FrequencyTally:
    """Class occurrences per distinct value of a single attribute.

    Both values and classes within a value are kept in the order they were
    first seen while scanning the dataset.
    """

    attribute: Hashable
    counts: dict[Hashable, dict[Hashable, int]]

    @property
    def values(self) -> list[Hashable]:
        return list(self.counts)

    @property
    def total(self) -> int:
        return sum(sum(class_counts.values()) for class_counts in self.counts.values())

    def __len__(self) -> int:
        return len(self.counts)


def tally(view: DatasetView, attribute: Hashable) -> FrequencyTally:
    """Counts how many times each class occurs with each value of the attribute.

    Args:
        view (DatasetView): examples
        attribute (Hashable): attribute id

    Returns:
        FrequencyTally: value -> class -> count mapping
    """
    counts: dict[Hashable, dict[Hashable, int]] = {}
    for value, class_value in view.pairs(attribute):
        class_counts: dict[Hashable, int] = counts.setdefault(value, {})
        class_counts[class_value] = class_counts.get(class_value, 0) + 1
    return FrequencyTally(attribute=attribute, counts=counts)
