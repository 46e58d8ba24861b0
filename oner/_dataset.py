"""Read-only view over labeled examples used by the rule induction."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Iterator, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from oner import _helpers
from oner._params import DEFAULT_PARAMS_VALUES
from oner._params import MISSING_VALUES_POLICIES
from oner._params import MissingValuesPolicy
from oner.exceptions import SchemaError


class _Missing:
    """Marker of an attribute without value. Compares equal only to itself."""

    _instance: Optional[_Missing] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    if value is None or value is MISSING or value is pd.NA or value is pd.NaT:
        return True
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def normalize_missing(value: Any) -> Any:
    """Map every flavour of "no value" (None, NaN, pandas NA) to MISSING so that
    all of them end up as one discrete value.
    """
    return MISSING if is_missing(value) else value


@dataclass(frozen=True)
class Example:
    """Single labeled row: class label and attribute id to value mapping."""

    label: Hashable
    values: Mapping[Hashable, Hashable]

    def __post_init__(self):
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash((self.label, frozenset(self.values.items())))


class DatasetView:
    """Read-only view over a sequence of examples restricted to the attributes
    under consideration.

    Attribute ids keep the order they were given in (duplicates dropped). When
    no ids are given, all attributes are used in the order they first appear in
    examples.

    Missing values are handled according to ``missing_values`` policy:

    * ``"value"`` - absent attribute, None or NaN is the :data:`MISSING` value,
    * ``"error"`` - any of them raises :class:`SchemaError` when the view is
      created.

    Examples without a class label (None, NaN) are rejected with ValueError.
    """

    def __init__(
        self,
        examples: Iterable[Example],
        attribute_ids: Optional[Iterable[Hashable]] = None,
        missing_values: MissingValuesPolicy = DEFAULT_PARAMS_VALUES["missing_values"],
    ):
        if missing_values not in MISSING_VALUES_POLICIES:
            raise ValueError(
                f"Unknown missing values policy: {missing_values!r}, "
                f"expected one of {MISSING_VALUES_POLICIES}"
            )
        self._examples: tuple[Example, ...] = tuple(examples)
        self.missing_values: MissingValuesPolicy = missing_values
        if attribute_ids is None:
            attribute_ids = (
                attribute
                for example in self._examples
                for attribute in example.values
            )
        self._attribute_ids: tuple[Hashable, ...] = tuple(dict.fromkeys(attribute_ids))
        self._check_labels()
        if missing_values == "error":
            self._check_schema()

    @classmethod
    def from_arrays(
        cls,
        X: Any,
        y: Any,
        attribute_ids: Optional[Sequence[Hashable]] = None,
        missing_values: MissingValuesPolicy = DEFAULT_PARAMS_VALUES["missing_values"],
    ) -> DatasetView:
        """Creates a view from tabular data and class labels.

        Args:
            X (Any): dataframe or two dimensional array-like with attribute values
            y (Any): class label of each row
            attribute_ids (Optional[Sequence[Hashable]], optional): columns to
                consider, column names for dataframes and column indices otherwise.
                Defaults to all columns.
            missing_values (MissingValuesPolicy, optional): missing values policy.
                Defaults to DEFAULT_PARAMS_VALUES["missing_values"].

        Returns:
            DatasetView: view over examples built from rows of ``X``
        """
        attribute_ids, rows = _helpers.to_rows(X, attribute_ids)
        labels: list[Hashable] = _helpers.to_labels(y)
        if len(rows) != len(labels):
            raise ValueError(
                f"Got {len(rows)} rows but {len(labels)} class labels"
            )
        examples = [
            Example(label=label, values=row) for row, label in zip(rows, labels)
        ]
        return cls(examples, attribute_ids, missing_values=missing_values)

    @property
    def attribute_ids(self) -> tuple[Hashable, ...]:
        return self._attribute_ids

    @property
    def examples(self) -> tuple[Example, ...]:
        return self._examples

    def select(
        self,
        attribute_ids: Iterable[Hashable],
        missing_values: Optional[MissingValuesPolicy] = None,
    ) -> DatasetView:
        """Returns a view over the same examples considering given attributes.
        Keeps this view's missing values policy unless another one is given.
        """
        if missing_values is None:
            missing_values = self.missing_values
        return DatasetView(self._examples, attribute_ids, missing_values=missing_values)

    def pairs(self, attribute: Hashable) -> Iterator[tuple[Hashable, Hashable]]:
        """Yields (attribute value, class label) pair of every example in dataset
        order. Each call starts a new pass over examples.
        """
        for example in self._examples:
            value = example.values.get(attribute, MISSING)
            yield normalize_missing(value), example.label

    def labels(self) -> Iterator[Hashable]:
        return (example.label for example in self._examples)

    def _check_labels(self):
        for index, example in enumerate(self._examples):
            if is_missing(example.label):
                raise ValueError(f"Example {index} has no class label")

    def _check_schema(self):
        for index, example in enumerate(self._examples):
            for attribute in self._attribute_ids:
                if is_missing(example.values.get(attribute, MISSING)):
                    raise SchemaError(attribute, index)

    def __len__(self) -> int:
        return len(self._examples)

    def __repr__(self) -> str:
        return (
            f"DatasetView(examples={len(self)}, "
            f"attribute_ids={list(self._attribute_ids)}, "
            f"missing_values={self.missing_values!r})"
        )
