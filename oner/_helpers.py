from typing import Any, Hashable, Optional

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype
from pandas.api.types import is_numeric_dtype


def get_numerical_columns(df: pd.DataFrame) -> list[Hashable]:
    """Return names of numerical (non boolean) columns in given dataframe. 1R
    treats every distinct number as a separate value, so such columns usually
    should be discretized before induction.

    Args:
        df (pd.DataFrame): DataFrame

    Returns:
        list[Hashable]: list of names of numerical columns
    """
    return [
        column
        for column, dtype in df.dtypes.items()
        if is_numeric_dtype(dtype) and not is_bool_dtype(dtype)
    ]


def to_rows(
    X: Any, attribute_ids: Optional[list[Hashable]] = None
) -> tuple[list[Hashable], list[dict[Hashable, Any]]]:
    """Split tabular data into attribute ids and rows of attribute values.

    Args:
        X (Any): dataframe (attribute ids are column names) or two dimensional
            array-like (attribute ids are column indices)
        attribute_ids (Optional[list[Hashable]], optional): columns to keep.
            Defaults to all columns.

    Returns:
        tuple[list[Hashable], list[dict[Hashable, Any]]]: attribute ids and one
        attribute id to value mapping per row
    """
    if isinstance(X, pd.DataFrame):
        columns: list[Hashable] = list(X.columns)
        values: np.ndarray = X.to_numpy(dtype=object)
    else:
        values = np.asarray(X, dtype=object)
        if values.ndim != 2:
            raise ValueError(
                f"Expected two dimensional data, got array with shape {values.shape}"
            )
        columns = list(range(values.shape[1]))
    if attribute_ids is None:
        attribute_ids = columns
    unknown: list[Hashable] = [a for a in attribute_ids if a not in columns]
    if len(unknown) > 0:
        raise KeyError(f"Unknown attributes: {unknown}")
    rows: list[dict[Hashable, Any]] = [dict(zip(columns, row)) for row in values]
    return list(attribute_ids), rows


def to_labels(y: Any) -> list[Hashable]:
    if isinstance(y, (pd.Series, pd.DataFrame)):
        y = y.to_numpy(dtype=object)
    labels: np.ndarray = np.asarray(y, dtype=object)
    if labels.ndim == 2 and labels.shape[1] == 1:
        labels = labels[:, 0]
    if labels.ndim != 1:
        raise ValueError(
            f"Expected one dimensional labels, got array with shape {labels.shape}"
        )
    return labels.tolist()
