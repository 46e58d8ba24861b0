import os
import pathlib

import pandas as pd

from oner import Example

dir_path: pathlib.Path = pathlib.Path(os.path.dirname(os.path.realpath(__file__)))


def read_dataset(
    dataset_name: str, label_column: str = "class"
) -> tuple[pd.DataFrame, pd.Series, pd.DataFrame, pd.Series]:
    base_path: pathlib.Path = dir_path / "datasets" / "classification" / dataset_name
    df_train: pd.DataFrame = pd.read_csv(base_path / "train.csv")
    df_test: pd.DataFrame = pd.read_csv(base_path / "test.csv")
    X_train, y_train = df_train.drop(label_column, axis=1), df_train[label_column]
    X_test, y_test = df_test.drop(label_column, axis=1), df_test[label_column]
    return X_train, y_train, X_test, y_test


def make_examples(
    attribute_names: list[str], rows: list[tuple]
) -> list[Example]:
    """Rows hold attribute values followed by the class label"""
    return [
        Example(label=row[-1], values=dict(zip(attribute_names, row[:-1])))
        for row in rows
    ]
