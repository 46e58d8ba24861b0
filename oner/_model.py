from collections import Counter
from logging import Logger
from logging import getLogger
from typing import Any, Hashable, Optional

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator
from sklearn.base import ClassifierMixin
from sklearn.utils.validation import check_is_fitted

from oner import _helpers
from oner._dataset import DatasetView
from oner._dataset import normalize_missing
from oner._induction import InductionResult
from oner._induction import InductionTimes
from oner._induction import RuleInducer
from oner._params import DEFAULT_PARAMS_VALUES
from oner._params import AlgorithmParams
from oner._params import MissingValuesPolicy
from oner._params import adjust_params_on_dataset
from oner._rule import Rule

logger: Logger = getLogger(__name__)


class OneRClassifier(ClassifierMixin, BaseEstimator):
    """Classifier based on the 1R algorithm (Holte, 1993). It picks a single
    attribute and produces a rule in the following form:
        IF attribute = v1 THEN class = c1
        IF attribute = v2 THEN class = c2
        ...

    Values not seen during training are classified as the most frequent class
    of the training data (0R).

    Numerical attributes are not discretized, each distinct number is a separate
    value.
    """

    def __init__(
        self,
        missing_values: MissingValuesPolicy = DEFAULT_PARAMS_VALUES["missing_values"],
        n_jobs: Optional[int] = DEFAULT_PARAMS_VALUES["n_jobs"],
    ):
        """
        Args:
            missing_values (MissingValuesPolicy, optional): Either "value" to treat
                missing values (None, NaN) as a separate attribute value or "error"
                to raise SchemaError when any of them is found. Defaults to
                DEFAULT_PARAMS_VALUES["missing_values"].
            n_jobs (Optional[int], optional): Number of threads used to evaluate
                attributes. Defaults to DEFAULT_PARAMS_VALUES["n_jobs"].
        """
        self.missing_values = missing_values
        self.n_jobs = n_jobs

    def fit(self, X: Any, y: Any, attribute_ids: Optional[list[Hashable]] = None):
        """Induces the rule on given data.

        Args:
            X (Any): dataframe or two dimensional array with attribute values
            y (Any): label column
            attribute_ids (Optional[list[Hashable]], optional): attributes to
                consider, in order of preference. Defaults to all columns.

        Returns:
            OneRClassifier: fitted classifier
        """
        if isinstance(X, pd.DataFrame):
            numerical_columns: list[Hashable] = _helpers.get_numerical_columns(X)
            if len(numerical_columns) > 0:
                logger.warning(
                    "Numerical columns %s will be treated as nominal ones, "
                    "consider discretizing them first",
                    numerical_columns,
                )
            self.feature_names_in_ = np.asarray(X.columns, dtype=object)
        elif hasattr(self, "feature_names_in_"):
            del self.feature_names_in_
        view = DatasetView.from_arrays(
            X, y, attribute_ids, missing_values=self.missing_values
        )
        params: AlgorithmParams = adjust_params_on_dataset(
            AlgorithmParams(missing_values=self.missing_values, n_jobs=self.n_jobs),
            len(view.attribute_ids),
        )
        inducer = RuleInducer(params)
        self.result_: InductionResult = inducer.induce(view)
        self.induction_times: InductionTimes = inducer.induction_times

        labels: list[Hashable] = list(view.labels())
        self.n_features_in_: int = len(view.examples[0].values)
        self.classes_: np.ndarray = np.asarray(list(dict.fromkeys(labels)))
        # most_common() keeps first seen order for equal counts
        self.default_class_: Hashable = Counter(labels).most_common(1)[0][0]
        return self

    @property
    def rule_(self) -> Rule:
        check_is_fitted(self, "result_")
        return self.result_.rule

    @property
    def attribute_(self) -> Hashable:
        check_is_fitted(self, "result_")
        return self.result_.attribute

    def predict(self, X: Any) -> np.ndarray:
        """Predicts class of each row with the induced rule.

        Args:
            X (Any): dataframe or two dimensional array with attribute values

        Returns:
            np.ndarray: predicted classes
        """
        check_is_fitted(self, "result_")
        predictions: dict[Hashable, Hashable] = self.rule_.predictions
        return np.asarray(
            [
                predictions.get(normalize_missing(value), self.default_class_)
                for value in self._get_attribute_values(X)
            ]
        )

    def _get_attribute_values(self, X: Any) -> list[Any]:
        attribute: Hashable = self.attribute_
        if isinstance(X, pd.DataFrame):
            return X[attribute].tolist()
        values: np.ndarray = np.asarray(X, dtype=object)
        if values.ndim != 2:
            raise ValueError(
                f"Expected two dimensional data, got array with shape {values.shape}"
            )
        if hasattr(self, "feature_names_in_"):
            # fitted on a dataframe, columns are matched by position
            attribute = self.feature_names_in_.tolist().index(attribute)
        return values[:, attribute].tolist()

    def __str__(self) -> str:
        if not hasattr(self, "result_"):
            return repr(self)
        return str(self.result_)
