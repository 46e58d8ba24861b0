from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from logging import Logger
from logging import getLogger
from typing import Any, Callable, Hashable, Iterable, Optional, Sequence, Union

from joblib import Parallel
from joblib import delayed

from oner._dataset import DatasetView
from oner._dataset import Example
from oner._params import DEFAULT_PARAMS_VALUES
from oner._params import AlgorithmParams
from oner._params import MissingValuesPolicy
from oner._params import check_params
from oner._rule import Rule
from oner._rule import build
from oner._scoring import score
from oner._tally import tally
from oner._timing import PerformanceTimer
from oner.exceptions import EmptyDatasetError
from oner.exceptions import NoAttributesError

Dataset = Union[DatasetView, Sequence[Example]]


@dataclass
class InductionTimes:
    tallying_time: timedelta = timedelta()
    selection_time: timedelta = timedelta()
    total_training_time: timedelta = timedelta()

    def __add__(self, other: InductionTimes) -> InductionTimes:
        if other == 0:
            return self
        if not isinstance(other, InductionTimes):
            raise TypeError(f"Cannot add {type(other)} to InductionTimes")
        return InductionTimes(
            tallying_time=self.tallying_time + other.tallying_time,
            selection_time=self.selection_time + other.selection_time,
            total_training_time=self.total_training_time + other.total_training_time,
        )

    def __radd__(self, other: InductionTimes) -> InductionTimes:
        return self.__add__(other)

    def __repr__(self) -> str:
        return (
            f"tallying_time={self.tallying_time.total_seconds()}, "
            f"selection_time={self.selection_time.total_seconds()}, "
            f"total_training_time={self.total_training_time.total_seconds()}"
        )


@dataclass(frozen=True)
class InductionResult:
    """Best attribute, its rule and the rule's training accuracy.

    ``candidates`` holds (attribute, accuracy) of every evaluated attribute in
    evaluation order.
    """

    attribute: Hashable
    rule: Rule
    accuracy: float
    candidates: tuple[tuple[Hashable, float], ...] = ()

    def __str__(self) -> str:
        return f"{self.rule}\n(accuracy: {self.accuracy:.4f})"


def evaluate_attribute(view: DatasetView, attribute: Hashable) -> tuple[Rule, float]:
    """Builds and scores the rule of a single attribute"""
    rule: Rule = build(tally(view, attribute))
    return rule, score(rule, len(view))


class RuleInducer:
    """Finds the one attribute whose rule classifies training examples best"""

    def __init__(self, params: Optional[AlgorithmParams] = None):
        if params is None:
            params = DEFAULT_PARAMS_VALUES.copy()
        check_params(params)
        self.params: AlgorithmParams = params
        self.logger: Logger = getLogger(self.__class__.__name__)
        self.induction_times: InductionTimes = InductionTimes()
        self._setup_timers()

    def induce(
        self,
        dataset: Dataset,
        attribute_ids: Optional[Iterable[Hashable]] = None,
    ) -> InductionResult:
        """Induces the 1R rule.

        Attributes are evaluated in the given order. When several of them reach
        the same accuracy, the first one wins.

        Args:
            dataset (Dataset): examples or a view over them. Missing values in a
                view are rejected if either the view or the inducer uses the
                "error" policy.
            attribute_ids (Optional[Iterable[Hashable]], optional): attributes to
                consider, class attribute excluded. Defaults to all attributes of
                the dataset.

        Raises:
            EmptyDatasetError: when dataset has no examples
            NoAttributesError: when there are no attributes to consider
            SchemaError: when an example has no value for one of the attributes
                and missing values are not allowed

        Returns:
            InductionResult: best attribute together with its rule and accuracy
        """
        view: DatasetView = self._get_view(dataset, attribute_ids)
        if len(view) == 0:
            raise EmptyDatasetError()
        if len(view.attribute_ids) == 0:
            raise NoAttributesError()
        self.logger.info(
            "Inducing rule from %d examples and %d attributes",
            len(view),
            len(view.attribute_ids),
        )
        candidates = self._evaluate(view)
        return self._select(view.attribute_ids, candidates)

    def _get_view(
        self, dataset: Dataset, attribute_ids: Optional[Iterable[Hashable]]
    ) -> DatasetView:
        if isinstance(dataset, DatasetView):
            # the stricter of the view's and the inducer's policies applies
            missing_values: MissingValuesPolicy = dataset.missing_values
            if self.params["missing_values"] == "error":
                missing_values = "error"
            if attribute_ids is None and missing_values == dataset.missing_values:
                return dataset
            return dataset.select(
                dataset.attribute_ids if attribute_ids is None else attribute_ids,
                missing_values=missing_values,
            )
        return DatasetView(
            dataset, attribute_ids, missing_values=self.params["missing_values"]
        )

    def _evaluate(self, view: DatasetView) -> list[tuple[Rule, float]]:
        n_jobs: Optional[int] = self.params["n_jobs"]
        if n_jobs is None or n_jobs == 1:
            return [evaluate_attribute(view, a) for a in view.attribute_ids]
        # results come back in submission order
        return Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(evaluate_attribute)(view, a) for a in view.attribute_ids
        )

    def _select(
        self,
        attribute_ids: Sequence[Hashable],
        candidates: Sequence[tuple[Rule, float]],
    ) -> InductionResult:
        best: Optional[tuple[Hashable, Rule, float]] = None
        for attribute, (rule, accuracy) in zip(attribute_ids, candidates):
            self.logger.debug(
                "Attribute %s: %d cases, accuracy %.4f",
                attribute,
                len(rule.cases),
                accuracy,
            )
            # strict comparison, first attribute wins ties
            if best is None or accuracy > best[2]:
                best = (attribute, rule, accuracy)
        attribute, rule, accuracy = best
        self.logger.info("Selected attribute %s with accuracy %.4f", attribute, accuracy)
        return InductionResult(
            attribute=attribute,
            rule=rule,
            accuracy=accuracy,
            candidates=tuple(
                (a, c[1]) for a, c in zip(attribute_ids, candidates)
            ),
        )

    def _setup_timers(self):
        self._setup_timer_for_method("induce", save_to="total_training_time")
        self._setup_timer_for_method("_evaluate", save_to="tallying_time")
        self._setup_timer_for_method("_select", save_to="selection_time")

    def _setup_timer_for_method(self, method_name: str, save_to: str):
        method: Callable = getattr(self, method_name, None)
        if method is None:
            raise ValueError(f"RuleInducer has no {method_name} method to time")

        def wrapped_method(*args, **kwargs):
            with PerformanceTimer() as timer:
                result: Any = method(*args, **kwargs)
            new_timedelta: timedelta = (
                getattr(self.induction_times, save_to) + timer.timedelta
            )
            setattr(self.induction_times, save_to, new_timedelta)
            return result

        setattr(self, method_name, wrapped_method)


def induce(
    dataset: Dataset,
    attribute_ids: Optional[Iterable[Hashable]] = None,
    *,
    missing_values: MissingValuesPolicy = DEFAULT_PARAMS_VALUES["missing_values"],
    n_jobs: Optional[int] = DEFAULT_PARAMS_VALUES["n_jobs"],
) -> InductionResult:
    """Induces the 1R rule: for every attribute builds a rule predicting the most
    frequent class of each attribute value and returns the most accurate one.

    Args:
        dataset (Dataset): examples or a view over them
        attribute_ids (Optional[Iterable[Hashable]], optional): attributes to
            consider in order of preference. Defaults to all attributes.
        missing_values (MissingValuesPolicy, optional): ``"value"`` treats missing
            values as a separate value, ``"error"`` raises SchemaError on them.
            Defaults to DEFAULT_PARAMS_VALUES["missing_values"].
        n_jobs (Optional[int], optional): number of threads evaluating attributes.
            Defaults to DEFAULT_PARAMS_VALUES["n_jobs"].

    Returns:
        InductionResult: best attribute together with its rule and accuracy
    """
    params = AlgorithmParams(missing_values=missing_values, n_jobs=n_jobs)
    return RuleInducer(params).induce(dataset, attribute_ids)
