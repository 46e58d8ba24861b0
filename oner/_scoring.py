from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterable, Optional

from oner._dataset import normalize_missing
from oner.exceptions import EmptyDatasetError

if TYPE_CHECKING:
    from oner._rule import Rule


def score(rule: Rule, total_examples: int) -> float:
    """Accuracy of the rule: correctly classified examples over all examples.

    Args:
        rule (Rule): rule
        total_examples (int): number of examples the rule was built from

    Raises:
        EmptyDatasetError: when there are no examples, accuracy is undefined then

    Returns:
        float: accuracy from [0, 1] interval
    """
    if total_examples == 0:
        raise EmptyDatasetError("Cannot score a rule on an empty dataset")
    correct: int = rule.correct
    if total_examples < correct:
        raise ValueError(
            f"Rule classifies {correct} examples correctly, "
            f"more than the total of {total_examples}"
        )
    return correct / total_examples


def interpret(rule: Rule, attribute_value: Hashable) -> Optional[Hashable]:
    """Returns class predicted by the rule for given value or None if the rule
    has no case for it.
    """
    return rule.predictions.get(normalize_missing(attribute_value))


def evaluate(
    rule: Rule, attribute_values: Iterable[Hashable], classes: Iterable[Hashable]
) -> float:
    """Evaluates the rule on (possibly unseen) data. Values the rule has no case
    for count as misclassified.

    Args:
        rule (Rule): rule
        attribute_values (Iterable[Hashable]): value of the rule's attribute for
            each example
        classes (Iterable[Hashable]): true class of each example

    Raises:
        EmptyDatasetError: when there are no examples

    Returns:
        float: accuracy from [0, 1] interval
    """
    attribute_values = list(attribute_values)
    classes = list(classes)
    if len(attribute_values) != len(classes):
        raise ValueError(
            f"Got {len(attribute_values)} attribute values "
            f"but {len(classes)} classes"
        )
    if len(classes) == 0:
        raise EmptyDatasetError("Cannot evaluate a rule on an empty dataset")
    predictions: dict[Hashable, Hashable] = rule.predictions
    correct: int = 0
    for value, class_value in zip(attribute_values, classes):
        value = normalize_missing(value)
        if value in predictions and predictions[value] == class_value:
            correct += 1
    return correct / len(classes)
