from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Hashable, Optional

from oner._scoring import score
from oner._tally import FrequencyTally


@dataclass(frozen=True)
class Case:
    """Single "IF attribute = value THEN class" condition of a rule."""

    attribute_value: Hashable
    predicted_class: Hashable
    correct: int
    incorrect: int

    @property
    def covered(self) -> int:
        return self.correct + self.incorrect


@dataclass(frozen=True)
class Rule:
    """Rule of a single attribute: one case per observed attribute value,
    together with how many training examples each case classifies right and
    wrong.
    """

    attribute: Hashable
    cases: tuple[Case, ...]

    @cached_property
    def predictions(self) -> dict[Hashable, Hashable]:
        return {case.attribute_value: case.predicted_class for case in self.cases}

    @property
    def correct(self) -> int:
        return sum(case.correct for case in self.cases)

    @property
    def incorrect(self) -> int:
        return sum(case.incorrect for case in self.cases)

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        """Accuracy on the examples the rule was built from"""
        return score(self, self.total)

    def __str__(self) -> str:
        return "\n".join(
            f"IF {self.attribute} = {case.attribute_value} "
            f"THEN {case.predicted_class}"
            for case in self.cases
        )


def build(tally: FrequencyTally, attribute: Optional[Hashable] = None) -> Rule:
    """Builds a rule predicting the most frequent class for each attribute value.

    When several classes are equally frequent for a value, the one seen first
    among examples with that value wins (max() keeps the first maximal element
    and tally keeps classes in first seen order).

    Args:
        tally (FrequencyTally): class counts per attribute value
        attribute (Optional[Hashable], optional): attribute id to put in the rule.
            Defaults to the tally's attribute.

    Returns:
        Rule: rule with one case per tallied value
    """
    cases: list[Case] = []
    for value, class_counts in tally.counts.items():
        predicted_class, correct = max(class_counts.items(), key=lambda e: e[1])
        cases.append(
            Case(
                attribute_value=value,
                predicted_class=predicted_class,
                correct=correct,
                incorrect=sum(class_counts.values()) - correct,
            )
        )
    return Rule(
        attribute=tally.attribute if attribute is None else attribute,
        cases=tuple(cases),
    )
