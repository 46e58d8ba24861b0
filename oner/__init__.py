"""
Package implementing the 1R (Holte, 1993) rule learning algorithm.

For every attribute a rule is built which predicts the most frequent class of
each attribute value. The rule with the best accuracy on training data is the
"one rule". It is a baseline learner for comparing more sophisticated
algorithms against.

Attributes are expected to be nominal, numerical ones should be discretized
beforehand.
"""
from oner._dataset import MISSING
from oner._dataset import DatasetView
from oner._dataset import Example
from oner._induction import InductionResult
from oner._induction import InductionTimes
from oner._induction import RuleInducer
from oner._induction import induce
from oner._model import OneRClassifier
from oner._rule import Case
from oner._rule import Rule
from oner._rule import build
from oner._scoring import evaluate
from oner._scoring import interpret
from oner._scoring import score
from oner._tally import FrequencyTally
from oner._tally import tally
from oner.exceptions import EmptyDatasetError
from oner.exceptions import NoAttributesError
from oner.exceptions import OneRError
from oner.exceptions import SchemaError

__all__ = [
    "MISSING",
    "Case",
    "DatasetView",
    "EmptyDatasetError",
    "Example",
    "FrequencyTally",
    "InductionResult",
    "InductionTimes",
    "NoAttributesError",
    "OneRClassifier",
    "OneRError",
    "Rule",
    "RuleInducer",
    "SchemaError",
    "build",
    "evaluate",
    "induce",
    "interpret",
    "score",
    "tally",
]
