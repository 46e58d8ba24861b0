"""Errors raised by 1R induction. All of them are input validation failures,
there is nothing transient to retry.
"""


class OneRError(ValueError):
    """Base class for all errors raised by the rule induction."""


class SchemaError(OneRError):
    """Example is missing a value for a requested attribute."""

    def __init__(self, attribute, example_index: int):
        self.attribute = attribute
        self.example_index: int = example_index
        super().__init__(
            f"Example {example_index} has no value for attribute {attribute!r}. "
            'Fill it in or use missing_values="value" to treat missing values '
            "as a separate value."
        )


class EmptyDatasetError(OneRError):
    """Dataset contains no examples, accuracy is undefined."""

    def __init__(self, message: str = "Dataset contains no examples"):
        super().__init__(message)


class NoAttributesError(OneRError):
    """No candidate attributes were given to induce a rule from."""

    def __init__(self, message: str = "No attributes to induce a rule from"):
        super().__init__(message)
