from numbers import Integral
from typing import Literal, Optional, TypeAlias, TypedDict

MissingValuesPolicy: TypeAlias = Literal["value", "error"]

MISSING_VALUES_POLICIES: tuple[str, ...] = ("value", "error")


class AlgorithmParams(TypedDict):
    missing_values: MissingValuesPolicy
    n_jobs: Optional[int]


DEFAULT_PARAMS_VALUES: AlgorithmParams = AlgorithmParams(
    missing_values="value",
    n_jobs=None,
)


def check_params(params: AlgorithmParams) -> None:
    if params["missing_values"] not in MISSING_VALUES_POLICIES:
        raise ValueError(
            f"Unknown missing values policy: {params['missing_values']!r}, "
            f"expected one of {MISSING_VALUES_POLICIES}"
        )
    n_jobs: Optional[int] = params["n_jobs"]
    if n_jobs is not None and (
        not isinstance(n_jobs, Integral) or isinstance(n_jobs, bool) or n_jobs == 0
    ):
        raise ValueError(f"n_jobs must be None or a non zero integer, got {n_jobs!r}")


def adjust_params_on_dataset(
    params: AlgorithmParams,
    attributes_count: int,
) -> AlgorithmParams:
    """There is no point in running more workers than there are attributes to
    evaluate, so positive ``n_jobs`` is capped at the attributes count.
    """
    new_params: AlgorithmParams = params.copy()
    n_jobs: Optional[int] = params["n_jobs"]
    if n_jobs is not None and n_jobs > 0 and attributes_count > 0:
        new_params["n_jobs"] = min(int(n_jobs), attributes_count)
    return new_params
