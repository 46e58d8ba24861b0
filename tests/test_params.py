import numpy as np
import pytest

from oner._params import DEFAULT_PARAMS_VALUES, adjust_params_on_dataset, check_params


def test_defaults_are_valid():
    check_params(DEFAULT_PARAMS_VALUES)


def test_n_jobs_is_capped_at_attributes_count():
    params = DEFAULT_PARAMS_VALUES.copy()
    params["n_jobs"] = 8

    adjusted = adjust_params_on_dataset(params, attributes_count=3)

    assert adjusted["n_jobs"] == 3
    assert params["n_jobs"] == 8


@pytest.mark.parametrize("n_jobs", [None, -1])
def test_n_jobs_left_untouched(n_jobs):
    params = DEFAULT_PARAMS_VALUES.copy()
    params["n_jobs"] = n_jobs

    assert adjust_params_on_dataset(params, attributes_count=3)["n_jobs"] == n_jobs


def test_numpy_integers_are_accepted():
    params = DEFAULT_PARAMS_VALUES.copy()
    params["n_jobs"] = np.int64(2)

    check_params(params)
    assert adjust_params_on_dataset(params, attributes_count=1)["n_jobs"] == 1


@pytest.mark.parametrize("n_jobs", [0, True, 2.0, "2"])
def test_invalid_n_jobs(n_jobs):
    params = DEFAULT_PARAMS_VALUES.copy()
    params["n_jobs"] = n_jobs

    with pytest.raises(ValueError):
        check_params(params)
