import pytest

from mkpw import (
    Classifier,
    EmptyPoolWithMinimum,
    MinimumExceedsLength,
    PasswordSpec,
    ValidationError,
    validate,
)

"""
TEST: mkpw/validation.py

validate() must reject a spec exactly when:
- a classifier has no candidates but a positive minimum count, or
- the minimum counts add up to more than the length.
"""


@pytest.mark.parametrize("length", [4, 5, 16])
def test_default_minimums_fit(length):
    validate(PasswordSpec(length=length))


def test_default_minimums_exceed_length():
    with pytest.raises(MinimumExceedsLength) as excinfo:
        validate(PasswordSpec(length=3))

    assert excinfo.value.total_minimum == 4
    assert excinfo.value.length == 3
    assert "The total minimum number of characters is 4" in str(excinfo.value)


def test_others_count_towards_total():
    spec = PasswordSpec(length=5, others=[Classifier(["x"], 2)])
    with pytest.raises(MinimumExceedsLength) as excinfo:
        validate(spec)
    assert excinfo.value.total_minimum == 6


def test_empty_named_pool_with_minimum():
    spec = PasswordSpec(uppercase=Classifier([], 2))
    with pytest.raises(EmptyPoolWithMinimum) as excinfo:
        validate(spec)

    err = excinfo.value
    assert err.classifier == "Uppercases"
    assert err.minimum_count == 2
    assert err.index is None
    assert str(err) == (
        "Uppercases is empty, but the minimum number of characters is set to 2. "
        "Please set the minimum number of characters to 0."
    )


def test_empty_other_pool_reports_index():
    spec = PasswordSpec(others=[Classifier(["x"], 1), Classifier([], 3)])
    with pytest.raises(EmptyPoolWithMinimum) as excinfo:
        validate(spec)

    assert excinfo.value.index == 1
    assert excinfo.value.classifier == "Other characters at index 1"


def test_empty_pool_with_zero_minimum_is_fine():
    validate(PasswordSpec(symbol=Classifier([], 0), others=[Classifier([], 0)]))


def test_empty_pool_checked_before_length():
    # Both problems present: the pool problem is reported.
    spec = PasswordSpec(length=0, number=Classifier([], 1))
    with pytest.raises(EmptyPoolWithMinimum):
        validate(spec)


def test_exclusion_can_empty_a_pool():
    spec = PasswordSpec(exclude_similar=True, number=Classifier(["0", "1"], 1))
    with pytest.raises(EmptyPoolWithMinimum):
        validate(spec)

    spec.exclude_similar = False
    validate(spec)


def test_errors_share_a_base_class():
    assert issubclass(EmptyPoolWithMinimum, ValidationError)
    assert issubclass(MinimumExceedsLength, ValidationError)


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        validate(PasswordSpec(length=-1))
    with pytest.raises(ValueError):
        validate(PasswordSpec(others=[Classifier(["x"], -1)]))
