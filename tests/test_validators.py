from __future__ import annotations

import pytest

from clip_resizer.models import SizeUnit
from clip_resizer.validators import ValueValidator


def test_pixels() -> None:
    assert ValueValidator.validate_pixels("1") == 1
    assert ValueValidator.validate_pixels(" 640 ") == 640
    for bad in ["nope", "0", "-3", "", "1.5"]:
        with pytest.raises(ValueError):
            ValueValidator.validate_pixels(bad)


def test_percent_excludes_zero_and_hundred() -> None:
    assert ValueValidator.validate_percent("1") == 1
    assert ValueValidator.validate_percent(99) == 99
    for bad in ["nope", "0", "100", 0, 100, "150"]:
        with pytest.raises(ValueError):
            ValueValidator.validate_percent(bad)


def test_ratio_range() -> None:
    assert ValueValidator.validate_ratio("0.7") == pytest.approx(0.7)
    assert ValueValidator.validate_ratio(1) == 1.0
    for bad in ["nope", "-1.", "0.", 0, 1.01, "nan"]:
        with pytest.raises(ValueError):
            ValueValidator.validate_ratio(bad)


def test_bool_is_not_a_number() -> None:
    with pytest.raises(ValueError):
        ValueValidator.validate_pixels(True)
    with pytest.raises(ValueError):
        ValueValidator.validate_ratio(True)


def test_validate_dimension_dispatches_on_unit() -> None:
    assert ValueValidator.validate_dimension("250", SizeUnit.PIXEL) == 250
    with pytest.raises(ValueError):
        ValueValidator.validate_dimension("250", SizeUnit.PERCENT)
