import pytest

from necsizing.errors import ParameterError
from necsizing.factors import (
    NECEdition,
    adjustment_factor,
    adjustment_factor_for_count,
    cable_bundle_adjustment_factor,
    rooftop_temperature_adder,
    temperature_correction_factor,
    validate_ambient,
)
from necsizing.tables.sizes import TempRating


def test_correction_factor_columns():
    assert temperature_correction_factor(100, TempRating.T90) == pytest.approx(0.91)
    assert temperature_correction_factor(100, TempRating.T75) == pytest.approx(0.88)
    assert temperature_correction_factor(100, TempRating.T60) == pytest.approx(0.82)
    assert temperature_correction_factor(86, TempRating.T60) == 1.0
    assert temperature_correction_factor(40, TempRating.T75) == pytest.approx(1.2)


def test_correction_factor_is_zero_when_too_hot():
    assert temperature_correction_factor(140, TempRating.T60) == 0
    assert temperature_correction_factor(160, TempRating.T75) == 0
    assert temperature_correction_factor(150, TempRating.T90, rooftop_distance=0.5) == 0


def test_correction_factor_requires_a_rating():
    with pytest.raises(ParameterError):
        temperature_correction_factor(86, TempRating.UNKNOWN)


def test_rooftop_adder_by_edition():
    assert rooftop_temperature_adder(-1) == 0
    assert rooftop_temperature_adder(0.5, NECEdition.NEC2014) == 60
    assert rooftop_temperature_adder(2, NECEdition.NEC2014) == 40
    assert rooftop_temperature_adder(12, NECEdition.NEC2014) == 30
    assert rooftop_temperature_adder(36, NECEdition.NEC2014) == 25
    assert rooftop_temperature_adder(40, NECEdition.NEC2014) == 0
    assert rooftop_temperature_adder(0.5, NECEdition.NEC2017) == 60
    assert rooftop_temperature_adder(1, NECEdition.NEC2017) == 0
    assert rooftop_temperature_adder(0, NECEdition.NEC2020) == 60


def test_rooftop_adder_feeds_correction():
    # 86 °F + 60 °F lands in the 141-149 °F row
    assert temperature_correction_factor(86, TempRating.T90, NECEdition.NEC2014, 0.5) == pytest.approx(0.65)
    assert temperature_correction_factor(86, TempRating.T90, NECEdition.NEC2017, 1) == 1.0


def test_adjustment_brackets():
    assert adjustment_factor_for_count(0) == 1.0
    assert adjustment_factor_for_count(3) == 1.0
    assert adjustment_factor_for_count(4) == 0.8
    assert adjustment_factor_for_count(9) == 0.7
    assert adjustment_factor_for_count(10) == 0.5
    assert adjustment_factor_for_count(20) == 0.5
    assert adjustment_factor_for_count(21) == 0.45
    assert adjustment_factor_for_count(41) == 0.35


def test_adjustment_never_increases_with_count():
    values = [adjustment_factor(ccc, 30) for ccc in range(0, 61)]
    assert all(later <= earlier for earlier, later in zip(values, values[1:]))


def test_short_bundles_and_nipples_are_not_adjusted():
    assert adjustment_factor(50, length_in=24) == 1.0
    assert adjustment_factor(50, nipple=True) == 1.0
    assert adjustment_factor(50) == 0.35
    with pytest.raises(ParameterError):
        adjustment_factor(-1)


def test_cable_bundle_adjustment():
    assert cable_bundle_adjustment_factor(True, False, 9, 30) == 1.0
    assert cable_bundle_adjustment_factor(False, True, 25, 30) == 0.6
    assert cable_bundle_adjustment_factor(False, False, 9, 30) == 0.7
    assert cable_bundle_adjustment_factor(False, False, 9, 20) == 1.0


def test_ambient_limits():
    assert validate_ambient(-76) == -76
    assert validate_ambient(185) == 185
    with pytest.raises(ParameterError):
        validate_ambient(-80)
    with pytest.raises(ParameterError):
        validate_ambient(190)


def test_edition_from_year():
    assert NECEdition.from_year("2017") is NECEdition.NEC2017
    with pytest.raises(ParameterError):
        NECEdition.from_year(2011)
