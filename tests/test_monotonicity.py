from necsizing.tables.conductors import ac_resistance, standard_ampacity
from necsizing.tables.conduits import OuterMaterial
from necsizing.tables.sizes import Metal, Size, TempRating

SIZES = [
    Size.AWG_3,
    Size.AWG_2,
    Size.AWG_1,
    Size.AWG_1_0,
    Size.AWG_2_0,
    Size.AWG_3_0,
    Size.AWG_4_0,
    Size.KCMIL_250,
    Size.KCMIL_300,
    Size.KCMIL_350,
    Size.KCMIL_400,
    Size.KCMIL_500,
]


def test_ampacity_increases_with_size():
    for metal in (Metal.COPPER, Metal.ALUMINUM):
        for rating in (TempRating.T60, TempRating.T75, TempRating.T90):
            values = [standard_ampacity(size, metal, rating) for size in SIZES]
            assert all(later > earlier for earlier, later in zip(values, values[1:]))


def test_resistance_decreases_with_size():
    values = [ac_resistance(size, Metal.COPPER, OuterMaterial.STEEL) for size in SIZES]
    assert all(later < earlier for earlier, later in zip(values, values[1:]))
