import pytest

from tvsc.radio_settings import Encryption, LineCoding, ModulationScheme


@pytest.mark.parametrize(
    "member, value",
    [
        (ModulationScheme.UNINITIALIZED, 0),
        (ModulationScheme.OOK, 1),
        (ModulationScheme.FSK, 4),
        (ModulationScheme.GFSK, 7),
        (ModulationScheme.LSB, 28),
    ],
)
def test_modulation_scheme_values(member, value):
    assert ModulationScheme(value) is member


@pytest.mark.parametrize(
    "member, value",
    [
        (LineCoding.NONE, 0),
        (LineCoding.WHITENING, 1),
        (LineCoding.MANCHESTER_ORIGINAL, 9),
        (LineCoding.BIPOLAR, 12),
    ],
)
def test_line_coding_values(member, value):
    assert LineCoding(value) is member


def test_encryption_values():
    assert Encryption(0) is Encryption.NO_ENCRYPTION
    assert Encryption(1) is Encryption.AES_128


@pytest.mark.parametrize("enum_type", [ModulationScheme, LineCoding, Encryption])
def test_values_are_contiguous_from_zero(enum_type):
    values = sorted(member.value for member in enum_type)
    assert values == list(range(len(enum_type)))


@pytest.mark.parametrize("enum_type", [ModulationScheme, LineCoding, Encryption])
def test_round_trip_by_name(enum_type):
    for member in enum_type:
        assert enum_type[member.name] is member


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        ModulationScheme(1000)