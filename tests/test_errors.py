import pytest

from snssdump import errors


@pytest.mark.parametrize('cls', [
    errors.SnssError, errors.FormatError, errors.TruncatedDataError,
    errors.EncodingError, errors.UnsupportedOpcode, errors.MalformedRecord,
])
def test_error_classes_are_documented(cls):
    assert cls.__doc__ and cls.__doc__.strip()
    assert issubclass(cls, ValueError)


def test_unsupported_opcode_message():
    err = errors.UnsupportedOpcode(7)
    assert err.opcode == 7
    assert str(err) == 'No reader for opcode 7'
