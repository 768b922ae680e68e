import pytest

from pbsproto.dis import DisError, DisProtocolError, dis_message


def test_message_for_overflow():
    assert dis_message(DisError.OVERFLOW) == "Value too large to convert"


def test_message_for_end_of_data():
    assert dis_message(DisError.EOD) == "Premature end of message"


def test_message_accepts_plain_integer():
    assert dis_message(11) == dis_message(DisError.EOF)


def test_every_code_has_a_distinct_message():
    messages = [dis_message(code) for code in DisError]
    assert all(messages)
    assert len(set(messages)) == len(list(DisError))


@pytest.mark.parametrize("code", [-1, 12, 100])
def test_unknown_code_rejected(code):
    with pytest.raises(ValueError):
        dis_message(code)


def test_protocol_error_carries_code_and_message():
    error = DisProtocolError(DisError.NONDIGIT)
    assert error.code is DisError.NONDIGIT
    assert str(error) == dis_message(DisError.NONDIGIT)


def test_protocol_error_from_integer_code():
    error = DisProtocolError(9)
    assert error.code is DisError.PROTO


def test_protocol_error_can_be_raised_and_caught():
    with pytest.raises(DisProtocolError) as info:
        raise DisProtocolError(DisError.BADSIGN)
    assert info.value.code == DisError.BADSIGN
    assert str(info.value) == dis_message(DisError.BADSIGN)


def test_protocol_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        DisProtocolError(42)