import pytest

from eddsa_wallet.crypto.keys import PublicKey
from eddsa_wallet.exceptions import FormatError, ValidationError
from eddsa_wallet.utils import validation as v


def test_extended_key_validation():
    assert v.validate_extended_key("fprvabc") == "fprvabc"
    with pytest.raises(FormatError):
        v.validate_extended_key("xprvabc")
    with pytest.raises(FormatError):
        v.validate_extended_key(None)


def test_child_index_validation():
    assert v.is_valid_child_index(0)
    assert v.is_valid_child_index(2 ** 32 - 1)
    assert not v.is_valid_child_index(2 ** 32)
    assert not v.is_valid_child_index(-1)
    assert not v.is_valid_child_index(True)
    assert not v.is_valid_child_index(1.0)


def test_derivation_path_validation():
    assert v.validate_derivation_path([44, 501, 8, 0, 0]) == (44, 501, 8, 0, 0)
    with pytest.raises(ValidationError):
        v.validate_derivation_path([44, 501])
    with pytest.raises(ValidationError):
        v.validate_derivation_path("44/501/8/0/0")


def test_message_validation():
    assert v.validate_message("abc") == b"abc"
    assert v.validate_message(bytearray(b"abc")) == b"abc"
    assert v.validate_message(memoryview(b"abc")) == b"abc"
    with pytest.raises(ValidationError):
        v.validate_message(None)


def test_public_key_validation():
    base = "0x5866666666666666666666666666666666666666666666666666666666666666"
    assert v.validate_public_key(base) == bytes.fromhex(base[2:])
    with pytest.raises(ValidationError):
        v.validate_public_key("0x1234")
    with pytest.raises(ValidationError):
        v.validate_public_key(42)


def test_public_key_wrapper():
    base = "0x5866666666666666666666666666666666666666666666666666666666666666"
    key = PublicKey(base)
    assert key.hex() == base
    assert PublicKey(key) == key
    assert bytes(key) == bytes.fromhex(base[2:])
    assert base in repr(key)
    identity = "0x01" + "00" * 31
    with pytest.raises(ValidationError):
        PublicKey(identity)
