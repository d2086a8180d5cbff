import hashlib
import os

import nacl.signing
import pytest

from eddsa_wallet.constants import ED25519_N
from eddsa_wallet.crypto import signature as signature_module
from eddsa_wallet.crypto.curve import scalar_mult_base
from eddsa_wallet.crypto.hd import derive_key_material
from eddsa_wallet.crypto.signature import sha512, sign_message, verify_signature
from eddsa_wallet.exceptions import SigningError
from eddsa_wallet.types.keys import DerivedKeyMaterial

from conftest import GOLDEN_PATH, ref_verify


@pytest.fixture
def material(chain_code, private_scalar):
    return derive_key_material(chain_code, private_scalar, GOLDEN_PATH)


@pytest.mark.parametrize("message", [b"", b"\x00", b"x", os.urandom(10 * 1024)])
def test_signature_verifies(material, message):
    signature = sign_message(material, message)
    assert len(signature) == 64
    nacl.signing.VerifyKey(material.public_point).verify(message, signature)
    assert verify_signature(material.public_point, message, signature)


def test_signature_verifies_many_times(material):
    verify_key = nacl.signing.VerifyKey(material.public_point)
    for trial in range(100):
        message = os.urandom(trial)
        signature = sign_message(material, message)
        verify_key.verify(message, signature)


def test_signature_matches_reference_verifier(material):
    message = b"reference check"
    signature = sign_message(material, message)
    assert ref_verify(material.public_point, message, signature)


def test_signatures_are_not_deterministic(material):
    message = b"same message"
    first = sign_message(material, message)
    second = sign_message(material, message)
    assert first != second
    assert first[:32] != second[:32]
    assert verify_signature(material.public_point, message, first)
    assert verify_signature(material.public_point, message, second)


def test_s_is_reduced(material):
    for _ in range(20):
        signature = sign_message(material, b"reduced")
        assert int.from_bytes(signature[32:], "little") < ED25519_N


def test_str_message_is_utf8(material):
    signature = sign_message(material, "héllo")
    assert verify_signature(material.public_point, "héllo".encode("utf-8"), signature)


def test_tampering_detected(material):
    signature = bytearray(sign_message(material, b"payload"))
    assert not verify_signature(material.public_point, b"payloaD", bytes(signature))
    signature[40] ^= 0x01
    assert not verify_signature(material.public_point, b"payload", bytes(signature))
    assert not verify_signature(material.public_point, b"payload", bytes(signature[:63]))
    assert not verify_signature(b"\x00" * 31, b"payload", bytes(signature))


def test_verify_accepts_hex_public_key(material):
    signature = sign_message(material, b"hex")
    assert verify_signature(f"0x{material.public_point.hex()}", b"hex", signature)


def test_sign_without_private_scalar(material):
    public_only = DerivedKeyMaterial(
        public_point=material.public_point,
        private_scalar=None,
        chain_code=material.chain_code,
    )
    assert not public_only.has_private_key
    with pytest.raises(SigningError):
        sign_message(public_only, b"message")
    with pytest.raises(SigningError):
        sign_message(None, b"message")


def test_unsupported_message_type(material):
    with pytest.raises(SigningError):
        sign_message(material, 12345)


def test_custom_hasher_is_used(material):
    calls = []
    
    def hasher(*parts):
        calls.append(parts)
        return hashlib.sha512(b"".join(parts)).digest()
    
    signature = sign_message(material, b"hashed", hasher=hasher)
    assert len(calls) == 2
    assert calls[1][1] == material.public_point
    assert verify_signature(material.public_point, b"hashed", signature)


def test_sha512_concatenates():
    assert sha512(b"ab", b"c") == hashlib.sha512(b"abc").digest()
    assert sha512() == hashlib.sha512(b"").digest()


# Signature of b"nonce check" by the golden key with a seed of 32 0x07 bytes.
PINNED_SEED = b"\x07" * 32
PINNED_SIGNATURE = (
    "5a9d210af61c29456636e3dbc3d1906c519450b9747230f818fa035fa8757eab"
    "4bf1f318e0dac28bb611903a8278ac6ff9040f731b4257777d9226dd6c3beb09"
)


def test_nonce_mixes_seed_private_key_and_message(material, monkeypatch):
    monkeypatch.setattr(signature_module.secrets, "token_bytes", lambda n: PINNED_SEED[:n])
    message = b"nonce check"
    k = material.private_scalar
    
    signature = sign_message(material, message)
    
    nonce = int.from_bytes(
        hashlib.sha512(PINNED_SEED + k.to_bytes(32, "little") + message).digest(), "little"
    ) % ED25519_N
    r_point = scalar_mult_base(nonce)
    hram = int.from_bytes(
        hashlib.sha512(r_point + material.public_point + message).digest(), "little"
    ) % ED25519_N
    s = (hram * k + nonce) % ED25519_N
    
    assert signature[:32] == r_point
    assert signature[32:] == s.to_bytes(32, "little")
    assert signature.hex() == PINNED_SIGNATURE


def test_nonce_depends_on_seed(material, monkeypatch):
    seeds = iter([b"\x01" * 32, b"\x02" * 32])
    monkeypatch.setattr(signature_module.secrets, "token_bytes", lambda n: next(seeds))
    first = sign_message(material, b"seeded")
    second = sign_message(material, b"seeded")
    assert first[:32] != second[:32]


@pytest.mark.parametrize("signature", [None, 12345, "00" * 64, [0] * 64])
def test_verify_rejects_non_bytes_signature(material, signature):
    assert verify_signature(material.public_point, b"m", signature) is False
