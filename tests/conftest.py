"""Shared fixtures and an independent affine Ed25519 reference."""

import hashlib
import hmac

import pytest

from eddsa_wallet.crypto.extended_key import encode_extended_key

P = 2 ** 255 - 19
L = 2 ** 252 + 27742317777372353535851937790883648493
D = -121665 * pow(121666, P - 2, P) % P
SQRT_M1 = pow(2, (P - 1) // 4, P)


def _inv(x):
    return pow(x, P - 2, P)


def _recover_x(y, sign):
    xx = (y * y - 1) * _inv(D * y * y + 1) % P
    x = pow(xx, (P + 3) // 8, P)
    if (x * x - xx) % P != 0:
        x = x * SQRT_M1 % P
    if x % 2 != sign:
        x = P - x
    return x


BASE_Y = 4 * _inv(5) % P
BASE = (_recover_x(BASE_Y, 0), BASE_Y)
IDENTITY = (0, 1)


def ref_add(p, q):
    x1, y1 = p
    x2, y2 = q
    t = D * x1 * x2 * y1 * y2 % P
    x3 = (x1 * y2 + x2 * y1) * _inv(1 + t) % P
    y3 = (y1 * y2 + x1 * x2) * _inv(1 - t) % P
    return x3, y3


def ref_mul(point, k):
    result = IDENTITY
    while k:
        if k & 1:
            result = ref_add(result, point)
        point = ref_add(point, point)
        k >>= 1
    return result


def ref_encode(point):
    x, y = point
    return (y | ((x & 1) << 255)).to_bytes(32, "little")


def ref_decode(data):
    n = int.from_bytes(data, "little")
    y = n & ((1 << 255) - 1)
    return _recover_x(y, n >> 255), y


def ref_derive(chain_code, private_scalar, path):
    """Walk a path with affine arithmetic, returning every level."""
    point = ref_mul(BASE, private_scalar)
    levels = [(ref_encode(point), private_scalar, chain_code)]
    for index in path:
        mac = hmac.new(chain_code, digestmod=hashlib.sha512)
        mac.update(ref_encode(point))
        mac.update(b"\x00")
        mac.update(index.to_bytes(4, "big"))
        digest = mac.digest()
        exp = int.from_bytes(digest[:32], "big") % L
        point = ref_add(point, ref_mul(BASE, exp))
        private_scalar = (private_scalar + exp) % L
        chain_code = digest[32:]
        levels.append((ref_encode(point), private_scalar, chain_code))
    return levels


def ref_verify(public_key, message, signature):
    """Cofactorless RFC 8032 check: s*B == R + H(R||A||M)*A."""
    r_bytes, s = signature[:32], int.from_bytes(signature[32:], "little")
    if s >= L:
        return False
    h = int.from_bytes(hashlib.sha512(r_bytes + public_key + message).digest(), "little") % L
    lhs = ref_mul(BASE, s)
    rhs = ref_add(ref_decode(r_bytes), ref_mul(ref_decode(public_key), h))
    return lhs == rhs


GOLDEN_CHAIN_CODE = hashlib.sha256(b"fprv golden chain code").digest()
GOLDEN_PRIVATE_SCALAR = int.from_bytes(hashlib.sha256(b"fprv golden private key").digest(), "big") % L
GOLDEN_PATH = (44, 501, 0, 0, 0)


@pytest.fixture
def chain_code():
    return GOLDEN_CHAIN_CODE


@pytest.fixture
def private_scalar():
    return GOLDEN_PRIVATE_SCALAR


@pytest.fixture
def fprv(chain_code, private_scalar):
    return encode_extended_key(chain_code, private_scalar)


@pytest.fixture
def other_fprv():
    return encode_extended_key(b"\x42" * 32, 0x1234567890ABCDEF)
