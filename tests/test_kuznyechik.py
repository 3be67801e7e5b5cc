import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gostcrypt.kuznyechik import (
    BLOCK_SIZE,
    KEY_SIZE,
    Cipher,
    _r,
    linear,
    linear_inverse,
    round_constant,
    substitute,
)

KEY = bytes([
    0x88, 0x99, 0xaa, 0xbb, 0xcc, 0xdd, 0xee, 0xff,
    0x00, 0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77,
    0xfe, 0xdc, 0xba, 0x98, 0x76, 0x54, 0x32, 0x10,
    0x01, 0x23, 0x45, 0x67, 0x89, 0xab, 0xcd, 0xef,
])
PT = bytes([
    0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77, 0x00,
    0xff, 0xee, 0xdd, 0xcc, 0xbb, 0xaa, 0x99, 0x88,
])
CT = bytes([
    0x7f, 0x67, 0x9d, 0x90, 0xbe, 0xbc, 0x24, 0x30,
    0x5a, 0x46, 0x8d, 0x42, 0xb9, 0xd4, 0xed, 0xcd,
])


def test_substitute_vectors():
    blk = bytes.fromhex("ffeeddccbbaa99881122334455667700")
    expected = [
        "b66cd8887d38e8d77765aeea0c9a7efc",
        "559d8dd7bd06cbfe7e7b262523280d39",
        "0c3322fed531e4630d80ef5c5a81c50b",
        "23ae65633f842d29c5df529c13f5acda",
    ]
    for want in expected:
        blk = substitute(blk)
        assert blk == bytes.fromhex(want)


def test_r_step_vectors():
    blk = [0] * 14 + [0x01, 0x00]
    expected = [
        "94000000000000000000000000000001",
        "a5940000000000000000000000000000",
        "64a59400000000000000000000000000",
        "0d64a594000000000000000000000000",
    ]
    for want in expected:
        blk = _r(blk)
        assert bytes(blk) == bytes.fromhex(want)


def test_linear_vectors():
    blk = bytes.fromhex("64a59400000000000000000000000000")
    expected = [
        "d456584dd0e3e84cc3166e4b7fa2890d",
        "79d26221b87b584cd42fbc4ffea5de9a",
        "0e93691a0cfc60408b7b68f66b513c13",
        "e6a8094fee0aa204fd97bcb0b44b8580",
    ]
    for want in expected:
        blk = linear(blk)
        assert blk == bytes.fromhex(want)


@pytest.mark.parametrize(
    "index,want",
    [
        (0, "6ea276726c487ab85d27bd10dd849401"),
        (1, "dc87ece4d890f4b3ba4eb92079cbeb02"),
        (2, "b2259a96b4d88e0be7690430a44f7f03"),
        (3, "7bcd1b0b73e32ba5b79cb140f2551504"),
        (4, "156f6d791fab511deabb0c502fd18105"),
        (5, "a74af7efab73df160dd208608b9efe06"),
        (6, "c9e8819dc73ba5ae50f5b570561a6a07"),
        (7, "f6593616e6055689adfba18027aa2a08"),
    ],
)
def test_round_constants(index, want):
    assert round_constant(index) == bytes.fromhex(want)


@pytest.mark.parametrize("index", [-1, 32])
def test_round_constant_out_of_range(index):
    with pytest.raises(IndexError):
        round_constant(index)


def test_round_keys():
    expected = [
        "8899aabbccddeeff0011223344556677",
        "fedcba98765432100123456789abcdef",
        "db31485315694343228d6aef8cc78c44",
        "3d4553d8e9cfec6815ebadc40a9ffd04",
        "57646468c44a5e28d3e59246f429f1ac",
        "bd079435165c6432b532e82834da581b",
        "51e640757e8745de705727265a0098b1",
        "5a7925017b9fdd3ed72a91a22286f984",
        "bb44e25378c73123a5f32f73cdb6e517",
        "72e9dd7416bcf45b755dbaa88e4a4043",
    ]
    assert list(Cipher(KEY).round_keys) == [bytes.fromhex(h) for h in expected]


def test_vector_encrypt():
    assert Cipher(KEY).encrypt(PT) == CT


def test_vector_decrypt():
    assert Cipher(KEY).decrypt(CT) == PT


def test_block_size_attribute():
    assert Cipher(bytes(KEY_SIZE)).block_size == BLOCK_SIZE


@pytest.mark.parametrize("size", [0, 16, 31, 33])
def test_invalid_key_size(size):
    with pytest.raises(ValueError):
        Cipher(bytes(size))


@pytest.mark.parametrize("size", [0, 15, 17])
def test_invalid_block_size(size):
    cipher = Cipher(KEY)
    with pytest.raises(ValueError):
        cipher.encrypt(bytes(size))
    with pytest.raises(ValueError):
        cipher.decrypt(bytes(size))


def test_transforms_reject_wrong_length():
    with pytest.raises(ValueError):
        substitute(bytes(15))
    with pytest.raises(ValueError):
        linear(bytes(17))


@settings(max_examples=100, deadline=None)
@given(st.binary(min_size=BLOCK_SIZE, max_size=BLOCK_SIZE))
def test_linear_inverse_round_trip(block):
    assert linear_inverse(linear(block)) == block


@settings(max_examples=30, deadline=None)
@given(
    st.binary(min_size=KEY_SIZE, max_size=KEY_SIZE),
    st.binary(min_size=BLOCK_SIZE, max_size=BLOCK_SIZE),
)
def test_random_round_trip(key, block):
    cipher = Cipher(key)
    assert cipher.decrypt(cipher.encrypt(block)) == block