"""The JH compression function F8 over a bit-sliced 1024-bit state."""

from __future__ import annotations

from itertools import cycle

_MASK128 = (1 << 128) - 1

_ROUND_CONSTANT_HEX = (
    "72d5dea2df15f8677b84150ab723155781abd6904d5a87f64e9f4fc5c3d12b40",
    "ea983ae05c45fa9c03c5d29966b2999a660296b4f2bb538ab556141a88dba231",
    "03a35a5c9a190edb403fb20a87c144101c051980849e951d6f33ebad5ee7cddc",
    "10ba139202bf6b41dc786515f7bb27d00a2c813937aa78503f1abfd2410091d3",
    "422d5a0df6cc7e90dd629f9c92c097ce185ca70bc72b44acd1df65d663c6fc23",
    "976e6c039ee0b81a2105457e446ceca8eef103bb5d8e61fafd9697b294838197",
    "4a8e8537db03302f2a678d2dfb9f6a958afe7381f8b8696c8ac77246c07f4214",
    "c5f4158fbdc75ec475446fa78f11bb8052de75b7aee488bc82b8001e98a6a3f4",
    "8ef48f33a9a36315aa5f5624d5b7f989b6f1ed207c5ae0fd36cae95a06422c36",
    "ce2935434efe983d533af974739a4ba7d0f51f596f4e81860e9dad81afd85a9f",
    "a7050667ee34626a8b0b28be6eb9172747740726c680103fe0a07e6fc67e487b",
    "0d550aa54af8a4c091e3e79f978ef19e8676728150608dd47e9e5a41f3e5b062",
    "fc9f1fec4054207ae3e41a00cef4c9844fd794f59dfa95d8552e7e1124c354a5",
    "5bdf7228bdfe6e2878f57fe20fa5c4b205897cefee49d32e447e9385eb28597f",
    "705f6937b324314a5e8628f11dd6e465c71b770451b920e774fe43e823d4878a",
    "7d29e8a3927694f2ddcb7a099b30d9c11d1b30fb5bdc1be0da24494ff29c82bf",
    "a4e7ba31b470bfff0d324405def8bc483baefc3253bbd339459fc3c1e0298ba0",
    "e5c905fdf7ae090f947034124290f134a271b701e344ed95e93b8e364f2f984a",
    "88401d63a06cf61547c1444b8752afff7ebb4af1e20ac6304670b6c5cc6e8ce6",
    "a4d5a456bd4fca00da9d844bc83e18ae7357ce453064d1ade8a6ce68145c2567",
    "a3da8cf2cb0ee11633e906589a94999a1f60b220c26f847bd1ceac7fa0d18518",
    "32595ba18ddd19d3509a1cc0aaa5b4469f3d6367e4046bbaf6ca19ab0b56ee7e",
    "1fb179eaa9282174e9bdf7353b3651ee1d57ac5a7550d3763a46c2fea37d7001",
    "f735c1af98a4d84278edec209e6b677941836315ea3adba8fac33b4d32832c83",
    "a7403b1f1c2747f35940f034b72d769ae73e4e6cd2214ffdb8fd8d39dc5759ef",
    "8d9b0c492b49ebda5ba2d74968f3700d7d3baed07a8d5584f5a5e9f0e4f88e65",
    "a0b8a2f436103b530ca8079e753eec5a9168949256e8884f5bb05c55f8babc4c",
    "e3bb3b99f387947b75daf4d6726b1c5d64aeac28dc34b36d6c34a550b828db71",
    "f861e2f2108d512ae3db643359dd75fc1cacbcf143ce3fa267bbd13c02e843b0",
    "330a5bca8829a1757f34194db416535c923b94c30e794d1e797475d7b6eeaf3f",
    "eaa8d4f7be1a39215cf47e094c23275126a32453ba323cd244a3174a6da6d5ad",
    "b51d3ea6aff2c90883593d98916b3c564cf87ca17286604d46e23ecc086ec7f6",
    "2f9833b3b1bc765e2bd666a5efc4e62a06f4b6e8bec1d43674ee8215bcef2163",
    "fdc14e0df453c969a77d5ac4065858267ec1141606e0fa167e90af3d28639d3f",
    "d2c9f2e3009bd20c5faace30b7d40c30742a5116f2e032980deb30d8e3cef89a",
    "4bc59e7bb5f17992ff51e66e048668d39b234d57e6966731cce6a6f3170a7505",
    "b17681d913326cce3c175284f805a262f42bcbb378471547ff46548223936a48",
    "38df58074e5e6565f2fc7c89fc86508e31702e44d00bca86f04009a23078474e",
    "65a0ee39d1f73883f75ee937e42c3abd2197b2260113f86fa344edd1ef9fdee7",
    "8ba0df15762592d93c85f7f612dc42bed8a7ec7cab27b07e538d7ddaaa3ea8de",
    "aa25ce93bd0269d85af643fd1a7308f9c05fefda174a19a5974d66334cfd216a",
    "35b49831db411570ea1e0fbbedcd549b9ad063a151974072f6759dbf91476fe2",
)

STATE_SIZE = 128
BLOCK_SIZE = 64


def _words(buf: bytes) -> list[int]:
    """Split ``buf`` into little-endian 128-bit words."""
    return [int.from_bytes(buf[i : i + 16], "little") for i in range(0, len(buf), 16)]


def _round_constant(hex_text: str) -> tuple[int, int]:
    raw = bytes.fromhex(hex_text)
    return int.from_bytes(raw[:16], "little"), int.from_bytes(raw[16:], "little")


_ROUND_CONSTANTS = tuple(_round_constant(text) for text in _ROUND_CONSTANT_HEX)


def _swap_mask(n: int) -> int:
    unit = (1 << n) - 1
    mask = 0
    for shift in range(0, 128, 2 * n):
        mask |= unit << shift
    return mask


# Each round ends by swapping groups of 1, 2, 4, ... 64 bits in the odd words.
_SWAPS = tuple((n, _swap_mask(n)) for n in (1, 2, 4, 8, 16, 32, 64))


def _swap(x: int, n: int, mask: int) -> int:
    return ((x & mask) << n) | ((x >> n) & mask)


def _sbox(
    a0: int, a1: int, a2: int, a3: int, k: int
) -> tuple[int, int, int, int]:
    """Bit-sliced S-box layer; the constant bits select S0 or S1."""
    a3 ^= _MASK128
    a0 ^= (a2 ^ _MASK128) & k
    k ^= a0 & a1
    a0 ^= a3 & a2
    a3 ^= (a1 ^ _MASK128) & a2
    a1 ^= a0 & a2
    a2 ^= (a3 ^ _MASK128) & a0
    a0 ^= a1 | a3
    a3 ^= a1 & a2
    a2 ^= k
    a1 ^= k & a0
    return a0, a1, a2, a3


def f8(state: bytes, data: bytes) -> bytes:
    """Compress a 64-byte block into a 128-byte JH state and return the new state."""
    state = bytes(state)
    data = bytes(data)
    if len(state) != STATE_SIZE:
        raise ValueError(f"state must be {STATE_SIZE} bytes, got {len(state)}")
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"data must be {BLOCK_SIZE} bytes, got {len(data)}")

    y0, y1, y2, y3, y4, y5, y6, y7 = _words(state)
    d0, d1, d2, d3 = _words(data)
    y0 ^= d0
    y1 ^= d1
    y2 ^= d2
    y3 ^= d3

    for (k0, k1), (n, mask) in zip(_ROUND_CONSTANTS, cycle(_SWAPS)):
        y0, y2, y4, y6 = _sbox(y0, y2, y4, y6, k0)
        y1, y3, y5, y7 = _sbox(y1, y3, y5, y7, k1)
        # Linear transformation L.
        y1 ^= y2
        y3 ^= y4
        y5 ^= y6 ^ y0
        y7 ^= y0
        y0 ^= y3
        y2 ^= y5
        y4 ^= y7 ^ y1
        y6 ^= y1
        y1 = _swap(y1, n, mask)
        y3 = _swap(y3, n, mask)
        y5 = _swap(y5, n, mask)
        y7 = _swap(y7, n, mask)

    y4 ^= d0
    y5 ^= d1
    y6 ^= d2
    y7 ^= d3
    return b"".join(y.to_bytes(16, "little") for y in (y0, y1, y2, y3, y4, y5, y6, y7))