from typing import List

import pytest

from infodist.domain.ports.compressor_port import CompressorPort


class LengthCompressor(CompressorPort):
    """Compressed length is the input length."""

    def _measure(self, data: bytes) -> int:
        return len(data)


@pytest.fixture
def length_compressor() -> LengthCompressor:
    return LengthCompressor()


@pytest.fixture
def sample_strings() -> List[str]:
    return ["", "x", "xy"]


@pytest.fixture
def periodic_and_random():
    import random

    rng = random.Random(42)
    x = "ab" * 100
    y = "ba" * 100
    z = "".join(rng.choice("ab") for _ in range(200))
    return x, y, z
