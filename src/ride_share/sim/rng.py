# sim/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(text: str) -> int:
    return _u32(crc32(text.encode("utf-8")))


class RNGRegistry:
    """
    Deterministic registry of numpy.random.Generator streams.
    Entropy path: [master_seed, scenario, stream name]
    Streams are cached, so asking twice for the same name continues the same sequence.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _tag(str(scenario))

    @cache
    def stream(self, name: str) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, _tag(name)])
        return np.random.Generator(np.random.PCG64(ss))
