# src/gravity_sims/utils/random.py

from __future__ import annotations

from typing import Dict
import zlib
import numpy as np

_master_seed: int | None = None
_rngs: Dict[str, np.random.Generator] = {}


def seed_all(seed: int | None) -> None:
    """
    Set the master seed used by every named stream and drop cached streams.
    None means entropy-seeded (non-reproducible) streams.
    """
    global _master_seed
    _master_seed = seed
    _rngs.clear()


def rng(name: str = "presets") -> np.random.Generator:
    """
    Return the named RNG stream, creating it on first use.

    Streams are independent of each other, so drawing initial conditions
    never shifts the colors picked for them.
    """
    if name not in _rngs:
        if _master_seed is None:
            _rngs[name] = np.random.default_rng()
        else:
            ss = np.random.SeedSequence([_master_seed, zlib.crc32(name.encode("utf-8"))])
            _rngs[name] = np.random.default_rng(ss)
    return _rngs[name]
