
"""Seeded LCG feeding piece-type indices"""
import pygame
from typing import Iterator, Optional
from tetris_config import CONFIG


class RandomSequence:
    # glibc-style constants, modulus 2^31
    M = 0x80000000
    A = 1103515245
    C = 12345

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks()
        self.seed = seed % self.M
        self.state = self.seed

    @classmethod
    def hash(cls, seed: int) -> int:
        return (cls.A * seed + cls.C) % cls.M

    @classmethod
    def scale(cls, h: int, n: Optional[int] = None) -> int:
        """Map a hash onto 0..n-1. The top hash value (M-1) maps to n, which
        callers treat as a no-op index."""
        if n is None:
            n = int(CONFIG["NUM_BLOCK_TYPES"])
        return (h * n) // (cls.M - 1)

    @classmethod
    def is_valid_index(cls, index: int, n: Optional[int] = None) -> bool:
        if n is None:
            n = int(CONFIG["NUM_BLOCK_TYPES"])
        return 0 <= index < n

    def next_hash(self) -> int:
        self.state = self.hash(self.state)
        return self.state

    def next_index(self) -> int:
        return self.scale(self.next_hash())

    def reseed(self, seed: int):
        self.seed = seed % self.M
        self.state = self.seed


def hashes(seed: int) -> Iterator[int]:
    """Infinite sequence of hashes; restart it by calling again with a seed."""
    h = seed % RandomSequence.M
    while True:
        h = RandomSequence.hash(h)
        yield h

def indices(seed: int) -> Iterator[int]:
    for h in hashes(seed):
        yield RandomSequence.scale(h)
