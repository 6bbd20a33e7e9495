"""Named hash algorithm registry.

Nothing is registered at import time. The hosting application builds a
`HashRegistry` during startup and calls `register_md5` (or `register`) on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List

from .config import ALGORITHM_NAME, BLOCK_SIZE, SIZE
from .digest import Digest
from .errors import ErrorCode, SpecError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HashAlgorithm:
    name: str
    factory: Callable[[], Digest]
    digest_size: int
    block_size: int


MD5 = HashAlgorithm(ALGORITHM_NAME, Digest, SIZE, BLOCK_SIZE)


class HashRegistry:
    def __init__(self) -> None:
        self._algorithms: Dict[str, HashAlgorithm] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(self, algorithm: HashAlgorithm) -> None:
        key = self._key(algorithm.name)
        if key in self._algorithms:
            raise SpecError(
                ErrorCode.DUPLICATE_ALGORITHM, f"{algorithm.name} is already registered"
            )
        self._algorithms[key] = algorithm
        logger.debug(f"Registered hash algorithm {algorithm.name}")

    def lookup(self, name: str) -> HashAlgorithm:
        try:
            return self._algorithms[self._key(name)]
        except KeyError:
            raise SpecError(ErrorCode.UNKNOWN_ALGORITHM, f"unknown hash algorithm {name!r}") from None

    def new(self, name: str) -> Digest:
        return self.lookup(name).factory()

    def names(self) -> List[str]:
        return sorted(a.name for a in self._algorithms.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._algorithms

    def __iter__(self) -> Iterator[HashAlgorithm]:
        return iter(self._algorithms.values())

    def __len__(self) -> int:
        return len(self._algorithms)


def register_md5(registry: HashRegistry) -> HashAlgorithm:
    registry.register(MD5)
    return MD5
