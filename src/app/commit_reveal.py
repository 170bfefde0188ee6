from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from typing import Final, Protocol, Sequence
from urllib.parse import quote

KEY_BYTES: Final[int] = 32
VERIFY_BASE_URL: Final[str] = "https://emn178.github.io/online-tools/sha256.html"

logger = logging.getLogger(__name__)


class EntropySourceFailure(RuntimeError):
    """The platform could not supply secure randomness."""


class RandomSource(Protocol):
    def token_bytes(self, nbytes: int) -> bytes: ...

    def randbelow(self, exclusive_upper_bound: int) -> int: ...


@dataclass(frozen=True)
class Commitment:
    key: str
    move_index: int
    move: str
    tag: str


@dataclass(frozen=True)
class Reveal:
    key: str
    move: str


def compute_tag(key: str, message: str) -> str:
    # The hex key string itself is the HMAC key, so web HMAC tools that take
    # the key as UTF-8 text reproduce the same tag.
    return hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_tag: str, key: str, move: str) -> bool:
    return hmac.compare_digest(expected_tag, compute_tag(key, move))


def verification_url(*, key: str, move: str) -> str:
    return (
        f"{VERIFY_BASE_URL}?input={quote(move, safe='')}&input_type=utf-8"
        f"&output_type=hex&hmac_enabled=1&hmac_input_type=utf-8"
        f"&hmac_key={quote(key, safe='')}"
    )


class FairnessEngine:
    """Commits to a random move before the user chooses, and reveals it after.

    Only ``Commitment.tag`` may be shown before the round is resolved; the
    key and move stay hidden until :meth:`reveal`.
    """

    def __init__(self, rng: RandomSource = secrets, key_bytes: int = KEY_BYTES) -> None:  # type: ignore[assignment]
        self._rng = rng
        self._key_bytes = key_bytes

    def commit(self, moves: Sequence[str]) -> Commitment:
        if not moves:
            raise ValueError("cannot commit to a move from an empty move set")

        try:
            key = self._rng.token_bytes(self._key_bytes).hex()
            index = self._rng.randbelow(len(moves))
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceFailure(f"secure random source unavailable: {exc}") from exc

        move = moves[index]
        commitment = Commitment(key=key, move_index=index, move=move, tag=compute_tag(key, move))
        logger.debug("committed to one of %d moves, tag=%s", len(moves), commitment.tag)
        return commitment

    def reveal(self, commitment: Commitment) -> Reveal:
        logger.debug("revealing commitment tag=%s", commitment.tag)
        return Reveal(key=commitment.key, move=commitment.move)
