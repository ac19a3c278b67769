"""Identifier generation for messages, payment blocks and transactions."""

from __future__ import annotations

import hashlib

from sepa_ct.domain.shared.time import ClockPort, RandomSourcePort

SUFFIX_LENGTH = 12
NAME_PREFIX_LENGTH = 22
MESSAGE_ID_TIME_FORMAT = "%d%m%Y%S%M"
CREATION_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


class IdentifierFactory:
    """Build MsgId, PmtInfId and EndToEndId values.

    Identifiers are a readable prefix plus a 12 hex character suffix taken
    from the MD5 of a random number. They are uniqueness aids, not
    cryptographic identifiers; collisions are unlikely, not impossible.
    """

    def __init__(
        self,
        originator_name: str,
        clock: ClockPort,
        random_source: RandomSourcePort,
    ):
        self._originator_name = originator_name
        self._clock = clock
        self._random_source = random_source

    def _suffix(self) -> str:
        seed = str(self._random_source.next_int()).encode()
        return hashlib.md5(seed, usedforsecurity=False).hexdigest()[:SUFFIX_LENGTH]

    def message_id(self) -> str:
        timestamp = self._clock.now().strftime(MESSAGE_ID_TIME_FORMAT)
        return f"{timestamp}-{self._suffix()}"

    def payment_id(self) -> str:
        """Originator name (max 22 chars) plus random suffix, at most 35 chars."""
        return f"{self._originator_name[:NAME_PREFIX_LENGTH]}-{self._suffix()}"

    def creation_timestamp(self) -> str:
        return self._clock.now().strftime(CREATION_TIME_FORMAT)
