"""
Sequence registry: named monotonic counters for unique test values.

A sequence pairs a counter with a generator function. Every call to
``next`` bumps the counter by one and returns ``generator(counter)``, so
the k-th value drawn from a sequence is always ``generator(k)``. Counters
are shared by every caller holding the same registry; use a fresh registry
(or ``reset``/``rewind``) to isolate test scenarios.
"""

import logging
from typing import Any, Callable, Dict, List

from fabricate.domain import Sequence, identity
from fabricate.validation import UndefinedSequenceError

logger = logging.getLogger(__name__)


class SequenceRegistry:
    """
    Registry of named sequences backed by a Python dictionary.

    Redefining a name replaces the sequence and starts its counter over;
    values already handed out are unaffected.
    """

    def __init__(self) -> None:
        self._sequences: Dict[str, Sequence] = {}

    def define_sequence(
        self, name: str, generator: Callable[[int], Any] = identity
    ) -> Sequence:
        """Register (or replace) a sequence with its counter at 0.

        Args:
            name: Sequence name
            generator: Callable turning the counter into a value

        Returns:
            The registered Sequence
        """
        replaced = name in self._sequences
        sequence = Sequence(name=name, generator=generator)
        self._sequences[name] = sequence

        logger.info(
            "Sequence defined",
            extra={"sequence_name": name, "replaced": replaced},
        )
        return sequence

    def next(self, name: str) -> Any:
        """Advance the named sequence and return its next value.

        Args:
            name: Sequence name

        Returns:
            ``generator(counter)`` for the incremented counter

        Raises:
            UndefinedSequenceError: If no sequence is registered under name
        """
        sequence = self.get(name)
        value = sequence.advance()

        logger.debug(
            "Sequence advanced",
            extra={"sequence_name": name, "counter": sequence.counter},
        )
        return value

    def get(self, name: str) -> Sequence:
        try:
            return self._sequences[name]
        except KeyError:
            logger.warning(
                "Sequence lookup failed",
                extra={"sequence_name": name},
            )
            raise UndefinedSequenceError(name) from None

    def rewind(self, name: str) -> None:
        """Put the named sequence's counter back to 0."""
        self.get(name).counter = 0
        logger.debug("Sequence rewound", extra={"sequence_name": name})

    def names(self) -> List[str]:
        return sorted(self._sequences)

    def reset(self) -> None:
        """Forget every sequence."""
        logger.debug(
            "Resetting sequence registry",
            extra={"sequence_count": len(self._sequences)},
        )
        self._sequences.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._sequences

    def __len__(self) -> int:
        return len(self._sequences)
