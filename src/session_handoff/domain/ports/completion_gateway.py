"""Port: completion gateway — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SamplingParameters:
    """Fixed sampling settings sent with every completion call."""

    max_tokens: int
    temperature: float = 0.7
    top_p: float = 1.0


class CompletionGateway(Protocol):
    """Abstract contract for a single-turn, non-streaming text completion."""

    async def complete(self, prompt: str, params: SamplingParameters) -> str | None:
        """Send *prompt* as one user turn and return the first choice's text.

        Returns ``None`` when the service answered successfully but produced
        no choices.  Raises a :class:`ClassifiedError` subclass for every
        transport or HTTP failure.
        """
        ...
