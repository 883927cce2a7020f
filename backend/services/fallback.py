"""Ordered fallback chain over generative backends.

An attempt is an async callable returning a result or ``None``. Attempts run
strictly in order and the first non-``None`` result wins. When every backend
fails, the deterministic fallback supplies the result.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from services.backends.base import GenerativeBackend
from services.backends.registry import get_backend_chain
from services.errors import BackendError, BackendMalformedOutput

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class AttemptResult(Generic[T]):
    source: str
    value: T


Attempt = Callable[[], Awaitable["AttemptResult[T] | None"]]


async def backend_attempt(
    backend: GenerativeBackend, prompt: str, parse: Callable[[str], T | None]
) -> AttemptResult[T] | None:
    """Generate with one backend and parse its output. Failures become None."""
    try:
        text = await backend.generate(prompt)
        try:
            value = parse(text)
        except Exception as e:
            raise BackendMalformedOutput(f"{backend.name} output could not be parsed: {e!r}") from e
        if value is None:
            raise BackendMalformedOutput(f"{backend.name} output could not be parsed")
    except BackendError as e:
        logger.warning("Backend %s failed: %s", backend.name, e)
        return None
    return AttemptResult(source=backend.name, value=value)


async def first_success(attempts: Iterable[Attempt]) -> AttemptResult | None:
    for attempt in attempts:
        result = await attempt()
        if result is not None:
            return result
    return None


async def generate_with_fallback(
    prompt: str,
    parse: Callable[[str], T | None],
    fallback: Callable[[], T],
    fallback_source: str,
    backends: list[GenerativeBackend] | None = None,
) -> AttemptResult[T]:
    """Run every configured backend in order, then the deterministic fallback."""
    chain = get_backend_chain() if backends is None else backends

    def _make_attempt(backend: GenerativeBackend) -> Attempt:
        return lambda: backend_attempt(backend, prompt, parse)

    result = await first_success(_make_attempt(b) for b in chain)
    if result is not None:
        logger.info("Using %s result", result.source)
        return result

    logger.info("No backend produced a usable result, using %s fallback", fallback_source)
    return AttemptResult(source=fallback_source, value=fallback())
