"""Client for the external text-generation command."""

from __future__ import annotations

import os
import subprocess
import time
from typing import Protocol, Sequence

from design_collector.core.logging import get_logger
from design_collector.core.metrics import GENERATOR_LATENCY

logger = get_logger(__name__)


class GeneratorError(RuntimeError):
    """The generator failed, timed out or produced nothing."""


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str:  # pragma: no cover - interface
        ...


class CommandGenerator:
    """Pipe a prompt into a CLI on stdin and return its stdout. One attempt, no retries."""

    def __init__(self, argv: Sequence[str], timeout: float = 60.0) -> None:
        if not argv:
            raise ValueError("generator command must not be empty")
        self.argv = list(argv)
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        started = time.perf_counter()
        try:
            completed = subprocess.run(
                self.argv,
                input=prompt,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env={**os.environ, "NO_COLOR": "1"},
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise GeneratorError(f"{self.argv[0]} timed out after {self.timeout:g}s") from exc
        except OSError as exc:
            raise GeneratorError(f"{self.argv[0]} could not be started: {exc}") from exc
        finally:
            GENERATOR_LATENCY.observe(time.perf_counter() - started)

        output = completed.stdout.strip()
        if completed.returncode != 0 or not output:
            detail = completed.stderr.strip() or "No output"
            raise GeneratorError(f"{self.argv[0]} failed (code {completed.returncode}): {detail}")
        logger.debug("Generator returned %s characters", len(output))
        return output


class DisabledGenerator:
    """Stand-in used when generation is switched off in settings."""

    def generate(self, prompt: str) -> str:
        raise GeneratorError("text generation is disabled")


__all__ = ["GeneratorError", "TextGenerator", "CommandGenerator", "DisabledGenerator"]
