"""Analysis pipeline orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field

from design_collector.analysis.generator import GeneratorError, TextGenerator
from design_collector.analysis.normalizer import normalize_analysis
from design_collector.analysis.prompt import build_analysis_prompt
from design_collector.core.logging import get_logger
from design_collector.core.metrics import GENERATOR_FAILURES, STORED_RECORDS, SUBMISSIONS
from design_collector.models.snapshot import DesignSnapshot
from design_collector.store.csv_table import DesignTable

logger = get_logger(__name__)

FALLBACK_NOTE = "Saved raw data (analysis skipped)"


@dataclass(slots=True)
class AnalysisOutcome:
    success: bool
    analysis: str | None
    saved_to: list[str] = field(default_factory=list)
    record_id: str | None = None
    note: str | None = None


class AnalysisPipeline:
    """Coordinate the generator call, field normalization and persistence."""

    def __init__(self, table: DesignTable, generator: TextGenerator) -> None:
        self.table = table
        self.generator = generator

    def analyze(self, snapshot: DesignSnapshot) -> AnalysisOutcome:
        """Persist one snapshot; generator failures degrade to fallback fields.

        Storage errors are not caught here.
        """
        logger.info("Analyzing %s", snapshot.url, extra={"ctx_url": snapshot.url})
        text = self._generate(snapshot)

        normalized = normalize_analysis(snapshot, text)
        logger.info(
            "Normalized %s with %d fallback fields",
            snapshot.url,
            len(normalized.fallbacks),
            extra={
                "ctx_url": snapshot.url,
                "ctx_used_generator": normalized.used_generator,
                "ctx_fallbacks": normalized.fallbacks,
            },
        )

        created = self.table.create(snapshot.url, normalized.fields)
        SUBMISSIONS.labels(outcome="duplicate" if created.duplicate else "saved").inc()
        self._update_record_metric()

        return AnalysisOutcome(
            success=True,
            analysis=text,
            saved_to=created.saved_to,
            record_id=created.record_id,
            note=None if text is not None else FALLBACK_NOTE,
        )

    def _generate(self, snapshot: DesignSnapshot) -> str | None:
        prompt = build_analysis_prompt(snapshot)
        try:
            return self.generator.generate(prompt)
        except GeneratorError as exc:
            GENERATOR_FAILURES.inc()
            logger.warning("Analysis skipped for %s: %s", snapshot.url, exc, extra={"ctx_url": snapshot.url})
            return None

    def _update_record_metric(self) -> None:
        try:
            STORED_RECORDS.set(self.table.count())
        except OSError:  # pragma: no cover - gauge refresh only
            logger.debug("Could not refresh record gauge", exc_info=True)


__all__ = ["AnalysisOutcome", "AnalysisPipeline", "FALLBACK_NOTE"]
