"""Report orchestration: scan manifests, enrich dependencies, write the workbook."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ._enrichment import Enricher
from ._report import (
    BACKEND_HEADERS,
    BACKEND_SHEET,
    WEB_HEADERS,
    WEB_SHEET,
    ReportBuilder,
)
from ._scanning import (
    GoModScanner,
    ManifestDependencies,
    PackageJSONScanner,
    compile_patterns,
    resolve_root,
)
from .config import Config
from .console import print_step_header
from .exceptions import EnrichmentError
from .logging_config import logger


@dataclass
class SheetStats:
    """Counters for one report sheet."""

    sheet: str
    discovered: int = 0
    written: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class ReportSummary:
    """Outcome of a completed report run."""

    output_file: str
    sheets: List[SheetStats] = field(default_factory=list)

    def get(self, sheet: str) -> Optional[SheetStats]:
        for stats in self.sheets:
            if stats.sheet == sheet:
                return stats
        return None


def build_sheet(
    builder: ReportBuilder,
    enricher: Enricher,
    sheet: str,
    headers: List[str],
    dependencies: ManifestDependencies,
) -> SheetStats:
    """
    Enrich dependencies one by one and write them to a sheet.

    A failure enriching one dependency is logged and never stops the
    others. When the failure carries a partial row, that row is written.
    InvalidRepoUrlError is not caught and aborts the run.

    Args:
        builder: Report being built
        enricher: Enricher with an open session
        sheet: Sheet name
        headers: Header row of the sheet
        dependencies: Dependencies found by the scanner

    Returns:
        SheetStats for the sheet
    """
    stats = SheetStats(sheet=sheet, discovered=len(dependencies))
    builder.add_sheet(sheet, headers)

    for dependency in dependencies.values():
        try:
            row = enricher.enrich(dependency)
        except EnrichmentError as e:
            logger.warning(str(e))
            stats.failed += 1
            if e.row is not None:
                builder.write_row(sheet, e.row)
                stats.written += 1
            continue

        if row is None:
            stats.skipped += 1
            continue

        builder.write_row(sheet, row)
        stats.written += 1

    logger.info(f"Sheet {sheet}: {stats.written} rows written, {stats.skipped} skipped, {stats.failed} failed")
    return stats


def run_report(config: Config, enricher: Optional[Enricher] = None) -> ReportSummary:
    """
    Produce the dependency report described by a configuration.

    The package manifests feed the "Web" sheet and the module manifests
    feed the "Backend" sheet. The workbook is saved only after both sheets
    are complete, so a fatal error leaves no output file.

    Args:
        config: Validated configuration
        enricher: Optional Enricher (a default one is created otherwise)

    Returns:
        ReportSummary with per-sheet counters

    Raises:
        DepsReportError: On any fatal error
    """
    exclude_patterns = compile_patterns(config.exclude)
    skip_patterns = compile_patterns(config.skip)
    root = resolve_root(config.directory)

    builder = ReportBuilder(config.output_file)
    summary = ReportSummary(output_file=str(Path(config.output_file)))

    with enricher or Enricher(timeout=config.timeout) as active_enricher:
        print_step_header(1, "JavaScript dependencies (package.json)")
        web_deps = PackageJSONScanner(root, exclude_patterns, skip_patterns).scan()
        summary.sheets.append(build_sheet(builder, active_enricher, WEB_SHEET, WEB_HEADERS, web_deps))

        print_step_header(2, "Go dependencies (go.mod)")
        go_deps = GoModScanner(root, exclude_patterns).scan()
        summary.sheets.append(build_sheet(builder, active_enricher, BACKEND_SHEET, BACKEND_HEADERS, go_deps))

    builder.save()
    return summary
