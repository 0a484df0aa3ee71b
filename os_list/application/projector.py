import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from os_list.application.text import flag_cell, severity_color, truncate_words
from os_list.domain.fields import DetailField
from os_list.domain.models import Cell, Projection, ReportRow, RepositoryRecord, Span
from os_list.infrastructure.acl import GitHubTranslator

logger = logging.getLogger(__name__)

ADVISORY_DIVIDER = "-" * 60


class ProjectionOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    full: bool = Field(False, description="Disable truncation of long text")
    description_words: int = Field(10, ge=0, description="Word limit for repository descriptions")
    advisory_words: int = Field(20, ge=0, description="Word limit for advisory descriptions")


def _description(record: RepositoryRecord, options: ProjectionOptions) -> Cell:
    if options.full:
        return Cell.of(record.description)
    return Cell.of(truncate_words(record.description, options.description_words))


# One extractor per catalog column, in catalog order.
DETAIL_EXTRACTORS: Dict[DetailField, Callable[[RepositoryRecord, ProjectionOptions], Cell]] = {
    DetailField.NAME: lambda record, _: Cell.of(record.name),
    DetailField.DESCRIPTION: _description,
    DetailField.LICENSE: lambda record, _: Cell.of(record.license),
    DetailField.URL: lambda record, _: Cell.of(record.url),
    DetailField.STAR_COUNT: lambda record, _: Cell.of(record.star_count),
    DetailField.FORK_COUNT: lambda record, _: Cell.of(record.fork_count),
    DetailField.OPEN_ISSUES: lambda record, _: Cell.of(record.open_issues),
    DetailField.OPEN_PRS: lambda record, _: Cell.of(record.open_prs),
    DetailField.HAS_CODE_OF_CONDUCT: lambda record, _: flag_cell(record.has_code_of_conduct),
    DetailField.HAS_CUSTOM_OG_IMAGE: lambda record, _: flag_cell(record.has_custom_og_image),
    DetailField.HAS_ISSUE_TEMPLATES: lambda record, _: flag_cell(record.has_issue_templates),
    DetailField.HAS_PR_TEMPLATES: lambda record, _: flag_cell(record.has_pr_templates),
    DetailField.VULNERABILITIES: lambda record, _: Cell.of(record.vulnerability_count),
    DetailField.CURSOR_ID: lambda record, _: Cell.of(record.cursor),
}


class ResponseProjector:
    """
    Turns a GitHub search response into report rows.

    The response is the parsed GraphQL payload (``{"data": {"search": ...}}``).
    Edges are emitted in the order the API returned them.
    """

    def __init__(self, translator: GitHubTranslator = GitHubTranslator()):
        self.translator = translator

    @staticmethod
    def _search(response: Mapping[str, Any]) -> Dict[str, Any]:
        data = (response or {}).get('data') or {}
        return data.get('search') or {}

    def _records(self, search: Mapping[str, Any]) -> Iterable[RepositoryRecord]:
        for edge in search.get('repos') or []:
            yield self.translator.to_domain(edge)

    def _total_count(self, search: Mapping[str, Any]) -> int:
        total_count = search.get('repositoryCount') or 0
        if not total_count:
            logger.warning("Query returned no repositories.")
        return total_count

    def project_details(
        self,
        response: Mapping[str, Any],
        fields: Sequence[DetailField],
        options: ProjectionOptions = ProjectionOptions(),
    ) -> Projection:
        """
        Builds one row per repository with a cell for each selected field.

        Args:
            response (Mapping[str, Any]): Parsed GraphQL response.
            fields (Sequence[DetailField]): Columns to fill, in display order.
            options (ProjectionOptions): Truncation settings.

        Returns:
            Projection: The reported repository total and the rows.
        """
        search = self._search(response)
        total_count = self._total_count(search)
        extractors = [DETAIL_EXTRACTORS[field] for field in fields]

        rows = [
            ReportRow(cells=tuple(extract(record, options) for extract in extractors))
            for record in self._records(search)
        ]

        return Projection(total_count=total_count, rows=tuple(rows))

    def _advisory_spans(self, record: RepositoryRecord, options: ProjectionOptions) -> List[Span]:
        spans: List[Span] = []
        for advisory in record.advisories:
            description = advisory.description
            if not options.full:
                description = truncate_words(description, options.advisory_words)

            spans.extend([
                Span(text="Severity: "),
                Span(text=advisory.severity, color=severity_color(advisory.severity)),
                Span(text=f"\nSummary: {advisory.summary}\n"),
                Span(text=f"Description: {description}\n"),
                Span(text=f"{ADVISORY_DIVIDER}\n"),
            ])
        return spans

    def project_vulnerabilities(
        self,
        response: Mapping[str, Any],
        options: ProjectionOptions = ProjectionOptions(),
    ) -> Projection:
        """Builds one row per repository that has vulnerability alerts; others are skipped."""
        search = self._search(response)
        total_count = self._total_count(search)

        rows = []
        for record in self._records(search):
            if not record.vulnerability_count and not record.advisories:
                logger.debug(f"Skipping {record.name or record.cursor}: no vulnerability alerts.")
                continue

            rows.append(ReportRow(cells=(
                Cell.of(record.name),
                Cell.of(record.url),
                Cell.of(record.vulnerability_count),
                Cell(spans=tuple(self._advisory_spans(record, options))),
                Cell.of(record.cursor),
            )))

        if not rows:
            logger.warning("No vulnerabilities found in the fetched repositories.")

        return Projection(total_count=total_count, rows=tuple(rows))
