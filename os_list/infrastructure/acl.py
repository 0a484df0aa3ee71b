from typing import Any, Dict, List, Optional

from os_list.domain.models import Advisory, RepositoryRecord


def _mapping(value: Any) -> Dict[str, Any]:
    # GraphQL returns null for absent objects, which .get defaults don't cover.
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _count(value: Any) -> int:
    return value if isinstance(value, int) and value >= 0 else 0


class GitHubTranslator:
    """
    Anti-corruption layer that translates raw GitHub GraphQL search edges into RepositoryRecord instances.
    """

    @staticmethod
    def to_advisory(raw_alert: Dict[str, Any]) -> Advisory:
        vulnerability = _mapping(_mapping(raw_alert).get('securityVulnerability'))
        advisory = _mapping(vulnerability.get('advisory'))

        return Advisory(
            severity=_text(vulnerability.get('severity')),
            summary=_text(advisory.get('summary')),
            description=_text(advisory.get('description')),
        )

    @staticmethod
    def to_domain(raw_edge: Dict[str, Any]) -> RepositoryRecord:
        """
        Transforms a raw search edge (``{cursor, repo}``) into a RepositoryRecord.

        Every attribute missing from the edge falls back to its default on its
        own, so a partial node still yields a record.

        Args:
            raw_edge (Dict[str, Any]): One element of ``data.search.repos``.

        Returns:
            RepositoryRecord: The repository with defaults applied.
        """
        raw_edge = _mapping(raw_edge)
        repo = _mapping(raw_edge.get('repo'))
        alerts_data = _mapping(repo.get('vulnerabilityAlerts'))

        raw_alerts: List[Any] = alerts_data.get('nodes') or []
        advisories = tuple(GitHubTranslator.to_advisory(alert) for alert in raw_alerts)

        vulnerability_count: Optional[int] = alerts_data.get('totalCount')
        if not isinstance(vulnerability_count, int):
            vulnerability_count = len(advisories)

        return RepositoryRecord(
            name=_text(repo.get('name')),
            description=_text(repo.get('description')),
            license=_text(_mapping(repo.get('licenseInfo')).get('type')),
            url=_text(repo.get('url')),
            star_count=_count(repo.get('stargazerCount')),
            fork_count=_count(repo.get('forkCount')),
            open_issues=_count(_mapping(repo.get('openIssues')).get('totalCount')),
            open_prs=_count(_mapping(repo.get('openPRs')).get('totalCount')),
            # Any code of conduct object counts, even one with empty fields.
            has_code_of_conduct=bool(repo.get('codeOfConduct')),
            has_custom_og_image=bool(repo.get('usesCustomOpenGraphImage')),
            has_issue_templates=bool(repo.get('issueTemplates')),
            has_pr_templates=bool(repo.get('pullRequestTemplates')),
            vulnerability_count=_count(vulnerability_count),
            advisories=advisories,
            cursor=_text(raw_edge.get('cursor')),
        )
