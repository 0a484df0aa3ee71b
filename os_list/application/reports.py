import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Tuple

import aiohttp

from os_list.application.projector import ProjectionOptions, ResponseProjector
from os_list.application.query_builder import build_details_query, build_vulnerabilities_query
from os_list.domain.fields import CatalogField, DetailField, VulnerabilityField
from os_list.domain.models import Projection, QueryParameters
from os_list.infrastructure.github_client import GitHubGraphQLClient

logger = logging.getLogger(__name__)


class RepositoryReport(ABC):
    """
    A report over one page of an owner's repositories.

    Running a report issues exactly one GraphQL request. Paging further is up
    to the caller, who passes the last cursor of the previous page.
    """

    separate_rows = False

    def __init__(
        self,
        github_client: GitHubGraphQLClient,
        projector: Optional[ResponseProjector] = None,
        options: ProjectionOptions = ProjectionOptions(),
    ):
        self.github_client = github_client
        self.projector = projector or ResponseProjector()
        self.options = options

    @property
    @abstractmethod
    def columns(self) -> Tuple[CatalogField, ...]:
        ...

    @property
    def headers(self) -> Tuple[str, ...]:
        return tuple(column.label for column in self.columns)

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(column.width for column in self.columns)

    @abstractmethod
    def build_query(self, params: QueryParameters) -> str:
        ...

    @abstractmethod
    def project(self, response: Dict[str, Any]) -> Projection:
        ...

    async def fetch(self, params: QueryParameters) -> Dict[str, Any]:
        query = self.build_query(params)
        async with aiohttp.ClientSession() as session:
            return await self.github_client.execute(session, query)

    async def run(self, params: QueryParameters) -> Projection:
        """
        Fetches the page described by ``params`` and projects it into rows.

        FetchException from the client propagates unchanged.
        """
        logger.info(f"Fetching {params.count} repositories for {params.owner}.")
        response = await self.fetch(params)

        if not response:
            logger.warning("No data to show for the requested owner.")

        projection = self.project(response)
        logger.info(f"Projected {len(projection.rows)} rows out of {projection.total_count} repositories.")
        return projection


class DetailsReport(RepositoryReport):
    def __init__(
        self,
        github_client: GitHubGraphQLClient,
        fields: Sequence[DetailField] = tuple(DetailField),
        projector: Optional[ResponseProjector] = None,
        options: ProjectionOptions = ProjectionOptions(),
    ):
        super().__init__(github_client, projector, options)
        self.fields = tuple(fields)

    @property
    def columns(self) -> Tuple[CatalogField, ...]:
        return self.fields

    def build_query(self, params: QueryParameters) -> str:
        return build_details_query(params.owner, params.count, params.topic, params.cursor)

    def project(self, response: Dict[str, Any]) -> Projection:
        return self.projector.project_details(response, self.fields, self.options)


class VulnerabilitiesReport(RepositoryReport):
    separate_rows = True

    @property
    def columns(self) -> Tuple[CatalogField, ...]:
        return tuple(VulnerabilityField)

    def build_query(self, params: QueryParameters) -> str:
        return build_vulnerabilities_query(params.owner, params.count, params.topic, params.cursor)

    def project(self, response: Dict[str, Any]) -> Projection:
        return self.projector.project_vulnerabilities(response, self.options)
