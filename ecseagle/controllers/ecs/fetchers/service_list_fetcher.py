"""Service list fetcher - enumerates every service of every cluster."""

from __future__ import annotations

import logging

from ecseagle.controllers.ecs.gateway import RemoteDataGateway
from ecseagle.controllers.ecs.parsers.service_parser import ServiceParser
from ecseagle.models.core.service_info import ServiceSummary

logger = logging.getLogger(__name__)


class ServiceListFetcher:
    """Fetches the fleet list: services grouped by cluster, in API order."""

    def __init__(
        self,
        gateway: RemoteDataGateway,
        parser: ServiceParser | None = None,
    ) -> None:
        self._gateway = gateway
        self._parser = parser or ServiceParser()

    def fetch_service_list(self) -> list[ServiceSummary]:
        """List all services of all clusters; any gateway error propagates."""
        summaries: list[ServiceSummary] = []
        clusters = self._gateway.list_clusters()
        for cluster_arn in clusters:
            for service_arn in self._gateway.list_services(cluster_arn):
                summaries.append(self._parser.parse_service_summary(service_arn, cluster_arn))
        logger.info("Found %d services in %d clusters", len(summaries), len(clusters))
        return summaries
