"""ECS controller - async facade over the blocking gateway and aggregator."""

from __future__ import annotations

import logging

from ecseagle.constants.defaults import HTTPS_LISTENER_PORT
from ecseagle.controllers.base.base_controller import BaseController
from ecseagle.controllers.ecs.aggregator import StatusAggregator
from ecseagle.controllers.ecs.fetchers.service_list_fetcher import ServiceListFetcher
from ecseagle.controllers.ecs.fetchers.target_group_resolver import TargetGroupResolver
from ecseagle.controllers.ecs.gateway import AwsGateway, RemoteDataGateway
from ecseagle.models.core.service_info import ServiceSummary
from ecseagle.models.core.status import ServiceStatus

logger = logging.getLogger(__name__)


class EcsController(BaseController):
    """Controller used by the app to load the fleet and service snapshots."""

    def __init__(
        self,
        gateway: RemoteDataGateway,
        *,
        listener_port: int = HTTPS_LISTENER_PORT,
    ) -> None:
        super().__init__()
        self._service_list_fetcher = ServiceListFetcher(gateway)
        self._aggregator = StatusAggregator(
            gateway,
            TargetGroupResolver(gateway, listener_port=listener_port),
        )

    @classmethod
    def from_profile(
        cls,
        profile: str | None = None,
        region: str | None = None,
        *,
        listener_port: int = HTTPS_LISTENER_PORT,
    ) -> EcsController:
        """Build a controller on a boto3 session for the given profile/region."""
        return cls(AwsGateway(profile=profile, region=region), listener_port=listener_port)

    @property
    def aggregator(self) -> StatusAggregator:
        return self._aggregator

    async def fetch_service_list(self) -> list[ServiceSummary]:
        return await self.run_blocking(self._service_list_fetcher.fetch_service_list)

    async def fetch_service_status(self, cluster: str, service: str) -> ServiceStatus | None:
        logger.debug("Fetching status of %s/%s", cluster, service)
        return await self.run_blocking(self._aggregator.fetch_service_status, cluster, service)
