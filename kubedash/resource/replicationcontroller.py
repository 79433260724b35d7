import logging
from typing import List, Optional
from kubernetes.client.models import V1ReplicationController
from kubedash.models.common import PodInfo, TypeMeta
from kubedash.models.coordinates import ALL_TENANTS, ResourceCoordinates, ResourceKind
from kubedash.models.replicationcontroller import (
    ReplicationController,
    ReplicationControllerDetail,
    ReplicationControllerSpec,
)
from kubedash.resource.base import ResourceVariant, get_detail
from kubedash.resource.common import (
    get_container_images,
    get_init_container_images,
    get_pod_info,
    to_label_selector,
    to_object_meta,
)
from kubedash.utils.logger import get_logger

logger = get_logger(__name__)


def get_replication_controller_pod_info(
    client, rc: V1ReplicationController, coordinates: ResourceCoordinates
) -> PodInfo:
    """Aggregate the status of the pods selected by ``rc``."""
    pods = client.list_pods(coordinates, to_label_selector(rc.spec.selector))
    current = rc.status.replicas if rc.status is not None else None
    return get_pod_info(current, rc.spec.replicas, pods)


def to_replication_controller(
    rc: V1ReplicationController, pod_info: Optional[PodInfo]
) -> ReplicationController:
    spec = rc.spec
    if pod_info is None:
        # Pod status unavailable, keep the counts the controller reports
        pod_info = PodInfo(
            current=(rc.status.replicas or 0) if rc.status else 0,
            desired=spec.replicas if spec else None,
        )
    pod_spec = spec.template.spec if spec is not None and spec.template is not None else None
    return ReplicationController(
        object_meta=to_object_meta(rc.metadata),
        type_meta=TypeMeta(kind=ResourceKind.REPLICATION_CONTROLLER.value),
        pods=pod_info,
        container_images=get_container_images(pod_spec),
        init_container_images=get_init_container_images(pod_spec),
    )


def to_replication_controller_detail(
    rc: V1ReplicationController,
    pod_info: Optional[PodInfo],
    non_critical_errors: List[Exception],
) -> ReplicationControllerDetail:
    return ReplicationControllerDetail(
        **to_replication_controller(rc, pod_info).model_dump(),
        label_selector=(rc.spec.selector or {}) if rc.spec else {},
        errors=list(non_critical_errors),
    )


class ReplicationControllerVariant(ResourceVariant):
    kind = ResourceKind.REPLICATION_CONTROLLER
    has_auxiliary = True

    def fetch_auxiliary(
        self, client, raw: V1ReplicationController, coordinates: ResourceCoordinates
    ) -> PodInfo:
        return get_replication_controller_pod_info(client, raw, coordinates)

    def project(
        self,
        raw: V1ReplicationController,
        aux: Optional[PodInfo],
        non_critical_errors: List[Exception],
    ) -> ReplicationControllerDetail:
        return to_replication_controller_detail(raw, aux, non_critical_errors)


def get_replication_controller_detail(
    client, namespace: str, name: str, log: Optional[logging.Logger] = None
) -> ReplicationControllerDetail:
    """
    Return detailed information about the given replication controller in the
    given namespace.
    """
    return get_replication_controller_detail_with_multi_tenancy(
        client, ALL_TENANTS, namespace, name, log
    )


def get_replication_controller_detail_with_multi_tenancy(
    client,
    tenant: Optional[str],
    namespace: str,
    name: str,
    log: Optional[logging.Logger] = None,
) -> ReplicationControllerDetail:
    coordinates = ResourceCoordinates(tenant=tenant, namespace=namespace, name=name)
    return get_detail(client, ReplicationControllerVariant(), coordinates, log)


def update_replicas_count(
    client,
    namespace: str,
    name: str,
    spec: ReplicationControllerSpec,
    log: Optional[logging.Logger] = None,
):
    """Update the number of replicas of a replication controller."""
    update_replicas_count_with_multi_tenancy(client, ALL_TENANTS, namespace, name, spec, log)


def update_replicas_count_with_multi_tenancy(
    client,
    tenant: Optional[str],
    namespace: str,
    name: str,
    spec: ReplicationControllerSpec,
    log: Optional[logging.Logger] = None,
):
    """
    Update the number of replicas of a replication controller of ``tenant``.

    The controller is read, only ``spec.replicas`` is changed and the whole
    object is written back. Conflicts reported by the API server are raised
    as they are, nothing is retried.
    """
    log = log or logger
    kind = ResourceKind.REPLICATION_CONTROLLER
    coordinates = ResourceCoordinates(tenant=tenant, namespace=namespace, name=name)
    ReplicationControllerVariant().validate(coordinates)

    log.info(
        "Updating replicas count to %d for replication controller %s",
        spec.replicas,
        coordinates.describe(),
    )

    rc = client.get(kind, coordinates)
    rc.spec.replicas = spec.replicas
    client.update(kind, coordinates, rc)

    log.info(
        "Successfully updated replicas count to %d for replication controller %s",
        spec.replicas,
        coordinates.describe(),
    )
