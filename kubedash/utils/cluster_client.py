from typing import Any, Dict, List, NamedTuple
from krkn_lib.k8s.krkn_kubernetes import KrknKubernetes
from kubernetes.client.models import V1Pod
from kubedash.utils.logger import get_logger
from kubedash.models.coordinates import ResourceCoordinates, ResourceKind
from kubedash.models.custom_errors import UnsupportedResourceKindError

logger = get_logger(__name__)


class _KindEndpoints(NamedTuple):
    read: str  # CoreV1Api method used without a tenant filter
    replace: str
    tenant_path: str  # Path of the object on multi-tenant clusters
    response_type: str


_ENDPOINTS: Dict[ResourceKind, _KindEndpoints] = {
    ResourceKind.PERSISTENT_VOLUME: _KindEndpoints(
        read="read_persistent_volume",
        replace="replace_persistent_volume",
        tenant_path="/api/v1/tenants/{tenant}/persistentvolumes/{name}",
        response_type="V1PersistentVolume",
    ),
    ResourceKind.REPLICATION_CONTROLLER: _KindEndpoints(
        read="read_namespaced_replication_controller",
        replace="replace_namespaced_replication_controller",
        tenant_path="/api/v1/tenants/{tenant}/namespaces/{namespace}/replicationcontrollers/{name}",
        response_type="V1ReplicationController",
    ),
}

_TENANT_PODS_PATH = "/api/v1/tenants/{tenant}/namespaces/{namespace}/pods"


class ClusterClient:
    """
    Get and update single objects of the cluster control plane.

    Requests without a tenant filter go through the stock core/v1 API. A
    specific tenant is addressed through the tenant-scoped paths of
    multi-tenant clusters.
    """

    def __init__(self, kubeconfig: str):
        self.kubeconfig = kubeconfig
        self.krkn_k8s = KrknKubernetes(kubeconfig_path=kubeconfig)
        self.api_client = self.krkn_k8s.api_client
        self.core_api = self.krkn_k8s.cli
        logger.debug("ClusterClient initialized with kubeconfig: %s", kubeconfig)

    def get(self, kind: ResourceKind, coordinates: ResourceCoordinates) -> Any:
        endpoints = self.__endpoints(kind)
        if coordinates.all_tenants:
            read = getattr(self.core_api, endpoints.read)
            if kind.namespaced:
                return read(coordinates.name, coordinates.namespace)
            return read(coordinates.name)

        return self.__call_tenant_api(
            endpoints.tenant_path,
            "GET",
            coordinates,
            response_type=endpoints.response_type,
        )

    def update(self, kind: ResourceKind, coordinates: ResourceCoordinates, obj: Any) -> Any:
        endpoints = self.__endpoints(kind)
        if coordinates.all_tenants:
            replace = getattr(self.core_api, endpoints.replace)
            if kind.namespaced:
                return replace(coordinates.name, coordinates.namespace, obj)
            return replace(coordinates.name, obj)

        return self.__call_tenant_api(
            endpoints.tenant_path,
            "PUT",
            coordinates,
            response_type=endpoints.response_type,
            body=obj,
        )

    def list_pods(
        self, coordinates: ResourceCoordinates, label_selector: str
    ) -> List[V1Pod]:
        """List pods in the namespace of ``coordinates`` matching ``label_selector``."""
        logger.debug(
            "Listing pods in namespace %s with selector '%s'",
            coordinates.namespace,
            label_selector,
        )
        if coordinates.all_tenants:
            return self.core_api.list_namespaced_pod(
                namespace=coordinates.namespace, label_selector=label_selector
            ).items

        pod_list = self.__call_tenant_api(
            _TENANT_PODS_PATH,
            "GET",
            coordinates,
            response_type="V1PodList",
            query_params=[("labelSelector", label_selector)],
        )
        return pod_list.items

    def __call_tenant_api(
        self,
        path: str,
        method: str,
        coordinates: ResourceCoordinates,
        response_type: str,
        body: Any = None,
        query_params: list = None,
    ) -> Any:
        path_params = {"tenant": coordinates.tenant, "name": coordinates.name}
        if coordinates.namespace:
            path_params["namespace"] = coordinates.namespace
        header_params = {
            "Accept": self.api_client.select_header_accept(["application/json"]),
        }
        if body is not None:
            header_params["Content-Type"] = "application/json"
        return self.api_client.call_api(
            path,
            method,
            path_params=path_params,
            query_params=query_params or [],
            header_params=header_params,
            body=body,
            response_type=response_type,
            auth_settings=["BearerToken"],
            _return_http_data_only=True,
        )

    @staticmethod
    def __endpoints(kind: ResourceKind) -> _KindEndpoints:
        try:
            return _ENDPOINTS[kind]
        except KeyError:
            raise UnsupportedResourceKindError(f"Unsupported resource kind: {kind}")
