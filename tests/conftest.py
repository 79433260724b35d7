"""
Pytest configuration and shared fixtures
"""

import copy
import datetime
import tempfile
from unittest.mock import Mock
import pytest

from kubernetes.client.exceptions import ApiException
from kubernetes.client.models import (
    V1Container,
    V1HostPathVolumeSource,
    V1ObjectMeta,
    V1ObjectReference,
    V1PersistentVolume,
    V1PersistentVolumeSpec,
    V1PersistentVolumeStatus,
    V1Pod,
    V1PodSpec,
    V1PodStatus,
    V1PodTemplateSpec,
    V1ReplicationController,
    V1ReplicationControllerSpec,
    V1ReplicationControllerStatus,
)

from kubedash.models.coordinates import ResourceCoordinates, ResourceKind


class FakeClusterClient:
    """
    In-memory stand-in for ClusterClient.

    Objects are stored per (kind, tenant, namespace, name) and copied on the
    way in and out, like a round trip through the API server would.
    """

    def __init__(self):
        self.objects = {}
        self.pods = {}
        self.list_pods_error = None
        self.calls = []

    def add(self, kind: ResourceKind, obj, tenant=None):
        namespace = obj.metadata.namespace if kind.namespaced else None
        self.objects[(kind, tenant, namespace, obj.metadata.name)] = copy.deepcopy(obj)

    def add_pods(self, namespace: str, pods, tenant=None):
        self.pods[(tenant, namespace)] = list(pods)

    def stored(self, kind: ResourceKind, name: str, namespace=None, tenant=None):
        return self.objects[(kind, tenant, namespace, name)]

    def _key(self, kind, coordinates: ResourceCoordinates):
        namespace = coordinates.namespace if kind.namespaced else None
        return (kind, coordinates.tenant, namespace, coordinates.name)

    def get(self, kind, coordinates):
        self.calls.append(("get", kind, coordinates))
        key = self._key(kind, coordinates)
        if key not in self.objects:
            raise ApiException(status=404, reason="Not Found")
        return copy.deepcopy(self.objects[key])

    def update(self, kind, coordinates, obj):
        self.calls.append(("update", kind, coordinates))
        key = self._key(kind, coordinates)
        if key not in self.objects:
            raise ApiException(status=404, reason="Not Found")
        self.objects[key] = copy.deepcopy(obj)
        return copy.deepcopy(obj)

    def list_pods(self, coordinates, label_selector):
        self.calls.append(("list_pods", label_selector, coordinates))
        if self.list_pods_error is not None:
            raise self.list_pods_error
        return list(self.pods.get((coordinates.tenant, coordinates.namespace), []))


def make_pod(name: str, phase: str, namespace: str = "default") -> V1Pod:
    return V1Pod(
        metadata=V1ObjectMeta(name=name, namespace=namespace, labels={"app": "web"}),
        status=V1PodStatus(phase=phase),
    )


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def mock_logger():
    return Mock()


@pytest.fixture
def raw_persistent_volume():
    return V1PersistentVolume(
        metadata=V1ObjectMeta(
            name="pv-1",
            labels={"type": "local"},
            uid="0b8c2f5e-pv-1",
            creation_timestamp=datetime.datetime(2024, 1, 2, 3, 4, 5),
        ),
        spec=V1PersistentVolumeSpec(
            capacity={"storage": "10Gi"},
            access_modes=["ReadWriteOnce"],
            persistent_volume_reclaim_policy="Retain",
            storage_class_name="manual",
            mount_options=["hard"],
            claim_ref=V1ObjectReference(namespace="default", name="data-claim"),
            host_path=V1HostPathVolumeSource(path="/mnt/data"),
        ),
        status=V1PersistentVolumeStatus(
            phase="Bound", message="bound to data-claim", reason=""
        ),
    )


@pytest.fixture
def raw_replication_controller():
    return V1ReplicationController(
        metadata=V1ObjectMeta(
            name="rc-1",
            namespace="default",
            labels={"app": "web"},
            uid="6d1f0a2c-rc-1",
        ),
        spec=V1ReplicationControllerSpec(
            replicas=2,
            min_ready_seconds=10,
            selector={"app": "web"},
            template=V1PodTemplateSpec(
                metadata=V1ObjectMeta(labels={"app": "web"}),
                spec=V1PodSpec(
                    containers=[V1Container(name="web", image="nginx:1.25")],
                    init_containers=[V1Container(name="init", image="busybox:1.36")],
                ),
            ),
        ),
        status=V1ReplicationControllerStatus(replicas=2, ready_replicas=1),
    )


@pytest.fixture
def cluster(raw_persistent_volume, raw_replication_controller):
    """Fake cluster holding pv-1, default/rc-1 and its pods"""
    client = FakeClusterClient()
    client.add(ResourceKind.PERSISTENT_VOLUME, raw_persistent_volume)
    client.add(ResourceKind.REPLICATION_CONTROLLER, raw_replication_controller)
    client.add_pods(
        "default",
        [make_pod("rc-1-a", "Running"), make_pod("rc-1-b", "Pending")],
    )
    return client
