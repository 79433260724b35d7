import logging
from typing import Any, Dict, List, Optional
from kubernetes.client import ApiClient
from kubernetes.client.models import V1PersistentVolume, V1PersistentVolumeSpec
from kubedash.models.common import TypeMeta
from kubedash.models.coordinates import ALL_TENANTS, ResourceCoordinates, ResourceKind
from kubedash.models.persistentvolume import PersistentVolume, PersistentVolumeDetail
from kubedash.resource.base import ResourceVariant, get_detail
from kubedash.resource.common import to_object_meta

# Spec attributes that describe the volume rather than where its data lives
_NON_SOURCE_ATTRIBUTES = frozenset(
    {
        "access_modes",
        "capacity",
        "claim_ref",
        "mount_options",
        "node_affinity",
        "persistent_volume_reclaim_policy",
        "storage_class_name",
        "volume_attributes_class_name",
        "volume_mode",
    }
)


def get_persistent_volume_source(spec: Optional[V1PersistentVolumeSpec]) -> Dict[str, Any]:
    """Return the populated volume source of ``spec`` keyed by its API field name.

    The source is serialized the way the API server returns it: camelCase keys
    and unset fields left out.
    """
    if spec is None:
        return {}
    serializer = ApiClient()
    source = {}
    for attr, field_name in spec.attribute_map.items():
        if attr in _NON_SOURCE_ATTRIBUTES:
            continue
        value = getattr(spec, attr, None)
        if value is None:
            continue
        source[field_name] = serializer.sanitize_for_serialization(value)
    return source


def get_persistent_volume_claim(pv: V1PersistentVolume) -> str:
    claim_ref = pv.spec.claim_ref if pv.spec is not None else None
    if claim_ref is None:
        return ""
    return f"{claim_ref.namespace}/{claim_ref.name}"


def to_persistent_volume(pv: V1PersistentVolume) -> PersistentVolume:
    spec = pv.spec
    status = pv.status
    return PersistentVolume(
        object_meta=to_object_meta(pv.metadata),
        type_meta=TypeMeta(kind=ResourceKind.PERSISTENT_VOLUME.value),
        capacity={k: str(v) for k, v in (spec.capacity or {}).items()} if spec else {},
        access_modes=(spec.access_modes or []) if spec else [],
        reclaim_policy=(spec.persistent_volume_reclaim_policy or "") if spec else "",
        storage_class=(spec.storage_class_name or "") if spec else "",
        mount_options=(spec.mount_options or []) if spec else [],
        status=(status.phase or "") if status else "",
        claim=get_persistent_volume_claim(pv),
        reason=(status.reason or "") if status else "",
    )


def to_persistent_volume_detail(pv: V1PersistentVolume) -> PersistentVolumeDetail:
    return PersistentVolumeDetail(
        **to_persistent_volume(pv).model_dump(),
        message=(pv.status.message or "") if pv.status else "",
        persistent_volume_source=get_persistent_volume_source(pv.spec),
    )


class PersistentVolumeVariant(ResourceVariant):
    kind = ResourceKind.PERSISTENT_VOLUME

    def project(
        self, raw: V1PersistentVolume, aux: Any, non_critical_errors: List[Exception]
    ) -> PersistentVolumeDetail:
        return to_persistent_volume_detail(raw)


def get_persistent_volume_detail(
    client, name: str, log: Optional[logging.Logger] = None
) -> PersistentVolumeDetail:
    """Return detailed information about a persistent volume."""
    return get_persistent_volume_detail_with_multi_tenancy(client, ALL_TENANTS, name, log)


def get_persistent_volume_detail_with_multi_tenancy(
    client, tenant: Optional[str], name: str, log: Optional[logging.Logger] = None
) -> PersistentVolumeDetail:
    """Return detailed information about a persistent volume of ``tenant``."""
    coordinates = ResourceCoordinates(tenant=tenant, name=name)
    return get_detail(client, PersistentVolumeVariant(), coordinates, log)
