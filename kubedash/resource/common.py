from typing import Dict, List, Optional
from kubernetes.client.models import V1ObjectMeta, V1Pod, V1PodSpec
from kubedash.models.common import ObjectMeta, PodInfo


def to_object_meta(meta: Optional[V1ObjectMeta]) -> ObjectMeta:
    if meta is None:
        return ObjectMeta()
    return ObjectMeta(
        name=meta.name or "",
        namespace=meta.namespace or "",
        labels=meta.labels or {},
        annotations=meta.annotations or {},
        creation_timestamp=meta.creation_timestamp,
        uid=meta.uid or "",
    )


def to_label_selector(selector: Optional[Dict[str, str]]) -> str:
    """Render an equality-based selector the way the API server expects it."""
    if not selector:
        return ""
    return ",".join(f"{key}={value}" for key, value in sorted(selector.items()))


def get_pod_info(current: Optional[int], desired: Optional[int], pods: List[V1Pod]) -> PodInfo:
    result = PodInfo(current=current or 0, desired=desired)

    for pod in pods:
        phase = pod.status.phase if pod.status is not None else None
        if phase == "Running":
            result.running += 1
        elif phase == "Pending":
            result.pending += 1
        elif phase == "Failed":
            result.failed += 1
        elif phase == "Succeeded":
            result.succeeded += 1

    return result


def get_container_images(pod_spec: Optional[V1PodSpec]) -> List[str]:
    if pod_spec is None:
        return []
    return [container.image for container in pod_spec.containers or []]


def get_init_container_images(pod_spec: Optional[V1PodSpec]) -> List[str]:
    if pod_spec is None:
        return []
    return [container.image for container in pod_spec.init_containers or []]
