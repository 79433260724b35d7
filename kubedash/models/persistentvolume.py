from typing import Any, Dict, List
from kubedash.models.common import ObjectMeta, TypeMeta, ViewModel


class PersistentVolume(ViewModel):
    object_meta: ObjectMeta
    type_meta: TypeMeta
    capacity: Dict[str, str] = {}
    access_modes: List[str] = []
    reclaim_policy: str = ""
    storage_class: str = ""
    mount_options: List[str] = []
    status: str = ""  # Volume phase, e.g. Bound
    claim: str = ""  # "<namespace>/<name>" of the bound claim
    reason: str = ""


class PersistentVolumeDetail(PersistentVolume):
    """Presentation view of a persistent volume. Extends the list item."""

    message: str = ""
    persistent_volume_source: Dict[str, Any] = {}
