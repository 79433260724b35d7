import json
from typing import Any, Dict, List, Optional
from kubernetes.client.exceptions import ApiException
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from kubedash.models.common import ObjectMeta, PodInfo, TypeMeta, ViewModel

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class ReplicationController(ViewModel):
    object_meta: ObjectMeta
    type_meta: TypeMeta
    pods: PodInfo
    container_images: List[str] = []
    init_container_images: List[str] = []


def _api_error_message(err: ApiException) -> Optional[str]:
    """Return the message of the Status body the API server sent, else the raw body."""
    try:
        status = json.loads(err.body)
    except (TypeError, ValueError):
        return err.body
    if isinstance(status, dict) and status.get("message"):
        return status["message"]
    return err.body


class ReplicationControllerDetail(ReplicationController):
    """Detailed view of a replication controller. Extends the list item."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    label_selector: Dict[str, str] = {}

    # Non-critical errors that occurred during resource retrieval
    errors: List[Exception] = []

    @field_serializer("errors")
    def serialize_errors(self, errors: List[Exception]) -> List[Dict[str, Any]]:
        serialized = []
        for err in errors:
            if isinstance(err, ApiException):
                serialized.append(
                    {"status": err.status, "reason": err.reason, "message": _api_error_message(err)}
                )
            else:
                serialized.append({"status": None, "reason": None, "message": str(err)})
        return serialized


class ReplicationControllerSpec(BaseModel):
    """Fields a caller may change on a replication controller."""

    # Bound checks on the count itself are left to the API server
    replicas: int = Field(ge=INT32_MIN, le=INT32_MAX)
