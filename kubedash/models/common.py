import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ViewModel(BaseModel):
    """Base for presentation models, dumped with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ObjectMeta(ViewModel):
    name: str = ""
    namespace: str = ""
    labels: Dict[str, str] = {}
    annotations: Dict[str, str] = {}
    creation_timestamp: Optional[datetime.datetime] = None
    uid: str = ""


class TypeMeta(ViewModel):
    kind: str


class PodInfo(ViewModel):
    current: int = 0  # Number of pods created by the controller
    desired: Optional[int] = None  # Number of pods requested, None if unspecified
    running: int = 0
    pending: int = 0
    failed: int = 0
    succeeded: int = 0
    warnings: List[str] = []
