from enum import Enum
from typing import Optional
from pydantic import BaseModel, field_validator

# No tenant filter: the call addresses objects across all tenants.
ALL_TENANTS = None


class ResourceKind(str, Enum):
    PERSISTENT_VOLUME = "persistentvolume"
    REPLICATION_CONTROLLER = "replicationcontroller"

    @property
    def namespaced(self) -> bool:
        return self is not ResourceKind.PERSISTENT_VOLUME

    @property
    def display_name(self) -> str:
        return {
            ResourceKind.PERSISTENT_VOLUME: "persistent volume",
            ResourceKind.REPLICATION_CONTROLLER: "replication controller",
        }[self]


class ResourceCoordinates(BaseModel):
    """
    Identifies a single object in the cluster.

    ``tenant`` set to ``ALL_TENANTS`` means no tenant filter. ``namespace`` is
    only meaningful for namespace-scoped kinds.
    """

    tenant: Optional[str] = ALL_TENANTS
    namespace: Optional[str] = None
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("tenant")
    @classmethod
    def tenant_not_empty(cls, value: Optional[str]) -> Optional[str]:
        # "" would be ambiguous with "no tenant filter"
        if value == "":
            raise ValueError("tenant must not be empty, use ALL_TENANTS instead")
        return value

    @property
    def all_tenants(self) -> bool:
        return self.tenant is ALL_TENANTS

    def describe(self) -> str:
        parts = [self.name]
        if self.namespace:
            parts.append(f"in {self.namespace} namespace")
        if not self.all_tenants:
            parts.append(f"for {self.tenant}")
        return " ".join(parts)
