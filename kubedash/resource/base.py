"""
Fetch a single object from the cluster and project it onto its detail view.

Each resource kind is a ``ResourceVariant``: a projection from the raw API
object to a view model plus an optional auxiliary fetch. ``get_detail``
drives the flow for any variant:

1. Get the primary object. Errors propagate untouched.
2. Fetch auxiliary data if the variant needs it. Errors are classified:
   critical ones propagate, non-critical ones are handed to the projection.
3. Project raw object, auxiliary data and non-critical errors.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from kubedash.models.common import ViewModel
from kubedash.models.coordinates import ResourceCoordinates, ResourceKind
from kubedash.models.custom_errors import InvalidCoordinatesError
from kubedash.utils.errors import handle_error
from kubedash.utils.logger import get_logger

logger = get_logger(__name__)


class ResourceVariant(ABC):
    kind: ResourceKind
    has_auxiliary: bool = False

    def validate(self, coordinates: ResourceCoordinates):
        if self.kind.namespaced and not coordinates.namespace:
            raise InvalidCoordinatesError(
                f"namespace is required to address {self.kind.display_name} {coordinates.name}"
            )

    def fetch_auxiliary(self, client, raw: Any, coordinates: ResourceCoordinates) -> Any:
        """Fetch data the projection needs besides the object itself."""
        return None

    @abstractmethod
    def project(self, raw: Any, aux: Any, non_critical_errors: List[Exception]) -> ViewModel:
        """Map the raw object onto its detail view. Must not fail or do I/O."""
        pass


def get_detail(
    client,
    variant: ResourceVariant,
    coordinates: ResourceCoordinates,
    log: Optional[logging.Logger] = None,
) -> ViewModel:
    log = log or logger
    variant.validate(coordinates)
    log.info(
        "Getting details of %s %s", variant.kind.display_name, coordinates.describe()
    )

    raw = client.get(variant.kind, coordinates)

    aux = None
    non_critical_errors: List[Exception] = []
    if variant.has_auxiliary:
        try:
            aux = variant.fetch_auxiliary(client, raw, coordinates)
        except Exception as err:
            non_critical_errors, critical_error = handle_error(err, log)
            if critical_error is not None:
                raise

    return variant.project(raw, aux, non_critical_errors)
