class InvalidCoordinatesError(ValueError):
    """
    Exception raised when resource coordinates do not address a single object
    of the requested kind, e.g. a namespaced kind without a namespace.
    """

    pass


class UnsupportedResourceKindError(Exception):
    """
    Exception raised when the cluster client has no endpoints for a resource kind.
    """

    pass
