"""Matching of metric label values against service names."""

UNKNOWN_SERVICE = "unknown"


def service_name_from_label(label_value: str) -> str:
    """Return the leading segment of a qualified name like ``reviews.ns.svc.cluster.local``."""
    return label_value.split(".", 1)[0]


def matches_service(
    label_value: str,
    service_name: str,
    unknown: str = UNKNOWN_SERVICE,
) -> bool:
    """Check whether a source/destination label value names ``service_name``.

    The whole leading segment must be equal, so ``review`` does not match
    ``reviews.tutorial.svc.cluster.local``. The ``unknown`` sentinel never matches.
    """
    if not label_value or label_value == unknown:
        return False
    return service_name_from_label(label_value) == service_name
