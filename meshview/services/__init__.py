"""Service layer: view builders and request statistics."""

from .detail_builder import build_service_detail
from .label_matcher import matches_service, service_name_from_label
from .list_builder import build_namespace_list, build_service_list, selector_matches
from .request_counters import is_error_code, process_request_counters
from .service_view_service import ServiceViewService

__all__ = [
    "build_service_detail",
    "matches_service",
    "service_name_from_label",
    "build_namespace_list",
    "build_service_list",
    "selector_matches",
    "is_error_code",
    "process_request_counters",
    "ServiceViewService",
]
