# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the team-directory service."""
from prometheus_client import Counter, Gauge, Histogram

TEAM_MEMBERS_CREATED = Counter(
    "team_members_created_total", "Total team members created"
)
TEAM_MEMBERS_DELETED = Counter(
    "team_members_deleted_total", "Total team members deleted"
)
TEAM_MEMBER_REJECTIONS = Counter(
    "team_member_rejections_total", "Create requests rejected by business rules", ["reason"]
)
TEAM_MEMBERS_TOTAL = Gauge(
    "team_members_total", "Current number of stored team members"
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
