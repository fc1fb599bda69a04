"""Top-level platform monitoring helpers.

Events are logged on the `platform_monitoring` logger with tokens, secrets
and `access_token=` URL values redacted.

Usage: from platform_monitoring import log_event, prometheus_metric
"""
from .exporters import log_event, prometheus_metric

__all__ = ["log_event", "prometheus_metric"]
