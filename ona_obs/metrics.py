"""
Prometheus Metrics Registration.

Tool execution metrics for the Notion adapters.
"""

from prometheus_client import Counter, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

tool_executions_total = Counter(
    "tool_executions_total",
    "Total tool executions",
    # success, invalid_arguments, missing_credential, remote_error, transport_error
    ["tool_name", "status"],
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_execution_duration = Histogram(
    "tool_execution_duration_seconds",
    "Tool execution duration",
    ["tool_name"],
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)


def record_tool_execution(tool_name: str, status: str, duration_seconds: float) -> None:
    """Record one tool execution outcome."""
    tool_executions_total.labels(tool_name=tool_name, status=status).inc()
    tool_execution_duration.labels(tool_name=tool_name).observe(duration_seconds)
