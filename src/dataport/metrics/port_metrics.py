from pydantic import Field

from dataport.metrics.base_metrics import Metrics


class PortMetrics(Metrics):
    """
    Counters for a single Port, accumulated over all of its route calls.
    """

    routes_launched: int = Field(default=0, ge=0, description="route() calls started")
    routes_arrived: int = Field(
        default=0, ge=0, description="route() calls that reached a destination"
    )
    conditions_evaluated: int = Field(default=0, ge=0)
    conditions_passed: int = Field(default=0, ge=0)
    handlers_applied: int = Field(
        default=0, ge=0, description="handlers whose result replaced the payload"
    )

    def __repr__(self):
        return (
            f"PortMetrics(status={self.status.value}, "
            f"launched={self.routes_launched}, arrived={self.routes_arrived}, "
            f"passed={self.conditions_passed}/{self.conditions_evaluated}, "
            f"errors={self.error_count})"
        )
