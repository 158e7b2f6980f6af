from enum import Enum


class LifecycleEvent(str, Enum):
    """
    Events a Port emits during a single `route` call, in this order.
    """

    LAUNCH = "launch"
    LANDING = "landing"
    ARRIVED = "arrived"
