from kitbag.gateway.time.abc import Time
from kitbag.gateway.time.real import RealTime

__all__ = ["Time", "RealTime"]
