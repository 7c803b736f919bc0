from .trace import TraceEvent, TracePhase, TracePolicy, traced

__all__ = (
    "TraceEvent",
    "TracePhase",
    "TracePolicy",
    "traced",
)
