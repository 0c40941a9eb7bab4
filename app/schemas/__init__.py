from app.schemas.enrichment import (
    EnrichmentResult,
    EnrichRequest,
    SignalOut,
    SignalType,
    SourceRef,
)

__all__ = [
    "EnrichmentResult",
    "EnrichRequest",
    "SignalOut",
    "SignalType",
    "SourceRef",
]
