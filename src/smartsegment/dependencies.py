"""Providers for shared services."""

from smartsegment.services import GeminiCapability, SegmentationOrchestrator

_orchestrator: SegmentationOrchestrator | None = None


def get_orchestrator() -> SegmentationOrchestrator:
    """Get or create the segmentation orchestrator singleton."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = SegmentationOrchestrator(GeminiCapability())
    return _orchestrator
