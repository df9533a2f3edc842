"""Segmentation services."""

from smartsegment.services.gemini import GeminiCapability
from smartsegment.services.orchestrator import (
    SegmentationCapability,
    SegmentationOrchestrator,
    classify_failure,
    find_image_part,
)
from smartsegment.services.prompts import build_prompt, format_points

__all__ = [
    "GeminiCapability",
    "SegmentationCapability",
    "SegmentationOrchestrator",
    "build_prompt",
    "classify_failure",
    "find_image_part",
    "format_points",
]
