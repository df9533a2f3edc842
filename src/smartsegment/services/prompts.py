"""Instruction template sent alongside the image."""

from collections.abc import Sequence

from smartsegment.models import Point

SEGMENTATION_PROMPT = """
Act as an advanced Semantic Segmentation engine equivalent to "Segment Anything Model 3" (SAM3).

TASK:
Extract a specific subject from the provided input image based on user interaction points.

INPUT COORDINATES (Origin: Top-Left):
- POSITIVE CLICKS (Include/Add): [{positive}]
- NEGATIVE CLICKS (Exclude/Subtract): [{negative}]

STRICT RULES:
1. **Identification**: Locate the object(s) indicated by POSITIVE clicks. This is your base selection.
2. **Subtraction**: If NEGATIVE clicks are present, strictly REMOVE that specific semantic region from the selection.
   - Example: If (+) is on a person and (-) is on their bag, output the person WITHOUT the bag.
   - Example: If (+) is on a table and (-) is on a vase, output the table WITHOUT the vase.
3. **Output Format**:
   - Generate an image containing ONLY the final segmented subject.
   - The background MUST be pure WHITE (RGB 255,255,255).
   - Maintain the original resolution and perspective of the object.
   - Ensure high-quality edge detection (clean matte).
"""


def format_point(point: Point) -> str:
    """Format one point as percentages with one decimal place."""
    return f"(x: {point.x * 100:.1f}%, y: {point.y * 100:.1f}%)"


def format_points(points: Sequence[Point]) -> str:
    """Format a list of points for the prompt, or "None" when empty."""
    if not points:
        return "None"
    return ", ".join(format_point(p) for p in points)


def build_prompt(positive: Sequence[Point], negative: Sequence[Point]) -> str:
    """Build the segmentation instruction for the given point prompts."""
    return SEGMENTATION_PROMPT.format(positive=format_points(positive), negative=format_points(negative))
