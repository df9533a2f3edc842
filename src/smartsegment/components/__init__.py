"""Reusable UI components."""

from smartsegment.components.image_uploader import image_uploader
from smartsegment.components.mode_toggle import render_mode_toggle
from smartsegment.components.point_annotator import point_annotator, render_mode_caption
from smartsegment.components.result_view import render_error, render_result_view
from smartsegment.components.sidebar import render_credential_input, render_point_list
from smartsegment.components.toolbar import render_toolbar

__all__ = [
    "image_uploader",
    "point_annotator",
    "render_credential_input",
    "render_error",
    "render_mode_caption",
    "render_mode_toggle",
    "render_point_list",
    "render_result_view",
    "render_toolbar",
]
