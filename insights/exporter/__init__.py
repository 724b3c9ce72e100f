"""
Exporter - Stakeholder Updates from Canvas Content

Renders classifier output as an HTML email, a slide outline or a
newsletter draft. Pure functions of (bundle, config).
"""

from .renderer import (
    render,
    render_email,
    render_slides,
    render_newsletter,
    export_filename,
    export_mime_type,
    RENDERERS,
)

__all__ = [
    "render",
    "render_email",
    "render_slides",
    "render_newsletter",
    "export_filename",
    "export_mime_type",
    "RENDERERS",
]
