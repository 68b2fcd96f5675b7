"""
ui/
---
Presentation layer.

    from ui import render_array, render_text
    from ui import array_generator, algorithm_panel, …
"""

from ui.canvas import render_array, render_text, render_step, pill_state, CanvasConfig

from ui.controls import (
    array_generator,
    algorithm_panel,
    playback_controls,
    status_panel,
    log_panel,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
)

__all__ = [
    "render_array",
    "render_text",
    "render_step",
    "pill_state",
    "CanvasConfig",
    "array_generator",
    "algorithm_panel",
    "playback_controls",
    "status_panel",
    "log_panel",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
]
