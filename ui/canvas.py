"""
canvas.py — Array Renderer
===========================
Pure rendering functions: values + Marker → frame.

  • render_array(values, marker) → SVG string of "pills" for the page
  • render_text(values, marker)  → one terminal line for the CLI driver
  • render_step(step)            → either of the above for a Step

Highlighting rules (same for both outputs):
  - marker.active_index  → the pill being checked / compared right now
  - marker.found_index   → where the target was found
  - marker.low / .high   → binary-search bounds, drawn only when BOTH
                           are set

Design decisions:
  - NO mutation.  Stateless: the caller passes in everything and gets
    back a string.
  - Pills wrap onto several rows so 50 values still fit the canvas.
"""

from typing import Dict, List, Optional, Sequence

from algorithms.step import NO_MARKER, Marker, Step


# ---------------------------------------------------------------------------
# Visual Config — colors, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:   int = 900
    padding: int = 20
    bg:      str = "#0d1117"

    # pill state → fill
    pill_colors: Dict[str, str] = {
        "default": "#1c2128",   # dark grey
        "active":  "#0ea5e9",   # cyan — being checked
        "found":   "#10b981",   # emerald — target found
        "lowhigh": "#a855f7",   # purple — binary search bounds
    }

    # pill
    pill_width:        int = 48
    pill_height:       int = 36
    pill_gap:          int = 8
    pill_radius:       int = 18
    pill_stroke:       str = "#30363d"
    pill_stroke_width: int = 2
    label_color:       str = "#e6edf3"
    label_size:        int = 13
    index_color:       str = "#7d8590"
    index_size:        int = 9


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# State lookup
# ---------------------------------------------------------------------------
def pill_state(i: int, marker: Marker) -> str:
    """Visual state of pill i.  Found beats active beats bounds."""
    if i == marker.found_index:
        return "found"
    if i == marker.active_index:
        return "active"
    if marker.has_bounds and i in (marker.low, marker.high):
        return "lowhigh"
    return "default"


# ---------------------------------------------------------------------------
# SVG
# ---------------------------------------------------------------------------
def render_array(
    values: Sequence[int],
    marker: Optional[Marker] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        values : The array to draw.
        marker : Highlights for this frame (None = plain).
        config : Visual config.
    """
    marker = marker or NO_MARKER
    cell   = config.pill_width + config.pill_gap
    per_row = max(1, (config.width - 2 * config.padding + config.pill_gap) // cell)
    rows   = max(1, -(-len(values) // per_row))
    row_h  = config.pill_height + config.pill_gap + config.index_size + 6
    height = 2 * config.padding + rows * row_h

    svg_parts: List[str] = [
        f'<svg width="{config.width}" height="{height}" '
        f'viewBox="0 0 {config.width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{height}" fill="{config.bg}"/>',
    ]

    for i, value in enumerate(values):
        row, col = divmod(i, per_row)
        x = config.padding + col * cell
        y = config.padding + row * row_h
        svg_parts.append(_render_pill(i, value, x, y, pill_state(i, marker), config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def _render_pill(i: int, value: int, x: int, y: int, state: str, config: CanvasConfig) -> str:
    fill = config.pill_colors.get(state, config.pill_colors["default"])
    stroke = fill if state != "default" else config.pill_stroke
    cx = x + config.pill_width / 2
    parts = [
        f'<g class="pill {state}" data-index="{i}">',
        f'  <rect x="{x}" y="{y}" width="{config.pill_width}" height="{config.pill_height}" '
        f'rx="{config.pill_radius}" fill="{fill}" stroke="{stroke}" '
        f'stroke-width="{config.pill_stroke_width}"/>',
        f'  <text x="{cx}" y="{y + config.pill_height / 2 + 5}" text-anchor="middle" '
        f'font-size="{config.label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.label_color}" font-weight="600">{value}</text>',
        f'  <text x="{cx}" y="{y + config.pill_height + config.index_size + 4}" '
        f'text-anchor="middle" font-size="{config.index_size}" '
        f'fill="{config.index_color}">{i}</text>',
        '</g>',
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Text (terminal)
# ---------------------------------------------------------------------------
_TEXT_WRAP = {
    "default": (" ", " "),
    "active":  ("[", "]"),
    "found":   ("*", "*"),
    "lowhigh": ("|", "|"),
}


def render_text(values: Sequence[int], marker: Optional[Marker] = None) -> str:
    """One line: `[3]` active, `*3*` found, `|3|` a low/high bound."""
    marker = marker or NO_MARKER
    cells = []
    for i, value in enumerate(values):
        left, right = _TEXT_WRAP[pill_state(i, marker)]
        cells.append(f"{left}{value}{right}")
    return " ".join(cells)


def render_step(step: Step, as_text: bool = False, config: CanvasConfig = CONFIG) -> str:
    if as_text:
        return render_text(step.values, step.marker)
    return render_array(step.values, step.marker, config)
