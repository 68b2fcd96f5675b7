"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • array_generator     – size / max value inputs + Generate
  • algorithm_panel     – target input, one button per algorithm, Compare
  • playback_controls   – prev/next/rewind/end, step counter, speed
  • status_panel        – the one-line status message
  • log_panel           – the running log transcript
  • analytics_panel     – comparisons, swaps, passes, steps, …
  • comparison_panel    – linear vs binary search side by side
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – "why this step happened"

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from algorithms.step import FOUND, NOT_FOUND, SORTED
from engine import ComparisonResult, RunMetrics
from settings import SETTINGS


def _escape(text: str) -> str:
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


_OUTCOME_LABELS = {
    FOUND:     "✅ Found",
    NOT_FOUND: "❌ Not Found",
    SORTED:    "✅ Sorted",
}


# ---------------------------------------------------------------------------
# Array Generator
# ---------------------------------------------------------------------------
def array_generator(
    size: int = SETTINGS.default_size,
    max_value: int = SETTINGS.default_max_value,
    busy: bool = False,
) -> str:
    lo_size, hi_size = SETTINGS.size_bounds
    lo_max, hi_max   = SETTINGS.max_value_bounds
    disabled = 'disabled' if busy else ''
    return f"""
    <div class="panel array-generator">
      <h3>🎲 Array</h3>
      <label>Size ({lo_size}–{hi_size}):
        <input type="number" id="inputSize" value="{size}" min="{lo_size}" max="{hi_size}">
      </label>
      <label>Max Value ({lo_max}–{hi_max}):
        <input type="number" id="inputMax" value="{max_value}" min="{lo_max}" max="{hi_max}">
      </label>
      <button id="btnGenerate" class="btn-secondary action" {disabled}>Generate Array</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Panel
# ---------------------------------------------------------------------------
def algorithm_panel(
    algorithms: List[AlgoInfo],
    target: str = "",
    busy: bool = False,
) -> str:
    disabled = 'disabled' if busy else ''
    buttons = []
    for algo in algorithms:
        buttons.append(
            f'<button class="btn-primary action run-algo" data-algo="{algo.key}" '
            f'title="{_escape(algo.description)} Space: {algo.complexity_space}." {disabled}>'
            f'{algo.label} <small>{algo.complexity_time}</small></button>'
        )

    return f"""
    <div class="panel algorithm-panel">
      <h3>🧠 Algorithms</h3>
      <label>Target:
        <input type="text" id="inputTarget" value="{_escape(target)}" placeholder="e.g. 42">
      </label>
      <div class="button-column">
        {''.join(buttons)}
      </div>
      <button id="btnCompare" class="btn-secondary action" {disabled}>⚖️ Compare Searches</button>
      <p class="hint">Binary Search only works once the array is sorted.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = "normal",
    is_finished: bool = False,
) -> str:
    options = []
    for key, label in (("slow", "Slow (teaching)"), ("normal", "Normal"),
                       ("fast", "Fast"), ("turbo", "Turbo")):
        sel = 'selected' if key == speed else ''
        options.append(f'<option value="{key}" {sel}>{label}</option>')

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Status & Log
# ---------------------------------------------------------------------------
def status_panel(status: str = "") -> str:
    return f'<div id="status" class="status-line">{_escape(status)}</div>'


def log_panel(lines: Optional[List[str]] = None) -> str:
    text = "\n".join(lines or [])
    return f'<pre id="log" class="log-block">{_escape(text)}</pre>'


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    outcome = _OUTCOME_LABELS.get(metrics.outcome, metrics.outcome)
    if metrics.found_index is not None:
        outcome = f"{outcome} (index {metrics.found_index})"
    target_row = ""
    if metrics.target is not None:
        target_row = f"<tr><td>Target:</td><td><strong>{metrics.target}</strong></td></tr>"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{metrics.array_size}</strong></td></tr>
        {target_row}
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Passes:</td><td><strong>{metrics.passes}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Animation:</td><td><strong>{metrics.animation_ms / 1000:.2f} s</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Result:</td><td><strong>{outcome}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison</h3>
          <p class="placeholder">Sort the array, enter a target and press Compare Searches.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Animation</td>
            <td>{left.animation_ms / 1000:.2f} s</td>
            <td>{right.animation_ms / 1000:.2f} s</td>
            <td>{winner_badge(comp.winner_animation)}</td>
          </tr>
          <tr>
            <td>Result</td>
            <td>{_OUTCOME_LABELS.get(left.outcome, left.outcome)}</td>
            <td>{_OUTCOME_LABELS.get(right.outcome, right.outcome)}</td>
            <td>—</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Run an algorithm to view its pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{_escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return (
            '<div class="explanation-text">▶ Pick an algorithm to see a step-by-step '
            'explanation of what is happening at each stage.</div>'
        )
    return f"""<div class="explanation-text">{_escape(explanation)}</div>"""
