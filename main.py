"""
main.py — Algorithm Playground Flask App
==========================================
The web server that powers the playground.

Routes:
  GET  /                       – main UI
  POST /api/array/generate     – generate a new random array
  POST /api/run                – start an algorithm run
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/end           – jump to the final step
  POST /api/config/speed       – playback speed preset
  GET  /api/state              – current app state (for polling)
  POST /api/compare            – linear vs binary search on the current array

Playback:
  /api/run records the whole run up front.  The browser then shows one
  frame, waits the frame's `delay_ms`, asks /api/step/next for the next
  one, and so on until `is_final`.  Its action buttons stay disabled
  while that loop is running; the server refuses new runs meanwhile.

State management:
  Each browser session gets its own PlaygroundController, kept in memory
  in this process and looked up through an id in the Flask session.
  The controller holds:
    • the array
    • status line + log transcript
    • the current run (recorded steps, cursor, busy flag)
"""

from collections import OrderedDict
from dataclasses import asdict
from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets
import sys
import threading
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from engine import PlaygroundController
from settings import PlaygroundSettings
from ui import (
    render_array,
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

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config["PLAYGROUND"] = PlaygroundSettings.from_env()

_CONTROLLERS: "OrderedDict[str, PlaygroundController]" = OrderedDict()
_CONTROLLERS_LOCK = threading.Lock()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_controller() -> PlaygroundController:
    """
    The caller's controller, created on first use.

    Controllers are kept least-recently-used first; once there are more
    than `max_sessions` the oldest are dropped, and a browser coming back
    with a dropped id simply starts over.
    """
    settings = app.config["PLAYGROUND"]
    sid = session.get("sid")
    with _CONTROLLERS_LOCK:
        if sid is not None and sid in _CONTROLLERS:
            _CONTROLLERS.move_to_end(sid)
            return _CONTROLLERS[sid]

        sid = secrets.token_hex(16)
        session["sid"] = sid
        ctrl = _CONTROLLERS[sid] = PlaygroundController(settings=settings)
        logger.debug("New controller for session %s", sid)
        while len(_CONTROLLERS) > max(1, settings.max_sessions):
            old_sid, _ = _CONTROLLERS.popitem(last=False)
            logger.info("Dropped idle session %s", old_sid)
        return ctrl


def frame_payload(ctrl: PlaygroundController) -> dict:
    """Everything the page needs to draw the current frame."""
    step    = ctrl.current_step
    stepper = ctrl.stepper
    info    = get_algorithm(ctrl.recorder.metrics.algo_key) if ctrl.metrics else None

    if step is not None:
        svg = render_array(step.values, step.marker)
    else:
        svg = render_array(ctrl.store.values)

    return {
        "svg":          svg,
        "status":       ctrl.status,
        "log":          "\n".join(ctrl.log),
        "busy":         ctrl.busy,
        "delay_ms":     stepper.current_delay_ms if stepper else 0,
        "is_final":     step.is_final if step else True,
        "current_step": stepper.current_idx if stepper else 0,
        "total_steps":  stepper.total_steps_fetched if stepper else 0,
        "pseudocode":   pseudocode_viewer(
            pseudocode_lines=info.pseudocode if info else [],
            current_line=step.pseudocode_line if step else -1,
        ),
        "explanation":  explanation_panel(step.explanation if step else ""),
    }


def refusal(ctrl: PlaygroundController):
    return jsonify({"refused": True, "status": ctrl.status, "busy": ctrl.busy})


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    ctrl = get_controller()

    # start with a default array so the page isn't empty on load
    if ctrl.store.is_empty:
        ctrl.generate()
    # a reload abandons whatever the old page was animating
    if ctrl.busy:
        ctrl.jump_to_end()

    frame   = frame_payload(ctrl)
    stepper = ctrl.stepper

    html = render_template_string(INDEX_TEMPLATE,
        svg=frame["svg"],
        generator=array_generator(size=len(ctrl.store)),
        algorithms=algorithm_panel(list_algorithms()),
        playback=playback_controls(
            current_step=frame["current_step"],
            total_steps=frame["total_steps"],
            speed=ctrl.speed,
            is_finished=bool(stepper and stepper.is_finished),
        ),
        status=status_panel(ctrl.status),
        log=log_panel(ctrl.log),
        analytics=analytics_panel(ctrl.metrics),
        comparison=comparison_panel(),
        pseudocode=frame["pseudocode"],
        explanation=frame["explanation"],
    )
    return html


# ---------------------------------------------------------------------------
# API: Array Generation
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = request.get_json(silent=True) or {}
    ctrl = get_controller()

    seed = data.get("seed")
    if not ctrl.generate(data.get("size"), data.get("max_value"),
                         seed=seed if isinstance(seed, int) else None):
        return refusal(ctrl)

    payload = frame_payload(ctrl)
    payload["values"] = list(ctrl.store.values)
    payload["analytics"] = analytics_panel()
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = request.get_json(silent=True) or {}
    ctrl = get_controller()

    algo_key = data.get("algo_key", "")
    if get_algorithm(algo_key) is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

    if ctrl.run(algo_key, data.get("target")) is None:
        return refusal(ctrl)

    payload = frame_payload(ctrl)
    payload["analytics"] = analytics_panel(ctrl.metrics)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    ctrl = get_controller()
    if ctrl.stepper is None:
        return jsonify({"error": "No run to step through"}), 400
    if ctrl.next_step() is None:
        return jsonify({"error": "Already at last step"}), 400
    return jsonify(frame_payload(ctrl))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    ctrl = get_controller()
    if ctrl.stepper is None:
        return jsonify({"error": "No run to step through"}), 400
    if ctrl.prev_step() is None:
        return jsonify({"error": "Already at first step"}), 400
    return jsonify(frame_payload(ctrl))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    data = request.get_json(silent=True) or {}
    ctrl = get_controller()
    idx  = data.get("index", 0)

    if ctrl.stepper is None:
        return jsonify({"error": "No run to step through"}), 400
    if not isinstance(idx, int) or ctrl.goto_step(idx) is None:
        return jsonify({"error": "Invalid step index"}), 400
    return jsonify(frame_payload(ctrl))


@app.route("/api/step/end", methods=["POST"])
def api_step_end():
    ctrl = get_controller()
    if ctrl.jump_to_end() is None:
        return jsonify({"error": "No run to step through"}), 400
    return jsonify(frame_payload(ctrl))


# ---------------------------------------------------------------------------
# API: Config & State
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    data  = request.get_json(silent=True) or {}
    speed = get_controller().set_speed(data.get("speed", ""))
    return jsonify({"speed": speed})


@app.route("/api/state")
def api_state():
    ctrl    = get_controller()
    stepper = ctrl.stepper
    return jsonify({
        "values":       list(ctrl.store.values),
        "sorted":       ctrl.store.is_sorted_ascending(),
        "status":       ctrl.status,
        "log":          ctrl.log,
        "busy":         ctrl.busy,
        "speed":        ctrl.speed,
        "algo_key":     ctrl.metrics.algo_key if ctrl.metrics else None,
        "current_step": stepper.current_idx if stepper else 0,
        "total_steps":  stepper.total_steps_fetched if stepper else 0,
    })


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = request.get_json(silent=True) or {}
    ctrl = get_controller()

    result = ctrl.compare_searches(data.get("target"))
    if result is None:
        return refusal(ctrl)
    return jsonify({
        "status":     ctrl.status,
        "comparison": comparison_panel(result),
        "left":       asdict(result.left),
        "right":      asdict(result.right),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Algorithm Playground</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-purple: #a855f7;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      min-height: 100vh;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      padding: 20px 14px;
      overflow-y: auto;
    }

    #main { flex: 1; display: flex; flex-direction: column; padding: 20px; gap: 16px; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 14px;
    }
    .panel h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 12px;
    }

    label { display: block; margin: 8px 0 4px; font-size: 12px; color: var(--text-secondary); }
    input, select {
      width: 100%;
      padding: 8px 10px;
      margin: 4px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }

    button {
      background: var(--accent-cyan);
      color: #fff;
      border: none;
      padding: 9px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-weight: 600;
      margin: 4px 0;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-emerald); }
    .btn-secondary { background: #1c2128; border: 1px solid var(--border); }
    .button-row { display: flex; gap: 8px; }
    .button-column { display: flex; flex-direction: column; }
    .hint { font-size: 11px; color: var(--text-secondary); margin-top: 8px; font-style: italic; }

    .status-line {
      padding: 10px 14px;
      background: var(--bg-panel);
      border-left: 3px solid var(--accent-cyan);
      border-radius: 6px;
    }
    .log-block, .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 12px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 12px;
      line-height: 1.5;
      max-height: 220px;
      overflow-y: auto;
      white-space: pre-wrap;
    }
    .code-line { padding: 2px 8px; border-radius: 4px; white-space: pre; }
    .code-line.highlight { background: rgba(14, 165, 233, 0.2); border-left: 3px solid var(--accent-cyan); }
    .explanation-text { color: var(--text-secondary); line-height: 1.7; font-size: 14px; }

    .step-info { font-family: monospace; font-size: 13px; margin: 8px 0; color: var(--text-secondary); }
    .finished-badge { background: var(--accent-emerald); color: #fff; padding: 2px 8px; border-radius: 6px; font-size: 11px; }

    table { width: 100%; font-size: 13px; }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: monospace; }

    #bottom { display: grid; grid-template-columns: 1fr 1fr 1fr; gap: 16px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="generator">{{ generator|safe }}</div>
    <div id="algorithms">{{ algorithms|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="status-box">{{ status|safe }}</div>
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="bottom">
      <div class="panel"><h3>Log</h3><div id="log-box">{{ log|safe }}</div></div>
      <div class="panel"><h3>Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
      <div class="panel"><h3>Step Explanation</h3><div id="explanation">{{ explanation|safe }}</div></div>
    </div>
  </div>

  <script>
    let playing = false;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function sleep(ms) {
      return new Promise((resolve) => setTimeout(resolve, ms));
    }

    function setBusy(busy) {
      document.querySelectorAll('.action').forEach(b => b.disabled = busy);
    }

    function show(data) {
      if (data.error) return;
      if (data.status !== undefined) document.getElementById('status').textContent = data.status;
      if (data.refused) return;
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.log !== undefined) document.getElementById('log').textContent = data.log;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.current_step !== undefined) document.getElementById('current-step').textContent = data.current_step;
      if (data.total_steps !== undefined) document.getElementById('total-steps').textContent = data.total_steps;
    }

    // consume frames until the final one, waiting each frame's delay
    async function playFrom(frame) {
      playing = true;
      setBusy(true);
      show(frame);
      while (!frame.error && !frame.refused && !frame.is_final) {
        await sleep(frame.delay_ms);
        frame = await post('/api/step/next');
        show(frame);
      }
      playing = false;
      setBusy(false);
    }

    function target() {
      return document.getElementById('inputTarget').value;
    }

    document.getElementById('btnGenerate').addEventListener('click', async () => {
      show(await post('/api/array/generate', {
        size: document.getElementById('inputSize').value,
        max_value: document.getElementById('inputMax').value,
      }));
    });

    document.querySelectorAll('.run-algo').forEach(btn => {
      btn.addEventListener('click', async () => {
        if (playing) return;
        const frame = await post('/api/run', {algo_key: btn.dataset.algo, target: target()});
        if (frame.refused || frame.error) { show(frame); return; }
        await playFrom(frame);
      });
    });

    document.getElementById('btnCompare').addEventListener('click', async () => {
      const data = await post('/api/compare', {target: target()});
      show(data);
      if (data.comparison) document.getElementById('comparison').innerHTML = data.comparison;
    });

    document.getElementById('btn-next').addEventListener('click', async () => {
      if (!playing) show(await post('/api/step/next'));
    });
    document.getElementById('btn-prev').addEventListener('click', async () => {
      if (!playing) show(await post('/api/step/prev'));
    });
    document.getElementById('btn-rewind').addEventListener('click', async () => {
      if (!playing) show(await post('/api/step/goto', {index: 0}));
    });
    document.getElementById('btn-end').addEventListener('click', async () => {
      if (!playing) show(await post('/api/step/end'));
    });

    document.getElementById('speed-selector').addEventListener('change', async (e) => {
      await post('/api/config/speed', {speed: e.target.value});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    settings = app.config["PLAYGROUND"]
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Algorithm Playground")
    print("  Starting Flask server...")
    print(f"  Open http://{settings.host}:{settings.port}")
    print("=" * 60)
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
