import logging
import os

from flask import Flask, render_template, request, redirect, url_for, flash
from werkzeug.exceptions import BadRequest

from audio_control import AudioControlSystem
from console import describe_drain, describe_undo

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("AUDIO_CONTROL_SECRET_KEY", "dev-secret-key")

# ※ メモリ上のみ。サーバー再起動で消える
system = AudioControlSystem()


# -------------------------
# 共通：不正なリクエスト
# -------------------------
@app.errorhandler(BadRequest)
def handle_bad_request(e):
    logger.warning(f"Bad request on {request.path}: {e.description}")
    flash("Invalid request", "error")
    return redirect(url_for("dashboard"))


# -------------------------
# ダッシュボード
# -------------------------
@app.route("/", methods=["GET"])
def dashboard():
    return render_template(
        "dashboard.html",
        pending_events=system.list_pending_events(),
        history=system.list_history(),
        volume_presets=system.volume_presets,
    )


@app.route("/reset", methods=["POST"])
def reset():
    system.reset()
    flash("State reset", "success")
    return redirect(url_for("dashboard"))


# -------------------------
# 入力イベント
# -------------------------
@app.route("/events", methods=["POST"])
def add_event():
    # 空文字も有効なイベント
    event = request.form["event"]
    if request.form.get("priority"):
        system.add_priority_event(event)
        flash(f"Priority event queued: {event}", "success")
    else:
        system.add_event(event)
        flash(f"Event queued: {event}", "success")
    return redirect(url_for("dashboard"))


@app.route("/events/process", methods=["POST"])
def process_events():
    result = system.process_events()
    category = "info" if result.is_empty else "success"
    for line in describe_drain(result):
        flash(line, category)
    return redirect(url_for("dashboard"))


# -------------------------
# 操作履歴 / Undo
# -------------------------
@app.route("/actions", methods=["POST"])
def record_action():
    action = request.form["action"]
    system.record_action(action)
    flash(f"Action recorded: {action}", "success")
    return redirect(url_for("dashboard"))


@app.route("/actions/undo", methods=["POST"])
def undo():
    result = system.undo_last()
    flash(describe_undo(result), "info" if result.is_empty else "success")
    return redirect(url_for("dashboard"))


# -------------------------
# 音量プリセット
# -------------------------
@app.route("/presets", methods=["POST"])
def update_presets():
    raw = request.form["new_preset"].strip()
    try:
        new_preset = int(raw)
    except ValueError:
        flash(f"Preset must be an integer: {raw!r}", "error")
        return redirect(url_for("dashboard"))

    presets = system.update_volume_presets(new_preset)
    if new_preset >= 0:
        flash(f"Preset {new_preset} added", "success")
    else:
        flash("Negative preset ignored", "info")
    logger.debug(f"Presets now {presets}")
    return redirect(url_for("dashboard"))


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("AUDIO_CONTROL_LOG_LEVEL", "INFO").upper())
    app.run(debug=True)
