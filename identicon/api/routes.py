from flask import Blueprint, Response, current_app, jsonify

from identicon.kernel.codec import DEFAULT_SIZE, render_png
from identicon.kernel.palette import default_settings

bp = Blueprint("api", __name__, url_prefix="/")

SUFFIX = ".png"

# ---------- health / version ----------
@bp.route("/health")
def health():
    return jsonify({"ok": True})

@bp.route("/version")
def version():
    return jsonify({"name": "identicon", "api": 1, "size": DEFAULT_SIZE})

# ---------- identicon ----------
@bp.route("/")
def index():
    return Response("", status=400)

@bp.route("/<path:item>")
def identicon(item):
    # one path segment, "<text>.png"
    if "/" in item or not item.endswith(SUFFIX):
        return Response("", status=400)
    text = item[: -len(SUFFIX)]

    current_app.logger.info("creating identicon for '%s'", text)
    try:
        body = render_png(text, DEFAULT_SIZE, default_settings())
    except Exception:
        current_app.logger.exception("unable to render image for '%s'", text)
        return Response("", status=500)

    resp = Response(body, mimetype="image/png")
    resp.headers["Content-Length"] = str(len(body))
    return resp
