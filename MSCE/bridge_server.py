# =============================================================================
# bridge_server.py — Flask HTTP bridge
# =============================================================================
#
# Exposes the codec over HTTP for browser / script clients.
#
#   POST /morse/encode   body = UTF-8 text      → application/octet-stream
#                        ?skip=1  drop unrecognized characters
#                        ?stop=1  sentence ends → STOP
#   POST /morse/decode   body = bitstream bytes → text/plain; charset=utf-8
#   POST /morse/render   body = UTF-8 text      → {"blocks", "code", "signals", "bits"}
#   GET  /morse/health                          → {"status": "ok"}
#
# Codec errors and undecodable text return 400 with {"error": "..."}.
#
# Run:  python -m MSCE.bridge_server   (localhost:5000)
# =============================================================================

from __future__ import annotations

from flask import Flask, Response, request, jsonify

from MSCE.SMM.errors import MorseCodecError
from MSCE.SGM.preprocess import stop_preprocess
from MSCE.SGM.text_encoder import TextEncoder
from MSCE.SViz.signal_view import render_summary
from MSCE.pipeline import encode_text, decode_bytes

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return request.args.get(name, "").lower() in _TRUE_VALUES


def _request_text() -> str:
    return request.get_data().decode("utf-8")


def create_app() -> Flask:
    app = Flask(__name__)

    @app.errorhandler(MorseCodecError)
    def codec_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(UnicodeDecodeError)
    def text_error(e):
        return jsonify({"error": f"body is not valid UTF-8: {e}"}), 400

    @app.route("/morse/encode", methods=["POST"])
    def encode():
        preprocess = stop_preprocess if _flag("stop") else None
        data = encode_text(_request_text(), skip_unrecognized=_flag("skip"), preprocess=preprocess)
        return Response(data, mimetype="application/octet-stream")

    @app.route("/morse/decode", methods=["POST"])
    def decode():
        text = decode_bytes(request.get_data())
        return Response(text, mimetype="text/plain")

    @app.route("/morse/render", methods=["POST"])
    def render():
        text = _request_text()
        if _flag("stop"):
            text = stop_preprocess(text)
        return jsonify(render_summary(TextEncoder(text, skip_unrecognized=_flag("skip"))))

    @app.route("/morse/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    return app


if __name__ == "__main__":
    # Run on localhost:5000 by default
    create_app().run(host="127.0.0.1", port=5000)
