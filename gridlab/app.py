# app.py
import threading
import time
from collections import defaultdict, deque

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException, RequestEntityTooLarge

from gridlab.cipher_tools.encoders import CIPHERS, perform_cipher, render_tables
from gridlab.cipher_tools.errors import CipherError
from gridlab.helpers import configure_logging, load_config


class RateLimiter:
    """Sliding window per client ip and endpoint key."""

    def __init__(self):
        # ip -> endpoint -> deque[timestamps]
        self._hits = defaultdict(lambda: defaultdict(deque))
        self._lock = threading.Lock()
        self._last_sweep = 0.0

    def hit(self, ip, key, limit, window_s, now=None):
        now = time.time() if now is None else now
        with self._lock:
            if now - self._last_sweep >= window_s:
                self._sweep(now - window_s)
                self._last_sweep = now
            q = self._hits[ip][key]
            # drop old
            while q and q[0] <= now - window_s:
                q.popleft()
            if len(q) >= limit:
                return False
            q.append(now)
            return True

    def _sweep(self, cutoff):
        """Forget clients with no hits newer than ``cutoff``."""
        for ip in list(self._hits):
            endpoints = self._hits[ip]
            for key in list(endpoints):
                q = endpoints[key]
                while q and q[0] <= cutoff:
                    q.popleft()
                if not q:
                    del endpoints[key]
            if not endpoints:
                del self._hits[ip]


def client_ip():
    forwarded = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return request.headers.get("CF-Connecting-IP") or forwarded or request.remote_addr or "unknown"


def rate_limit(key):
    limiter = current_app.extensions["gridlab_rate"]
    ip = client_ip()
    ok = limiter.hit(ip, key, current_app.config["RATE_LIMIT"], current_app.config["RATE_WINDOW"])
    return ok, ip


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object.")
    keys = data.get("keys") or {}
    if not isinstance(keys, dict):
        raise BadRequest("'keys' must be a JSON object.")
    for name, value in keys.items():
        if not _key_value_ok(name, value):
            raise BadRequest(f"'keys.{name}' has an unsupported type.")
    return data, keys


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _key_value_ok(name, value):
    """Key values are strings, apart from a few fields that take JSON numbers, lists or objects."""
    if value is None or isinstance(value, str):
        return True
    if name == "period":
        return _is_int(value)
    if name == "generate":
        return isinstance(value, bool)
    if name == "escape_digits":
        return _is_int(value) or (isinstance(value, list) and all(_is_int(v) for v in value))
    if name == "custom_mapping":
        return isinstance(value, dict) and all(
            isinstance(codes, str)
            or (isinstance(codes, list) and all(isinstance(c, str) for c in codes))
            for codes in value.values()
        )
    return False


def _run(mode):
    ok, ip = rate_limit("api_cipher")
    if not ok:
        current_app.logger.warning("rate limit hit for %s", ip)
        return jsonify({"error": "rate_limited", "message": "Rate limit exceeded. Try again shortly."}), 429

    data, keys = _json_body()
    text = data.get("text") or ""
    if not isinstance(text, str):
        raise BadRequest("'text' must be a string.")
    if len(text) > current_app.config["MAX_INPUT"]:
        raise RequestEntityTooLarge(f"Text is limited to {current_app.config['MAX_INPUT']} characters.")

    cipher = (data.get("cipher") or "").strip().lower()
    result = perform_cipher(cipher, text, keys, mode=mode)
    return jsonify({"cipher": cipher, "mode": mode, "result": result})


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)
    app.secret_key = app.config["SECRET_KEY"]
    app.extensions["gridlab_rate"] = RateLimiter()
    configure_logging(app)

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return resp

    # ==============================
    #  Error handlers
    # ==============================
    @app.errorhandler(CipherError)
    def handle_cipher_error(e):
        app.logger.warning("%s error: %s", request.path, e)
        return jsonify({"error": e.code, "message": str(e)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        code = (e.name or "error").lower().replace(" ", "_")
        return jsonify({"error": code, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception("unhandled error on %s", request.path)
        return jsonify({"error": "internal_error", "message": "Something went wrong."}), 500

    # ==============================
    #  Routes
    # ==============================
    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "ciphers": {name: list(spec.key_fields) for name, spec in CIPHERS.items()},
        })

    @app.route("/api/encode", methods=["POST"])
    def api_encode():
        return _run("encode")

    @app.route("/api/decode", methods=["POST"])
    def api_decode():
        return _run("decode")

    @app.route("/api/square", methods=["POST"])
    def api_square():
        data, keys = _json_body()
        cipher = (data.get("cipher") or "").strip().lower()
        return jsonify({"cipher": cipher, "tables": render_tables(cipher, keys)})

    return app


# ------------------- Run -------------------
if __name__ == "__main__":
    create_app().run(debug=True)
