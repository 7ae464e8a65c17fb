from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException
import logging
import time
import os

from .config import Config

LOG_FORMAT = "%(asctime)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%I:%M:%S %p"
MAX_LOG_LINE = 80


def configure_logging(level="INFO"):
    """Eenmalige logging setup voor server en client modules."""
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, level=level)


def format_request_log(method, path, status_code, duration_ms):
    """
    Bouw de log-regel voor een afgehandelde request.
    - Regels langer dan 80 tekens worden afgekapt met een ellips.
    """
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if len(line) > MAX_LOG_LINE:
        line = line[: MAX_LOG_LINE - 1] + "…"
    return line


def should_log_path(path):
    """Dev-asset requests (/@vite, node_modules) niet loggen."""
    return not path.startswith("/@") and "node_modules" not in path


def register_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started = time.monotonic()

    @app.after_request
    def log_request(response):
        started = g.get("request_started")
        if started is None or not should_log_path(request.path):
            return response

        method, path, status_code = request.method, request.path, response.status_code

        # pas loggen als de (gestreamde) body volledig verstuurd is
        @response.call_on_close
        def log_finished():
            duration_ms = int((time.monotonic() - started) * 1000)
            app.logger.info(format_request_log(method, path, status_code, duration_ms))

        return response


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        app.logger.exception("Unhandled error: %s", err)
        return jsonify({"message": "Internal Server Error"}), 500


def create_app(config=None):
    # .env is al geladen bij het importeren van config
    app = Flask(__name__, static_folder=None)

    app.config.from_object(Config)
    if config:
        app.config.update(config)

    configure_logging(app.config["LOG_LEVEL"])

    if app.config["APP_ENV"] == "development":
        app.config["FRONTEND_DIR"] = app.config["FRONTEND_DEV_DIR"]
        app.config["SEND_FILE_MAX_AGE_DEFAULT"] = 0
    else:
        app.config["FRONTEND_DIR"] = app.config["FRONTEND_DIST"]
        index_path = os.path.join(app.config["FRONTEND_DIR"], "index.html")
        if not os.path.isfile(index_path):
            raise RuntimeError(
                f"Could not find the build directory: {app.config['FRONTEND_DIR']}, "
                "make sure to build the client first"
            )

    register_request_logging(app)
    register_error_handlers(app)

    # proxy eerst, zodat /api nooit bij de SPA fallback terechtkomt
    from .proxy import api
    app.register_blueprint(api)

    from .routes import main
    app.register_blueprint(main)

    from .database import init_db_command
    app.cli.add_command(init_db_command)

    return app
