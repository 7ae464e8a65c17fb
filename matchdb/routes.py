from flask import Blueprint, abort, current_app, send_from_directory
import os

# ------------------ BLUEPRINT ------------------

main = Blueprint("main", __name__)

INDEX_FILE = "index.html"


def frontend_dir():
    return current_app.config["FRONTEND_DIR"]


def is_asset(path):
    """True als het pad naar een bestaand bestand in de frontend-map wijst."""
    if not path:
        return False
    full_path = os.path.realpath(os.path.join(frontend_dir(), path))
    root = os.path.realpath(frontend_dir())
    return full_path.startswith(root + os.sep) and os.path.isfile(full_path)


# ------------------ FRONTEND ------------------

@main.route("/", defaults={"path": ""}, methods=["GET"])
@main.route("/<path:path>", methods=["GET"])
def frontend(path):
    """
    Serveer de gebouwde frontend:
    - bestaande bestanden (js, css, afbeeldingen) worden as-is verstuurd
    - elk ander pad krijgt index.html, de client router kiest de view
    """
    if path == "api" or path.startswith("api/"):
        abort(404)

    if is_asset(path):
        return send_from_directory(frontend_dir(), path)

    if not os.path.isfile(os.path.join(frontend_dir(), INDEX_FILE)):
        abort(404, description="Frontend build not found.")

    return send_from_directory(frontend_dir(), INDEX_FILE)
