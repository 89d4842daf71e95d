from __future__ import annotations
import os
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import NotFound

from . import env, settings
from .config import ConfigResolver, ConfigStore, FileStore
from .errors import ConfigWriteError
from .logging_utils import get_logger

log = get_logger(__name__)

MISSING_BUILD = ('Server is running, but the frontend build (dist) is missing. '
                 'Please run "npm run build" first.')


def create_app(snapshot: Optional[Mapping[str, Any]] = None,
               store: Optional[ConfigStore] = None,
               dist_dir: Optional[str] = None) -> Flask:
    # frontend assets are served by the fallback below, not Flask's static route
    app = Flask(__name__, static_folder=None)
    if snapshot is None:
        snapshot = env.load()
    if store is None:
        store = FileStore(settings.config_path())
    if dist_dir is None:
        dist_dir = settings.dist_dir()

    resolver = ConfigResolver(snapshot, store)
    app.extensions["bot_config"] = resolver

    @app.get("/healthz")
    def healthz():
        return ("ok", 200)

    @app.get("/api/config")
    def config_get():
        return jsonify(resolver.resolve())

    @app.post("/api/config")
    def config_post():
        new_config = request.get_json(silent=True)
        if not isinstance(new_config, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            message = resolver.persist(new_config)
        except ConfigWriteError:
            log.exception("Error writing config")
            return jsonify({"error": "Failed to save configuration"}), 500
        return jsonify({"success": True, "message": message})

    @app.get("/", defaults={"path": ""})
    @app.get("/<path:path>")
    def spa(path):
        if request.path.startswith("/api"):
            return jsonify({"error": "API endpoint not found"}), 404
        if path:
            try:
                return send_from_directory(dist_dir, path)
            except NotFound:
                pass
        if not os.path.isfile(os.path.join(dist_dir, "index.html")):
            return MISSING_BUILD, 500
        return send_from_directory(dist_dir, "index.html")

    return app
