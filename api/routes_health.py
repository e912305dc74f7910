"""
api.routes_health - Liveness probe.
"""

from flask import jsonify

from api import api_bp


@api_bp.route("/health")
def health():
    """GET /api/v1/health"""
    return jsonify({"ok": True})
