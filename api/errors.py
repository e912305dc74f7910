"""
api.errors - JSON error handlers for the API blueprint.
"""

from flask import jsonify
from api import api_bp
from codes import ClientCodeError, CodeErrorKind
from services.clients_service import ClientCodeConflict

CODE_ERROR_STATUS = {
    CodeErrorKind.INVALID_INPUT: 400,
    CodeErrorKind.EXHAUSTED: 409,
}


def code_error_response(exc: ClientCodeError | ClientCodeConflict):
    """JSON body + status for a failed client-code generation."""
    if isinstance(exc, ClientCodeConflict):
        return jsonify({"error": str(exc), "kind": "conflict"}), 409
    return (jsonify({"error": str(exc), "kind": exc.kind.value}),
            CODE_ERROR_STATUS[exc.kind])


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
