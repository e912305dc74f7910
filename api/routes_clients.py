"""
api.routes_clients - /api/v1/clients endpoints.
"""

import logging
from flask import request, jsonify
from sqlalchemy.exc import IntegrityError, OperationalError

from api import api_bp
from api.errors import code_error_response
from codes import ClientCodeError
from db import get_session
from services.clients_service import (
    ClientsService, ClientCodeConflict, is_write_conflict,
)
from services.contacts_service import ContactsService

logger = logging.getLogger(__name__)


def _json_body() -> dict | None:
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else None


@api_bp.route("/clients")
def list_clients():
    """GET /api/v1/clients - all clients ordered by name."""
    session = get_session()
    try:
        clients = ClientsService.list_all(session)
        return jsonify({
            "total": len(clients),
            "clients": [c.to_dict() for c in clients],
        })
    finally:
        session.close()


@api_bp.route("/clients", methods=["POST"])
def create_client():
    """
    POST /api/v1/clients

    JSON body: {name, contact_ids?}.  The client code is auto-assigned.
    """
    data = _json_body()
    if data is None:
        return jsonify({"error": "expected a JSON object"}), 400

    session = get_session()
    try:
        client = ClientsService.create(session, data)
        session.commit()
        return jsonify(client.to_dict()), 201
    except (ClientCodeError, ClientCodeConflict) as exc:
        session.rollback()
        return code_error_response(exc)
    except ValueError as exc:
        session.rollback()
        return jsonify({"error": str(exc)}), 400
    except Exception:
        session.rollback()
        logger.exception("Client creation failed")
        raise
    finally:
        session.close()


@api_bp.route("/clients/<client_id>")
def get_client(client_id: str):
    """GET /api/v1/clients/{id}"""
    session = get_session()
    try:
        client = ClientsService.get(session, client_id)
        if not client:
            return jsonify({"error": "not found"}), 404
        return jsonify(client.to_dict())
    finally:
        session.close()


@api_bp.route("/clients/by-code/<code>")
def get_client_by_code(code: str):
    """GET /api/v1/clients/by-code/{ACM001}"""
    session = get_session()
    try:
        client = ClientsService.get_by_code(session, code)
        if not client:
            return jsonify({"error": "not found"}), 404
        return jsonify(client.to_dict())
    finally:
        session.close()


@api_bp.route("/clients/<client_id>/contacts")
def list_client_contacts(client_id: str):
    """GET /api/v1/clients/{id}/contacts"""
    session = get_session()
    try:
        if not ClientsService.get(session, client_id):
            return jsonify({"error": "not found"}), 404
        contacts = ContactsService.list_for_client(session, client_id)
        return jsonify({"contacts": [c.to_dict() for c in contacts]})
    finally:
        session.close()


@api_bp.route("/clients/<client_id>/contacts", methods=["POST"])
def link_client_contact(client_id: str):
    """
    POST /api/v1/clients/{id}/contacts

    JSON body: {contact_id}.  Linking twice is a no-op, including when
    two identical requests race each other.
    """
    data = _json_body()
    if data is None or not data.get("contact_id"):
        return jsonify({"error": "contact_id is required"}), 400

    session = get_session()
    try:
        client = ClientsService.get(session, client_id)
        contact = ContactsService.get(session, str(data["contact_id"]))
        if not client or not contact:
            return jsonify({"error": "not found"}), 404
        try:
            _link, created = ClientsService.link_contact(session, client, contact)
            session.commit()
        except (IntegrityError, OperationalError) as exc:
            if not is_write_conflict(exc):
                raise
            # Lost the race: the link exists now, seen from a new transaction.
            session.rollback()
            logger.info("Contact %s already being linked to client %s",
                        contact.id, client.id)
            _link, created = ClientsService.link_contact(session, client, contact)
            session.commit()
        return jsonify({
            "client_id": client.id,
            "contact_id": contact.id,
            "created": created,
        }), 201 if created else 200
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
