"""
api.routes_contacts - /api/v1/contacts endpoints.
"""

from flask import request, jsonify

from api import api_bp
from db import get_session
from services.contacts_service import ContactsService


@api_bp.route("/contacts")
def list_contacts():
    """GET /api/v1/contacts - ordered by name, then surname."""
    session = get_session()
    try:
        contacts = ContactsService.list_all(session)
        return jsonify({
            "total": len(contacts),
            "contacts": [c.to_dict() for c in contacts],
        })
    finally:
        session.close()


@api_bp.route("/contacts", methods=["POST"])
def create_contact():
    """
    POST /api/v1/contacts

    JSON body: {name, surname, email, client_ids?}
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "expected a JSON object"}), 400

    session = get_session()
    try:
        contact = ContactsService.create(session, data)
        session.commit()
        return jsonify(contact.to_dict()), 201
    except ValueError as exc:
        session.rollback()
        return jsonify({"error": str(exc)}), 400
    finally:
        session.close()


@api_bp.route("/contacts/<contact_id>/clients", methods=["POST"])
def link_contact_clients(contact_id: str):
    """
    POST /api/v1/contacts/{id}/clients

    JSON body: {client_ids: [...]}.  Existing links are kept.
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "expected a JSON object"}), 400

    session = get_session()
    try:
        contact = ContactsService.get(session, contact_id)
        if not contact:
            return jsonify({"error": "not found"}), 404
        created = ContactsService.link_to_clients(
            session, contact, data.get("client_ids") or [],
        )
        session.commit()
        return jsonify({"contact_id": contact.id, "linked": created})
    except ValueError as exc:
        session.rollback()
        return jsonify({"error": str(exc)}), 400
    finally:
        session.close()
