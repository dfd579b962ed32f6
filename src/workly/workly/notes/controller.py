from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notes", methods=["GET"], endpoint="api_list_notes")
    def api_list_notes():
        notes = container.note_service.list_notes(shift_id=request.args.get("shift_id") or None)
        return jsonify({"success": True, "notes": [n.to_dict() for n in notes]})

    @app.route("/api/notes", methods=["POST"], endpoint="api_create_note")
    def api_create_note():
        data = request.get_json(silent=True) or {}
        try:
            note = container.note_service.create_note(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "note": note.to_dict()}), 201

    @app.route("/api/notes/<note_id>", methods=["PUT"], endpoint="api_update_note")
    def api_update_note(note_id: str):
        data = request.get_json(silent=True) or {}
        try:
            note = container.note_service.update_note(note_id, data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "note": note.to_dict()})

    @app.route("/api/notes/<note_id>", methods=["DELETE"], endpoint="api_delete_note")
    def api_delete_note(note_id: str):
        try:
            container.note_service.delete_note(note_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True})
