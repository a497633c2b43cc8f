from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body, store_failure
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.entry_service

    @app.route("/api/entries", methods=["GET"], endpoint="list_entries")
    async def list_entries():
        entries = await service.list_entries()
        return jsonify({"success": True, "entries": [e.to_dict() for e in entries]})

    @app.route("/api/entries", methods=["POST"], endpoint="create_entry")
    async def create_entry():
        try:
            record, result = await service.create(json_body())
        except ValidationError as e:
            return error_response(str(e), 400)
        if not result.ok:
            return store_failure(result)
        return jsonify({"success": True, "entry": record.to_dict()}), 201

    @app.route("/api/entries/<record_id>", methods=["GET"], endpoint="get_entry")
    async def get_entry(record_id: str):
        try:
            record = await service.get(record_id)
        except NotFoundError as e:
            return error_response(str(e), 404)
        return jsonify({"success": True, "entry": record.to_dict()})

    @app.route("/api/entries/<record_id>", methods=["PUT"], endpoint="replace_entry")
    async def replace_entry(record_id: str):
        try:
            record, result = await service.replace(record_id, json_body())
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        if not result.ok:
            return store_failure(result)
        return jsonify({"success": True, "entry": record.to_dict()})

    @app.route("/api/entries/<record_id>", methods=["DELETE"], endpoint="delete_entry")
    async def delete_entry(record_id: str):
        result = await service.delete(record_id)
        if not result.ok:
            return store_failure(result)
        return jsonify({"success": True})
