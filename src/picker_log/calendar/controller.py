from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, today_local, try_parse_iso_date
from ..common.http import error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="calendar")
    async def calendar():
        selected = request.args.get("selected") or format_iso_date(today_local())
        if try_parse_iso_date(selected) is None:
            return error_response(f"selected must be YYYY-MM-DD, got {selected!r}", 400)

        view = await container.calendar_service.build_view(selected)
        return jsonify({"success": True, **view.to_dict()})
