from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.http import error_response, json_body
from ..container import Container
from ..core.enums import PeriodMode
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats", methods=["GET"], endpoint="stats")
    async def stats():
        period = (request.args.get("period") or PeriodMode.MONTHLY.value).lower()
        try:
            mode = PeriodMode(period)
        except ValueError:
            return error_response(f"period must be 'monthly' or 'weekly', got {period!r}", 400)

        report = await container.payroll_report_service.build_stats(mode)
        return jsonify({"success": True, **report.to_dict()})

    @app.route("/api/pay/preview", methods=["POST"], endpoint="pay_preview")
    def pay_preview():
        try:
            pay = container.payroll_report_service.preview(json_body(), today=today_local())
        except ValidationError as e:
            return error_response(str(e), 400)
        return jsonify({"success": True, "pay": pay.to_dict()})
