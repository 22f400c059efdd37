from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.clock import today_iso
from ..common.web import api_action, current_uid, login_required, payload
from ..container import Container
from .model import AttendanceRecord


def _record_json(record: AttendanceRecord) -> dict:
    doc = record.to_document()
    doc["key"] = record.key
    doc["snacks"] = record.snacks
    return doc


def register(app: Flask, container: Container) -> None:
    def _day(data: dict) -> str:
        return data.get("date") or request.args.get("date") or today_iso()

    @app.route("/api/day", methods=["GET"], endpoint="day_view")
    @login_required
    @api_action("System error while loading the day")
    def day_view():
        """Active children with their record for the selected date."""

        uid = current_uid()
        day = _day({})
        rows = {r["child_id"]: r for r in container.report_service.build_day_rows(uid, day)}
        kids = container.kid_service.list_children(uid)
        return jsonify(
            {
                "date": day,
                "kids": [{"kid_id": k.kid_id, "name": k.name, "record": rows.get(k.kid_id)} for k in kids],
            }
        )

    @app.route("/api/kids/<kid_id>/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    @api_action("System error while checking in")
    def checkin(kid_id: str):
        record = container.attendance_service.check_in(current_uid(), kid_id, day=_day(payload()))
        return jsonify({"success": True, "record": _record_json(record)})

    @app.route("/api/kids/<kid_id>/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    @api_action("System error while checking out")
    def checkout(kid_id: str):
        record = container.attendance_service.check_out(current_uid(), kid_id, day=_day(payload()))
        return jsonify({"success": True, "record": _record_json(record)})

    @app.route("/api/kids/<kid_id>/clear", methods=["POST"], endpoint="clear_times")
    @login_required
    @api_action("System error while clearing times")
    def clear_times(kid_id: str):
        record = container.attendance_service.clear(current_uid(), kid_id, day=_day(payload()))
        return jsonify({"success": True, "record": _record_json(record)})

    @app.route("/api/kids/<kid_id>/edit", methods=["POST"], endpoint="manual_edit")
    @login_required
    @api_action("System error while saving times")
    def manual_edit(kid_id: str):
        data = payload()
        record = container.attendance_service.manual_edit(
            current_uid(),
            kid_id,
            in_time=data.get("in_time", ""),
            out_time=data.get("out_time", ""),
            reason=data.get("reason", ""),
            day=_day(data),
        )
        return jsonify({"success": True, "record": _record_json(record)})

    @app.route("/api/kids/<kid_id>/record", methods=["GET"], endpoint="get_record")
    @login_required
    @api_action("System error while loading the record")
    def get_record(kid_id: str):
        record = container.attendance_service.get_record(current_uid(), kid_id, _day({}))
        return jsonify({"record": _record_json(record) if record else None})
