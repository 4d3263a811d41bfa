from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import StaffNotFoundError, ValidationError
from ..staff.doctor import Doctor
from ..container import Container


def register(app: Flask, container: Container) -> None:
    registry = container.registry

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(StaffNotFoundError)
    def handle_not_found(e: StaffNotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/staff", methods=["GET"], endpoint="staff_list")
    def staff_list():
        return jsonify({"success": True, "staff": [m.to_dict() for m in registry.list_staff()]})

    @app.route("/staff/report", methods=["GET"], endpoint="staff_report")
    def staff_report():
        rows = registry.salary_rows()
        return jsonify(
            {
                "success": True,
                "lines": registry.calculate_all_salaries(),
                "rows": rows,
                "total": sum(r["salary"] for r in rows),
                "total_staff_count": registry.total_staff_count,
            }
        )

    @app.route("/staff/<staff_id>", methods=["GET"], endpoint="staff_detail")
    def staff_detail(staff_id: str):
        member = registry.get(staff_id)
        return jsonify({"success": True, "summary": member.get_summary(), "staff": member.to_dict()})

    @app.route("/staff/<staff_id>/duty", methods=["POST"], endpoint="staff_duty")
    def staff_duty(staff_id: str):
        member = registry.get(staff_id)
        if not isinstance(member, Doctor):
            raise ValidationError("Only doctors have a duty status")

        data = request.get_json(silent=True) or {}
        on_duty = data.get("on_duty")
        if not isinstance(on_duty, bool):
            raise ValidationError("on_duty must be true or false")

        status = member.set_on_duty_status(on_duty)
        return jsonify({"success": True, "name": member.name, "status": status})
