from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, VacationDaysShortageError, ValidationError
from .service import FIELD_RULES

REQUIRED_FIELDS = ("name", "salary")

logger = logging.getLogger(__name__)


def _validation_error(e: ValidationError):
    logger.warning("Validation failed: %s", e.message)
    return jsonify({"error": e.message, "field": e.field, "rule": e.rule}), 400


def _not_found(e: NotFoundError):
    return jsonify({"error": str(e), "employee_id": e.employee_id}), 404


def _shortage(e: VacationDaysShortageError):
    return (
        jsonify(
            {
                "error": str(e),
                "requested_days": e.requested_days,
                "remaining_days": e.remaining_days,
            }
        ),
        409,
    )


def _json_body(*, allow_empty: bool = False) -> dict:
    data = request.get_json(silent=True)
    if data is None and allow_empty:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register(app: Flask, container: Container) -> None:
    registry = container.registry

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = registry.list(
                department=request.args.get("department"),
                role=request.args.get("role") or None,
            )
            return jsonify([e.to_dict() for e in employees])
        except ValidationError as e:
            return _validation_error(e)

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            data = _json_body()
            if "employee_id" in data:
                raise ValidationError("employee_id is assigned by the server", field="employee_id", rule="immutable")
            for key in data:
                if key not in FIELD_RULES:
                    raise ValidationError(f"Unknown field: {key}", field=key, rule="unknown_field")
            for key in REQUIRED_FIELDS:
                if key not in data:
                    raise ValidationError(f"{key} is required", field=key, rule="required")
            employee_id = registry.add(**data)
            return jsonify(registry.get(employee_id).to_dict()), 201
        except ValidationError as e:
            return _validation_error(e)

    @app.route("/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        try:
            return jsonify(registry.get(employee_id).to_dict())
        except NotFoundError as e:
            return _not_found(e)

    @app.route("/employees/<int:employee_id>", methods=["PATCH"], endpoint="update_employee")
    def update_employee(employee_id: int):
        try:
            employee = registry.update(employee_id, **_json_body())
            return jsonify(employee.to_dict())
        except NotFoundError as e:
            return _not_found(e)
        except ValidationError as e:
            return _validation_error(e)

    @app.route("/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            registry.remove(employee_id)
            return "", 204
        except NotFoundError as e:
            return _not_found(e)

    @app.route("/employees/<int:employee_id>/vacation", methods=["POST"], endpoint="take_vacation")
    def take_vacation(employee_id: int):
        try:
            days = _json_body().get("days")
            remaining = container.vacation_service.take_vacation(employee_id, days)
            return jsonify({"employee_id": employee_id, "vacation_days": remaining})
        except NotFoundError as e:
            return _not_found(e)
        except ValidationError as e:
            return _validation_error(e)
        except VacationDaysShortageError as e:
            return _shortage(e)

    @app.route("/employees/<int:employee_id>/vacation/payout", methods=["POST"], endpoint="payout_vacation")
    def payout_vacation(employee_id: int):
        try:
            remaining = container.vacation_service.payout_vacation(employee_id)
            return jsonify({"employee_id": employee_id, "vacation_days": remaining})
        except NotFoundError as e:
            return _not_found(e)
        except VacationDaysShortageError as e:
            return _shortage(e)

    @app.route("/employees/<int:employee_id>/pay", methods=["POST"], endpoint="pay_employee")
    def pay_employee(employee_id: int):
        try:
            data = _json_body(allow_empty=True)
            payment = container.payroll_service.pay(employee_id, hours_worked=data.get("hours_worked"))
            return jsonify({"employee_id": payment.employee_id, "name": payment.name, "amount": payment.amount})
        except NotFoundError as e:
            return _not_found(e)
        except ValidationError as e:
            return _validation_error(e)

    @app.route("/payroll", methods=["GET"], endpoint="payroll_report")
    def payroll_report():
        report = container.payroll_service.build_payroll_report(department=request.args.get("department"))
        return jsonify({"rows": report.rows, "total": report.total})

    @app.route("/company", methods=["GET"], endpoint="company_info")
    def company_info():
        company = container.company
        return jsonify({"name": company.name, "headcount": company.headcount})
