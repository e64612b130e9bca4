from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..container import Container
from ..core.exceptions import PersistenceError, ValidationError
from .service import EmployeeForm

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Employee not found"


def _payload() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def unexpected_error(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"success": False, "message": "Internal server error"}), 500

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        records = container.employee_service.list_employees()
        rows = container.payroll_service.enrich_all(records)
        summary = container.payroll_service.summarize(records)
        return jsonify({
            "success": True,
            "employees": [r.to_dict() for r in rows],
            "summary": summary.to_dict(),
        })

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        record = container.employee_service.get(employee_id)
        if not record:
            return jsonify({"success": False, "message": NOT_FOUND_MESSAGE}), 404
        return jsonify({"success": True, "employee": container.payroll_service.enrich(record).to_dict()})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = _payload()
        form = EmployeeForm(
            name=data.get("name"),
            department=data.get("department"),
            basic_salary=data.get("basicSalary"),
            profile_image=data.get("profileImage"),
            selected_avatar=data.get("selectedAvatar"),
            gender=data.get("gender"),
            day=data.get("day"),
            month=data.get("month"),
            year=data.get("year"),
            notes=data.get("notes"),
        )
        try:
            record = container.employee_service.create(form)
        except ValidationError as e:
            return jsonify({"success": False, "errors": e.errors}), 400
        except PersistenceError:
            logger.exception("Error creating employee")
            return jsonify({
                "success": False,
                "errors": ["Failed to save employee data. Please try again."],
            }), 500

        return jsonify({"success": True, "employee": container.payroll_service.enrich(record).to_dict()}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="edit_employee")
    def edit_employee(employee_id: int):
        data = _payload()
        try:
            record = container.employee_service.update(
                employee_id,
                name=data.get("name"),
                department=data.get("department"),
                basic_salary=data.get("basicSalary"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "errors": e.errors}), 400
        except PersistenceError:
            logger.exception("Error updating employee %s", employee_id)
            return jsonify({
                "success": False,
                "errors": ["Failed to update employee data. Please try again."],
            }), 500

        if not record:
            return jsonify({"success": False, "message": NOT_FOUND_MESSAGE}), 404
        return jsonify({"success": True, "employee": container.payroll_service.enrich(record).to_dict()})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            deleted = container.employee_service.delete(employee_id)
        except PersistenceError:
            logger.exception("Error deleting employee %s", employee_id)
            return jsonify({"success": False, "message": "Failed to delete employee"}), 500

        if not deleted:
            return jsonify({"success": False, "message": NOT_FOUND_MESSAGE}), 404
        return jsonify({"success": True})
