from __future__ import annotations

import logging

from flask import Flask, jsonify, redirect, render_template, request, url_for

from ..common.http import error_response, request_payload
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/add-employee", methods=["GET"], endpoint="add_employee")
    def add_employee():
        """View the employee creation form
        Render the employee creation form.
        ---
        responses:
          "200":
            description: HTML form
        """
        return render_template("add_employee.html")

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        """Create a new employee
        Create a new employee with the specified details.
        ---
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required: [lastName, firstName, department]
                properties:
                  lastName:
                    type: string
                  firstName:
                    type: string
                  department:
                    type: string
        responses:
          "302":
            description: Employee created, redirect to the employee list
          "400":
            description: Bad request
          "500":
            description: Internal server error
        """
        data = request_payload()
        try:
            container.employee_service.create_employee(
                last_name=data.get("lastName"),
                first_name=data.get("firstName"),
                department=data.get("department"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unable to create employee")
            return error_response("Unable to create employee", 500)
        return redirect(url_for("list_employees"))

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        """Get a list of employees
        Get a list of all employees with an optional date filter.
        ---
        parameters:
          - in: query
            name: dateCreated
            schema:
              type: string
              format: date
            description: Filter employees by date of creation (e.g., "2021-01-05").
        responses:
          "200":
            description: A list of employees
          "400":
            description: Bad date filter
          "500":
            description: Internal server error
        """
        try:
            employees = container.employee_service.list_employees(date_created=request.args.get("dateCreated"))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unable to fetch employees")
            return error_response("Unable to fetch employees", 500)
        return jsonify([e.to_dict() for e in employees])

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="employee_detail")
    def employee_detail(employee_id: str):
        """Get employee details by ID
        Get details of a specific employee by their ID.
        ---
        parameters:
          - in: path
            name: employee_id
            required: true
            schema:
              type: string
            description: The ID of the employee.
        responses:
          "200":
            description: Employee details
          "404":
            description: Employee not found
          "500":
            description: Internal server error
        """
        try:
            employee = container.employee_service.get_employee(employee_id)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Unable to fetch employee details id=%s", employee_id)
            return error_response("Unable to fetch employee details", 500)
        return render_template("employee.html", employee=employee)
