from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template

from ..common.http import error_response, request_payload
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/check-in", methods=["GET"], endpoint="checkin_form")
    def checkin_form():
        """View the check-in form
        Render the check-in form.
        ---
        responses:
          "200":
            description: HTML form
        """
        return render_template("checkin.html")

    @app.route("/check-in", methods=["POST"], endpoint="checkin")
    def checkin():
        """Check-in an employee
        Record an employee's check-in time and prevent duplicate check-ins.
        ---
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                properties:
                  employeeId:
                    type: string
                    description: The ID of the employee.
                  comment:
                    type: string
                    description: An optional comment.
        responses:
          "200":
            description: Check-in successful
          "400":
            description: Employee is already checked in
          "404":
            description: Employee not found
          "500":
            description: Internal server error
        """
        # comment is accepted for symmetry with check-out but never stored.
        data = request_payload()
        try:
            employee = container.attendance_service.check_in(data.get("employeeId"))
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unable to perform check-in")
            return error_response("Unable to perform check-in", 500)
        return jsonify(employee.to_dict())

    @app.route("/check-out", methods=["GET"], endpoint="checkout_form")
    def checkout_form():
        """View the check-out form
        Render the check-out form.
        ---
        responses:
          "200":
            description: HTML form
        """
        return render_template("checkout.html")

    @app.route("/check-out", methods=["POST"], endpoint="checkout")
    def checkout():
        """Check-out an employee
        Record an employee's check-out time and calculate the elapsed time.
        ---
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                properties:
                  employeeId:
                    type: string
                    description: The ID of the employee.
                  comment:
                    type: string
                    description: An optional comment.
        responses:
          "200":
            description: Check-out successful
          "400":
            description: Employee has not checked in
          "404":
            description: Employee not found
          "500":
            description: Internal server error
        """
        data = request_payload()
        try:
            result = container.attendance_service.check_out(data.get("employeeId"))
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unable to perform check-out")
            return error_response("Unable to perform check-out", 500)
        return jsonify({"timeElapsed": result.time_elapsed, "comment": data.get("comment")})
