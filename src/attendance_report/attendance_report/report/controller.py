from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..attendance.model import RawAttendanceEntry
from ..core.exceptions import EmptyInputError, MalformedRecordError, RenderError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _read_payload() -> tuple[str, list[RawAttendanceEntry]]:
        """Parse ``{"label": ..., "attendances": [...]}`` from the request body."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        attendances = data.get("attendances")
        if attendances is None:
            attendances = []
        if not isinstance(attendances, list) or not all(isinstance(a, dict) for a in attendances):
            raise ValidationError("attendances must be a list of objects")

        label = str(data.get("label") or "")
        return label, [RawAttendanceEntry.from_payload(a) for a in attendances]

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/reports/attendance/pdf", methods=["POST"], endpoint="attendance_report_pdf")
    def attendance_report_pdf():
        try:
            label, entries = _read_payload()
            result = container.report_service.export(label, entries)
        except (ValidationError, EmptyInputError) as e:
            return _error(str(e), 400)
        except MalformedRecordError as e:
            return _error(str(e), 422)
        except RenderError:
            app.logger.exception("Attendance report export failed")
            return _error("Error exporting report. Please try again.", 500)

        response = send_file(
            io.BytesIO(result.artifact.content),
            mimetype="application/pdf",
            as_attachment=True,
            download_name=result.filename,
        )
        response.headers["X-Attendance-Total"] = str(result.summary.total)
        response.headers["X-Attendance-Present"] = str(result.summary.present)
        response.headers["X-Attendance-Absent"] = str(result.summary.absent)
        response.headers["X-Attendance-Rate"] = result.summary.rate_label
        response.headers["X-Report-Pages"] = str(result.page_count)
        return response

    @app.route("/reports/attendance/summary", methods=["POST"], endpoint="attendance_report_summary")
    def attendance_report_summary():
        try:
            _, entries = _read_payload()
            rows, summary = container.report_service.summarize(entries)
        except ValidationError as e:
            return _error(str(e), 400)
        except MalformedRecordError as e:
            return _error(str(e), 422)

        return jsonify({
            "success": True,
            "summary": summary.to_dict(),
            "rows": [r.to_dict() for r in rows],
        })
