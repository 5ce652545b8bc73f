from __future__ import annotations

from flask import Flask, render_template, request

from ..common.datetime_utils import today_local
from ..common.http import api_view
from ..container import Container
from ..core.exceptions import ValidationError
from . import exporter


def register(app: Flask, container: Container) -> None:
    api = api_view(app, container)

    def _require_args(*names: str) -> list[str]:
        values = [request.args.get(n, "").strip() for n in names]
        missing = [n for n, v in zip(names, values) if not v]
        if missing:
            raise ValidationError(f"Parameter wajib diisi: {', '.join(missing)}")
        return values

    def _csv_response(payload: bytes, filename: str):
        return app.response_class(
            payload,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _monthly(class_id: str, month: str, year: str):
        try:
            month_i, year_i = int(month), int(year)
        except ValueError:
            raise ValidationError("Bulan/tahun tidak valid")
        return container.report_service.monthly_report(class_id, month_i, year_i, printed_on=today_local())

    @app.route("/reports/daily.csv", methods=["GET"], endpoint="daily_report_csv")
    @api
    def daily_report_csv():
        class_id, report_date = _require_args("class_id", "date")
        report = container.report_service.daily_report(class_id, report_date, printed_on=today_local())
        return _csv_response(exporter.daily_csv(report), exporter.daily_filename(report))

    @app.route("/reports/monthly.csv", methods=["GET"], endpoint="monthly_report_csv")
    @api
    def monthly_report_csv():
        class_id, month, year = _require_args("class_id", "month", "year")
        report = _monthly(class_id, month, year)
        return _csv_response(exporter.monthly_csv(report), exporter.monthly_filename(report))

    @app.route("/reports/print", methods=["GET"], endpoint="print_report")
    @api
    def print_report():
        report_type = request.args.get("type", "monthly")
        if report_type == "daily":
            class_id, report_date = _require_args("class_id", "date")
            report = container.report_service.daily_report(class_id, report_date, printed_on=today_local())
            return render_template("reports/print.html", report_type="daily", report=report)
        if report_type == "monthly":
            class_id, month, year = _require_args("class_id", "month", "year")
            report = _monthly(class_id, month, year)
            return render_template("reports/print.html", report_type="monthly", report=report)
        raise ValidationError("Tipe laporan harus 'daily' atau 'monthly'")
