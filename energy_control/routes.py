from __future__ import annotations
import io
from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash, send_file
from .calculations import appliance_monthly_cost, compute_kpis
from .state import EXTENSION_KEY, ControlPanel, Screen
import pandas as pd

bp = Blueprint("main", __name__)

CSV_COLUMNS = ["name", "image", "power_w", "hours_per_day", "daily_kwh", "monthly_cost"]


def _panel() -> ControlPanel:
	return current_app.extensions[EXTENSION_KEY]


@bp.route("/")
def index():
	panel = _panel()
	if panel.screen is Screen.ADD_FORM:
		return render_template("add_appliance.html")
	kpis = compute_kpis(panel.registry.list(), panel.tariff)
	return render_template(
		"appliances.html",
		entries=panel.registry.entries(),
		tariff_text=panel.tariff_text,
		total=panel.formatted_total(current_app.config["CURRENCY_SYMBOL"]),
		kpis=kpis,
	)


@bp.route("/recalculate", methods=["POST"])
def recalculate():
	panel = _panel()
	total = panel.recalculate(request.form.get("tariff", ""))
	current_app.logger.info("Recalculated with tariff %r: %.2f", panel.tariff_text, total)
	return redirect(url_for("main.index"))


@bp.route("/appliances/new", methods=["POST"])
def new_appliance():
	_panel().open_add_form()
	return redirect(url_for("main.index"))


@bp.route("/appliances", methods=["POST"])
def add_appliance():
	panel = _panel()
	name = request.form.get("name", "")
	handle = panel.save_appliance(
		name,
		request.form.get("power_w", ""),
		request.form.get("hours_per_day", ""),
	)
	current_app.logger.info("Appliance #%d %r added", handle, name)
	flash("Appliance added", "success")
	return redirect(url_for("main.index"))


@bp.route("/appliances/cancel", methods=["POST"])
def cancel():
	_panel().cancel()
	return redirect(url_for("main.index"))


@bp.route("/appliances/<int:handle>/delete", methods=["POST"])
def delete_appliance(handle: int):
	if _panel().delete(handle):
		current_app.logger.info("Appliance #%d deleted", handle)
		flash("Appliance deleted", "info")
	return redirect(url_for("main.index"))


@bp.route("/export/csv")
def export_csv():
	panel = _panel()
	appliances_list = panel.registry.list()
	tariff = panel.tariff
	rows = []
	for a in appliances_list:
		rows.append(
			{
				"name": a.name,
				"image": a.image,
				"power_w": a.power_w,
				"hours_per_day": a.hours_per_day,
				"daily_kwh": round(a.daily_kwh(), 3),
				"monthly_cost": round(appliance_monthly_cost(a, tariff), 2),
			}
		)
	kpis = compute_kpis(appliances_list, tariff)
	df = pd.DataFrame(rows, columns=CSV_COLUMNS)
	buf = io.StringIO()
	df.to_csv(buf, index=False)
	buf.write("\n")
	buf.write("# KPIs\n")
	buf.write(f"tariff,{tariff}\n")
	for k, v in kpis.items():
		buf.write(f"{k},{v}\n")
	current_app.logger.info("Exported %d appliances to CSV", len(rows))
	mem = io.BytesIO(buf.getvalue().encode("utf-8"))
	return send_file(mem, mimetype="text/csv", as_attachment=True, download_name="energy_report.csv")
