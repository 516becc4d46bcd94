from __future__ import annotations
import math
import re
from typing import Iterable, Dict, Any

DAYS_PER_MONTH = 30
DEFAULT_TARIFF = "0.85"
DEFAULT_CURRENCY = "R$"
INT_MIN, INT_MAX = -2**31, 2**31 - 1

_INT_FIELD = re.compile(r"[+-]?[0-9]+")

# Core Calculations


def appliance_monthly_cost(appliance: Any, tariff_per_kwh: float) -> float:
	"""
	Cost = (P × T / 1000) × 30 × tariff
	"""
	daily_kwh = appliance.power_w * appliance.hours_per_day / 1000.0
	monthly_kwh = daily_kwh * DAYS_PER_MONTH
	return monthly_kwh * tariff_per_kwh


def monthly_cost(appliances: Iterable[Any], tariff_per_kwh: float) -> float:
	"""
	Total monthly cost, summed per appliance in sequence order.
	An empty sequence costs exactly 0.0.
	"""
	return sum((appliance_monthly_cost(a, tariff_per_kwh) for a in appliances), 0.0)


def compute_daily_energy_kwh(appliances: Iterable[Any]) -> float:
	"""
	E_daily = Σ(P_i × T_i) / 1000
	"""
	return sum((a.daily_kwh() for a in appliances), 0.0)


def compute_monthly_energy_kwh(e_daily_kwh: float) -> float:
	return e_daily_kwh * DAYS_PER_MONTH


def compute_kpis(appliances: Iterable[Any], tariff: float) -> Dict[str, float]:
	"""
	Convenience KPI calculation bundle.
	"""
	appliances = list(appliances)
	e_daily = compute_daily_energy_kwh(appliances)
	e_month = compute_monthly_energy_kwh(e_daily)
	return {
		"daily_kwh": round(e_daily, 3),
		"monthly_kwh": round(e_month, 3),
		"monthly_cost": round(monthly_cost(appliances, tariff), 2),
	}


# User input


def parse_tariff(raw: str | None) -> float:
	"""
	Free-form tariff text to float. Anything unusable becomes 0.0.
	"""
	if raw is None:
		return 0.0
	if "_" in raw:
		return 0.0
	try:
		value = float(raw.strip())
	except ValueError:
		return 0.0
	if not math.isfinite(value):
		return 0.0
	return value


def parse_int_field(raw: str | None) -> int:
	"""
	Signed 32-bit integer from form text, 0 otherwise.
	"""
	if raw is None or not _INT_FIELD.fullmatch(raw):
		return 0
	value = int(raw)
	if not INT_MIN <= value <= INT_MAX:
		return 0
	return value


def format_cost(total: float, currency: str = DEFAULT_CURRENCY) -> str:
	return f"{currency} {total:.2f}"
