from __future__ import annotations
from enum import Enum
from typing import Optional
from .calculations import DEFAULT_CURRENCY, DEFAULT_TARIFF, format_cost, monthly_cost, parse_int_field, parse_tariff
from .models import Appliance, ApplianceRegistry, DEFAULT_IMAGE


EXTENSION_KEY = "energy_control"


class Screen(str, Enum):
	LIST = "list"
	ADD_FORM = "add_form"


class ControlPanel:
	"""
	Owns the registry, the raw tariff text, the last total and the active screen.
	The total is recomputed after every add or delete and on request only.
	"""

	def __init__(self, registry: Optional[ApplianceRegistry] = None, tariff_text: str = DEFAULT_TARIFF) -> None:
		self.registry = registry if registry is not None else ApplianceRegistry()
		self.tariff_text = tariff_text
		self.screen = Screen.LIST
		self.total = 0.0
		self.recalculate()

	@property
	def tariff(self) -> float:
		return parse_tariff(self.tariff_text)

	def recalculate(self, tariff_text: Optional[str] = None) -> float:
		if tariff_text is not None:
			self.tariff_text = tariff_text
		self.total = monthly_cost(self.registry.list(), self.tariff)
		return self.total

	def open_add_form(self) -> None:
		self.screen = Screen.ADD_FORM

	def cancel(self) -> None:
		self.screen = Screen.LIST

	def save_appliance(self, name: str, power_text: str, hours_text: str, image: str = DEFAULT_IMAGE) -> int:
		"""
		Add an appliance from raw form text and go back to the list.
		Unparseable power or hours become 0.
		"""
		appliance = Appliance(
			name=name,
			image=image,
			power_w=parse_int_field(power_text),
			hours_per_day=parse_int_field(hours_text),
		)
		handle = self.registry.add(appliance)
		self.screen = Screen.LIST
		self.recalculate()
		return handle

	def delete(self, handle: int) -> bool:
		removed = self.registry.remove(handle)
		self.recalculate()
		return removed

	def formatted_total(self, currency: str = DEFAULT_CURRENCY) -> str:
		return format_cost(self.total, currency)

	def __repr__(self) -> str:
		return f"<ControlPanel {self.screen.value} {len(self.registry)} appliances total={self.total:.2f}>"
