from __future__ import annotations
from typing import List
from .models import Appliance, ApplianceRegistry, DEFAULT_IMAGE


def default_appliances() -> List[Appliance]:
	return [
		Appliance(name="Ventilador", image=DEFAULT_IMAGE, power_w=120, hours_per_day=5),
		Appliance(name="Geladeira", image=DEFAULT_IMAGE, power_w=300, hours_per_day=24),
	]


def seed_registry(registry: ApplianceRegistry) -> List[int]:
	return [registry.add(a) for a in default_appliances()]
