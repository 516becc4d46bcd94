import pytest
from energy_control.models import ApplianceRegistry
from energy_control.seeds import seed_registry
from energy_control.state import ControlPanel, Screen


@pytest.fixture
def panel():
	registry = ApplianceRegistry()
	seed_registry(registry)
	return ControlPanel(registry)


def test_initial_total_uses_default_tariff(panel):
	assert panel.tariff_text == "0.85"
	assert panel.screen is Screen.LIST
	assert panel.formatted_total() == "R$ 198.90"


def test_empty_panel():
	panel = ControlPanel()
	assert panel.total == 0.0


def test_recalculate_with_new_tariff(panel):
	panel.recalculate("1.0")
	assert panel.total == pytest.approx(234.0)


def test_bad_tariff_text_gives_zero(panel):
	assert panel.recalculate("abc") == 0.0
	assert panel.formatted_total() == "R$ 0.00"
	assert panel.tariff_text == "abc"


def test_add_then_remove_first(panel):
	first = panel.registry.entries()[0].handle
	assert len(panel.registry) == 2
	panel.open_add_form()
	assert panel.screen is Screen.ADD_FORM
	panel.save_appliance("TV", "100", "4")
	assert panel.screen is Screen.LIST
	assert len(panel.registry) == 3
	panel.delete(first)
	assert len(panel.registry) == 2
	# Geladeira 183.60 + TV (0.4 kWh/day → 12 kWh/month) 10.20
	assert round(panel.total, 2) == 193.8


def test_save_defaults_unparseable_fields(panel):
	handle = panel.save_appliance("Lamp", "sixty", "2.5")
	lamp = panel.registry.get(handle)
	assert (lamp.power_w, lamp.hours_per_day) == (0, 0)
	assert round(panel.total, 2) == 198.9


def test_cancel_leaves_registry(panel):
	panel.open_add_form()
	panel.cancel()
	assert panel.screen is Screen.LIST
	assert len(panel.registry) == 2


def test_delete_unknown_handle(panel):
	assert panel.delete(42) is False
	assert round(panel.total, 2) == 198.9
