from flask import Flask
import logging
import os
from .calculations import DEFAULT_CURRENCY, DEFAULT_TARIFF
from .models import ApplianceRegistry
from .seeds import seed_registry
from .state import EXTENSION_KEY, ControlPanel


def create_app(test_config: dict | None = None) -> Flask:
	"""
	Application factory to create and configure the Flask app.
	"""
	app = Flask(__name__)

	# Default configuration
	app.config.from_mapping(
		SECRET_KEY=os.environ.get("SECRET_KEY", "dev"),
		DEFAULT_TARIFF=os.environ.get("ENERGY_DEFAULT_TARIFF", DEFAULT_TARIFF),
		CURRENCY_SYMBOL=os.environ.get("ENERGY_CURRENCY", DEFAULT_CURRENCY),
		SEED_APPLIANCES=True,
		LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
	)

	# Test configuration override
	if test_config:
		app.config.update(test_config)

	# Child loggers (energy_control.models, ...) inherit this level
	level = str(app.config["LOG_LEVEL"]).upper()
	if not isinstance(logging.getLevelName(level), int):
		level = "INFO"
	app.logger.setLevel(level)

	# In-memory state, gone when the process exits
	registry = ApplianceRegistry()
	if app.config["SEED_APPLIANCES"]:
		seed_registry(registry)
	app.extensions[EXTENSION_KEY] = ControlPanel(registry, app.config["DEFAULT_TARIFF"])

	# Register blueprints
	from .routes import bp as main_bp

	app.register_blueprint(main_bp)

	return app
