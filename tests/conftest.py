import json
import logging

import pytest

from decorum.application.catalog.pizza import make_pizza
from decorum.application.catalog.speaker import make_speaker
from decorum.config.manager import ConfigurationManager


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by setup_logging so tests don't leak into each other."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    yield
    for handler in root.handlers[:]:
        if handler not in original_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in original_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(original_level)


@pytest.fixture
def speaker():
    return make_speaker(power=110.0, bass=1.0)


@pytest.fixture
def pizza():
    return make_pizza(cost=1.99, description="thin crust")


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration dictionary to a JSON file and return its path."""

    def _write(config_data, name="decorum.json"):
        path = tmp_path / name
        path.write_text(json.dumps(config_data, indent=2), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def config_manager(config_file):
    path = config_file(
        {
            "chains": {
                "loud": {
                    "description": "Power boosted twice over",
                    "subject": {"kind": "speaker", "values": {"power": 50.0, "bass": 2.0}},
                    "decorators": ["power_boost", "power_doubler"],
                }
            }
        }
    )
    return ConfigurationManager(path)
