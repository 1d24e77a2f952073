"""End-to-end CLI tests running main() against real configuration files."""
import json

import pytest
import yaml

from decorum.application.catalog.pizza import PIZZA_SCHEMA
from decorum.cli.main import main, parse_args
from decorum.config.loader import CONFIG_ENV_VAR
from decorum.domain.base.exceptions import ValidationError
from decorum.interface.command_handlers import parse_assignments


def run_cli(capsys, *argv):
    """Run the CLI and return (exit code, stdout)."""
    try:
        main(list(argv))
        code = 0
    except SystemExit as e:
        code = e.code
    return code, capsys.readouterr().out


class TestCLIIntegration:
    """Test complete CLI scenarios."""

    @pytest.fixture(autouse=True)
    def _environment(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.delenv("DECORUM_LOG_LEVEL", raising=False)
        monkeypatch.delenv("DECORUM_LOG_DESTINATION", raising=False)

    def test_chain_build_json(self, capsys):
        code, out = run_cli(
            capsys,
            "chain", "build", "speaker",
            "--set", "power=110", "--set", "bass=1",
            "--with", "bass_boost", "power_boost",
        )

        assert code == 0
        result = json.loads(out)
        assert result == {
            "kind": "speaker",
            "layers": ["bass_boost", "power_boost"],
            "attributes": {"power": 120, "bass": 6},
            "order_independent": True,
        }

    def test_chain_build_text_values(self, capsys):
        code, out = run_cli(
            capsys,
            "chain", "build", "pizza",
            "--set", "cost=1.99", "--set", "description=thin crust",
            "--with", "cheese",
        )

        assert code == 0
        result = json.loads(out)
        assert result["attributes"]["description"] == "thin crust with cheese"
        assert result["attributes"]["cost"] == pytest.approx(2.09)

    def test_chain_check_reports_order_dependence(self, capsys):
        code, out = run_cli(
            capsys,
            "chain", "check", "speaker",
            "--set", "power=110", "--set", "bass=1",
            "--with", "power_boost", "power_doubler",
        )

        assert code == 0
        result = json.loads(out)
        assert result["consistent"] is False
        assert result["forward"]["power"] == 240
        assert result["reversed"]["power"] == 230

    def test_chain_show_from_defaults(self, capsys):
        code, out = run_cli(capsys, "chain", "show", "boosted_speaker")

        assert code == 0
        result = json.loads(out)
        assert result["name"] == "boosted_speaker"
        assert result["description"] == "Speaker with both boosts applied"
        assert result["attributes"] == {"power": 120.0, "bass": 6.0}

    def test_chain_show_from_config_file(self, capsys, config_file):
        path = config_file(
            {
                "chains": {
                    "supreme": {
                        "subject": {"kind": "pizza", "values": {"cost": 4.0, "description": "deep dish"}},
                        "decorators": ["pepperoni", "olives"],
                    }
                }
            }
        )

        code, out = run_cli(capsys, "--config", path, "chain", "show", "supreme")

        assert code == 0
        result = json.loads(out)
        assert result["attributes"]["description"] == "deep dish with pepperoni with olives"
        assert result["order_independent"] is False

    def test_yaml_output(self, capsys):
        code, out = run_cli(capsys, "--format", "yaml", "subjects", "list")

        assert code == 0
        kinds = {subject["kind"]: subject for subject in yaml.safe_load(out)["subjects"]}
        assert kinds["pizza"]["attributes"] == {"cost": "numeric", "description": "text"}

    def test_table_output(self, capsys):
        code, out = run_cli(capsys, "--format", "table", "decorators", "list", "--kind", "speaker")

        assert code == 0
        assert "bass_boost" in out
        assert "power_doubler" in out
        assert "cheese" not in out

    def test_chain_table_output(self, capsys):
        code, out = run_cli(capsys, "--format", "table", "chain", "show", "cheese_pizza")

        assert code == 0
        assert "pizza: cheese" in out
        assert "thin crust with cheese" in out
        assert "2.09" in out

    def test_list_output(self, capsys):
        code, out = run_cli(capsys, "--format", "list", "chain", "show", "boosted_speaker")

        assert code == 0
        assert "Kind: speaker" in out
        assert "Layers: bass_boost, power_boost" in out
        assert "  power: 120" in out

    def test_config_show(self, capsys):
        code, out = run_cli(capsys, "config", "show")

        assert code == 0
        result = json.loads(out)
        assert result["logging"]["level"] == "WARNING"
        assert "cheese_pizza" in result["chains"]

    def test_output_file(self, capsys, tmp_path):
        output = tmp_path / "chain.json"

        code, out = run_cli(capsys, "--output", str(output), "chain", "show", "boosted_speaker")

        assert code == 0
        assert out.strip() == f"Output written to {output}"
        assert json.loads(output.read_text(encoding="utf-8"))["layers"] == ["bass_boost", "power_boost"]

    def test_quiet_output_file(self, capsys, tmp_path):
        output = tmp_path / "subjects.json"

        code, out = run_cli(capsys, "--quiet", "--output", str(output), "subjects", "list")

        assert code == 0
        assert out == ""
        assert output.exists()

    def test_unknown_decorator_exits_with_error_payload(self, capsys):
        code, out = run_cli(
            capsys,
            "chain", "build", "speaker",
            "--set", "power=110", "--set", "bass=1",
            "--with", "treble_boost",
        )

        assert code == 1
        payload = json.loads(out)
        assert payload["error"] == "UNKNOWN_VARIANT"
        assert payload["details"] == {"name": "treble_boost", "registry": "decorator"}

    def test_invalid_subject_values_exit_with_validation_error(self, capsys):
        code, out = run_cli(capsys, "chain", "build", "speaker", "--set", "power=110")

        assert code == 1
        payload = json.loads(out)
        assert payload["error"] == "VALIDATION_ERROR"
        assert payload["details"]["errors"] == {"bass": "missing"}

    def test_decorators_for_another_kind_are_rejected(self, capsys):
        code, out = run_cli(
            capsys,
            "chain", "build", "speaker",
            "--set", "power=110", "--set", "bass=1",
            "--with", "cheese", "olives",
        )

        assert code == 1
        payload = json.loads(out)
        assert payload["error"] == "VALIDATION_ERROR"
        assert payload["details"]["decorator"] == "cheese"

    def test_numeric_looking_text_stays_text(self, capsys):
        code, out = run_cli(
            capsys,
            "chain", "build", "pizza",
            "--set", "cost=1.99", "--set", "description=42",
            "--with", "cheese",
        )

        assert code == 0
        assert json.loads(out)["attributes"]["description"] == "42 with cheese"

    @pytest.mark.parametrize("power", ["nan", "inf"])
    def test_non_finite_values_are_rejected(self, capsys, power):
        code, out = run_cli(
            capsys,
            "chain", "check", "speaker",
            "--set", f"power={power}", "--set", "bass=1",
            "--with", "bass_boost", "power_boost",
        )

        assert code == 1
        payload = json.loads(out)
        assert payload["error"] == "VALIDATION_ERROR"
        assert "power" in payload["details"]["errors"]

    def test_missing_config_file(self, capsys, tmp_path):
        code, out = run_cli(capsys, "--config", str(tmp_path / "missing.json"), "subjects", "list")

        assert code == 1
        assert json.loads(out)["error"] == "CONFIGURATION_ERROR"

    def test_missing_resource(self, capsys):
        code, out = run_cli(capsys)

        assert code == 1
        assert "No resource specified" in out

    def test_missing_action(self, capsys):
        code, out = run_cli(capsys, "chain")

        assert code == 1
        assert "No action specified for chain" in out


def test_parse_args_chain_build():
    args = parse_args(["chain", "build", "pizza", "--set", "cost=1", "--with", "cheese", "olives"])

    assert args.resource == "chain"
    assert args.action == "build"
    assert args.kind == "pizza"
    assert args.set == ["cost=1"]
    assert args.decorators == ["cheese", "olives"]
    assert args.format == "json"


def test_parse_assignments():
    assert parse_assignments(["power=110", "cost=1.99", "description=thin crust", "empty="]) == {
        "power": 110,
        "cost": 1.99,
        "description": "thin crust",
        "empty": "",
    }
    assert parse_assignments(None) == {}


@pytest.mark.parametrize("assignment", ["power", "=110"])
def test_parse_assignments_rejects_malformed_input(assignment):
    with pytest.raises(ValidationError):
        parse_assignments([assignment])


def test_parse_assignments_follows_the_schema():
    assert parse_assignments(["cost=2", "description=42"], PIZZA_SCHEMA) == {"cost": 2, "description": "42"}
    # Names outside the schema are still guessed; the subject rejects them later
    assert parse_assignments(["extra=7"], PIZZA_SCHEMA) == {"extra": 7}
