import json

import pytest
from typer.testing import CliRunner

from jewelry_design.cli.app import app


@pytest.fixture
def runner():
    return CliRunner()


def test_extract_json_output(runner):
    res = runner.invoke(app, ["extract", "A gold engagement ring with a 1 carat round diamond", "--seed", "1"])
    assert res.exit_code == 0

    data = json.loads(res.stdout)
    assert data["selection"]["jewelryType"] == "ring"
    assert data["selection"]["gemType"] == "diamond"
    assert data["confidence"]["engravingText"] == 0
    assert "gemSize" in data["detectedFields"]


def test_extract_with_fallback_file(runner, tmp_path):
    current = tmp_path / "current.json"
    current.write_text(json.dumps({"metalType": "platinum", "gemType": "topaz"}), encoding="utf-8")

    res = runner.invoke(app, ["extract", "a necklace", "--from-json", str(current)])
    assert res.exit_code == 0
    data = json.loads(res.stdout)
    assert data["selection"]["metalType"] == "platinum"
    assert data["selection"]["gemType"] == "topaz"
    assert data["selection"]["jewelryType"] == "necklace"


def test_describe(runner):
    res = runner.invoke(app, ["describe", "--type", "necklace", "--metal", "silver", "--gem", "ruby"])
    assert res.exit_code == 0
    assert res.stdout.startswith("Exquisite necklace crafted from polished sterling silver")
    assert "Estimated value: $" in res.stdout


def test_price(runner):
    res = runner.invoke(app, ["price", "--type", "ring", "--metal", "gold"])
    assert res.exit_code == 0
    assert json.loads(res.stdout)["price"] == "300.00"


def test_examples(runner):
    res = runner.invoke(app, ["examples"])
    assert res.exit_code == 0
    assert len(res.stdout.strip().splitlines()) == 6


def test_missing_config_exits(runner, tmp_path):
    res = runner.invoke(app, ["price", "--config", str(tmp_path / "missing.yaml")])
    assert res.exit_code == 2


def test_gem_none_clears_gem_from_json(runner, tmp_path):
    current = tmp_path / "current.json"
    current.write_text(json.dumps({"jewelryType": "ring", "metalType": "gold", "gemType": "ruby"}), encoding="utf-8")

    res = runner.invoke(app, ["price", "--from-json", str(current), "--gem", "none"])
    assert res.exit_code == 0
    data = json.loads(res.stdout)
    assert data["selection"]["gemType"] is None
    assert data["price"] == "300.00"
