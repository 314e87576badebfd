import pytest

from barstatus import power


@pytest.fixture
def battery(tmp_path):
    directory = tmp_path / "BAT0"
    directory.mkdir()
    return directory


def test_battery_perc(tmp_path, battery):
    (battery / "capacity").write_text("87\n")
    assert power.battery_perc("BAT0", tmp_path) == "87"


def test_battery_perc_missing(tmp_path):
    assert power.battery_perc("BAT9", tmp_path) is None


@pytest.mark.parametrize(
    "status, symbol",
    [("Charging\n", "ﮣ"), ("Discharging\n", "*"), ("Full\n", "?")],
)
def test_battery_state(tmp_path, battery, status, symbol):
    (battery / "status").write_text(status)
    assert power.battery_state("BAT0", tmp_path) == symbol


def test_remaining_while_charging_is_empty(tmp_path, battery):
    (battery / "status").write_text("Charging\n")
    (battery / "charge_now").write_text("3000000\n")
    assert power.battery_remaining("BAT0", tmp_path) == ""


def test_remaining_while_discharging(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "charge_now").write_text("3000000\n")
    (battery / "current_now").write_text("2000000\n")
    assert power.battery_remaining("BAT0", tmp_path) == "1h 30m"


def test_remaining_falls_back_to_energy_and_power(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "energy_now").write_text("4000\n")
    (battery / "power_now").write_text("2000\n")
    assert power.battery_remaining("BAT0", tmp_path) == "2h 0m"


def test_remaining_zero_current_is_none(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "charge_now").write_text("3000\n")
    (battery / "current_now").write_text("0\n")
    assert power.battery_remaining("BAT0", tmp_path) is None


def test_remaining_without_charge_file_is_none(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    assert power.battery_remaining("BAT0", tmp_path) is None