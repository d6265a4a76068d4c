from kitchen_units.settings import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.default_unit_system == "us"
    assert s.max_multiplier == 50.0


def test_env_override(monkeypatch):
    monkeypatch.setenv("KITCHEN_UNITS_DEFAULT_UNIT_SYSTEM", "metric")
    monkeypatch.setenv("KITCHEN_UNITS_MAX_MULTIPLIER", "10")
    s = Settings(_env_file=None)
    assert s.default_unit_system == "metric"
    assert s.max_multiplier == 10.0
