from plugins.height_compare.core import HeightCompareSettings, load_settings


def test_load_settings_uses_defaults():
    assert load_settings(None) == HeightCompareSettings()
    settings = load_settings({})
    assert settings.significant_digits == 4
    assert settings.grid_lines == 21
    assert settings.chart_padding_px == 70.0
    assert settings.default_max_height_m == 2.0


def test_load_settings_reads_overrides():
    settings = load_settings(
        {"significant_digits": "6", "grid_lines": 11, "chart_padding_px": 40, "max_heights": 10}
    )
    assert settings.significant_digits == 6
    assert settings.grid_lines == 11
    assert settings.chart_padding_px == 40.0
    assert settings.max_heights == 10


def test_load_settings_falls_back_on_invalid_values():
    settings = load_settings(
        {
            "grid_lines": 1,
            "zoom_step": 5,
            "default_max_height_m": -1,
            "chart_padding_px": "abc",
            "significant_digits": float("inf"),
        }
    )
    assert settings == HeightCompareSettings()


def test_load_settings_caps_significant_digits():
    assert load_settings({"significant_digits": 30}).significant_digits == 4
    assert load_settings({"significant_digits": 15}).significant_digits == 15
