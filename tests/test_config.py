"""Tests for application settings."""

from planet_tiles.config import Settings
from planet_tiles.terrain import FieldVariant, Palette


def test_settings_defaults():
    """Test Settings has sensible defaults."""
    settings = Settings()
    assert settings.port == 8080
    assert settings.noise_seed == 0
    assert settings.field_variant is FieldVariant.TORUS
    assert settings.palette is Palette.ELEVATION
    assert settings.max_zoom > 0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PLANET_TILES_PORT", "9000")
    monkeypatch.setenv("PLANET_TILES_NOISE_SEED", "42")
    monkeypatch.setenv("PLANET_TILES_FIELD_VARIANT", "sphere")
    monkeypatch.setenv("PLANET_TILES_PALETTE", "hue")

    settings = Settings()

    assert settings.port == 9000
    assert settings.noise_seed == 42
    assert settings.field_variant is FieldVariant.SPHERE
    assert settings.palette is Palette.HUE


def test_cors_origins_comma_separated():
    settings = Settings(cors_origins="http://a.example, http://b.example")
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


def test_cors_origins_json():
    settings = Settings(cors_origins='["http://a.example"]')
    assert settings.cors_origins == ["http://a.example"]


def test_cors_origins_comma_separated_from_environment(monkeypatch):
    monkeypatch.setenv("PLANET_TILES_CORS_ORIGINS", "http://a.example,http://b.example")
    settings = Settings()
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


def test_cors_origins_json_from_environment(monkeypatch):
    monkeypatch.setenv("PLANET_TILES_CORS_ORIGINS", '["http://a.example", "http://b.example"]')
    settings = Settings()
    assert settings.cors_origins == ["http://a.example", "http://b.example"]
