"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project YAML files; secrets come from the
environment so no config/.env is needed. Failure scenarios use tmp_path
to create controlled filesystems.
"""

import pytest

from notafacil.backend.core.config import (
    AppConfig,
    Settings,
    find_project_root,
    get_app_config,
    get_database_url,
    get_server_base_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from notafacil.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    FeaturesSchema,
    LoggingSchema,
    ObservabilitySchema,
)


CONFIG_FILES = [
    "application.yaml",
    "database.yaml",
    "logging.yaml",
    "features.yaml",
    "observability.yaml",
]


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture
def db_secrets(monkeypatch):
    """Provide DB_PASSWORD and drop any DATABASE_URL override."""
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    monkeypatch.delenv("DATABASE_URL", raising=False)


# =============================================================================
# find_project_root
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert root.is_dir()
        assert (root / ".project_root").exists()

    def test_config_directory_exists_at_root(self):
        root = find_project_root()
        assert (root / "config" / "settings").is_dir()

    def test_finds_root_from_subdirectory(self, monkeypatch):
        root = find_project_root()
        monkeypatch.chdir(root / "config" / "settings")
        assert find_project_root() == root

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()


class TestValidateProjectRoot:
    """Tests for the SystemExit wrapper around find_project_root."""

    def test_returns_path_when_marker_exists(self):
        root = validate_project_root()
        assert (root / ".project_root").exists()

    def test_exits_when_marker_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            validate_project_root()


# =============================================================================
# load_yaml_config
# =============================================================================


class TestLoadYamlConfig:
    """Tests for YAML file loading from config/settings/."""

    def test_loads_application_yaml_as_dict(self):
        data = load_yaml_config("application.yaml")
        assert isinstance(data, dict)
        assert "name" in data
        assert "server" in data

    def test_loads_all_config_files(self):
        """Every expected YAML file should be loadable."""
        for filename in CONFIG_FILES:
            data = load_yaml_config(filename)
            assert isinstance(data, dict), f"{filename} did not return a dict"
            assert len(data) > 0, f"{filename} returned empty dict"

    def test_raises_for_nonexistent_file(self):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_yaml_config("does_not_exist.yaml")

    def test_returns_empty_dict_for_empty_yaml(self, tmp_path, monkeypatch):
        """An empty YAML file should return {} rather than None."""
        (tmp_path / ".project_root").touch()
        settings_dir = tmp_path / "config" / "settings"
        settings_dir.mkdir(parents=True)
        (settings_dir / "empty.yaml").write_text("")
        monkeypatch.chdir(tmp_path)

        result = load_yaml_config("empty.yaml")

        assert result == {}


# =============================================================================
# Settings (secrets)
# =============================================================================


class TestSettings:
    """Tests for secret loading."""

    def test_reads_password_from_environment(self, db_secrets):
        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.db_password == "s3cret"

    def test_reads_password_from_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".project_root").touch()
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / ".env").write_text("DB_PASSWORD=from-file\n")
        monkeypatch.delenv("DB_PASSWORD", raising=False)
        monkeypatch.chdir(tmp_path)

        assert get_settings().db_password == "from-file"

    def test_caching_returns_same_instance(self, db_secrets):
        assert get_settings() is get_settings()


# =============================================================================
# AppConfig (validated YAML)
# =============================================================================


class TestAppConfig:
    """Tests for validated YAML configuration loading."""

    def test_sections_return_typed_schemas(self):
        config = AppConfig()
        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.database, DatabaseSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert isinstance(config.features, FeaturesSchema)
        assert isinstance(config.observability, ObservabilitySchema)

    def test_application_has_attribute_access(self):
        app = AppConfig().application
        assert isinstance(app.name, str)
        assert isinstance(app.version, str)
        assert isinstance(app.server.host, str)
        assert isinstance(app.server.port, int)
        assert app.api_prefix.startswith("/")

    def test_feature_flags_are_booleans(self):
        features = AppConfig().features
        assert isinstance(features.api_detailed_errors, bool)
        assert isinstance(features.api_request_logging, bool)
        assert isinstance(features.security_startup_checks_enabled, bool)

    def test_health_timeout_is_positive(self):
        assert AppConfig().observability.health_checks.ready_timeout_seconds > 0

    def test_rejects_yaml_with_missing_required_fields(self, tmp_path, monkeypatch):
        """A YAML file missing required fields should fail Pydantic validation."""
        (tmp_path / ".project_root").touch()
        settings_dir = tmp_path / "config" / "settings"
        settings_dir.mkdir(parents=True)
        for filename in CONFIG_FILES:
            (settings_dir / filename).write_text("name: 'Incomplete'")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="Invalid configuration"):
            AppConfig()

    def test_rejects_yaml_with_unknown_fields(self):
        """extra='forbid' on schemas should reject unknown YAML keys."""
        from pydantic import ValidationError as PydanticValidationError

        data = load_yaml_config("application.yaml")
        data["unknown_field"] = "oops"
        with pytest.raises(PydanticValidationError, match="Extra inputs are not permitted"):
            ApplicationSchema(**data)

    @pytest.mark.parametrize(
        "field, value",
        [("level", "VERBOSE"), ("format", "xml")],
    )
    def test_rejects_unknown_logging_choices(self, field, value):
        from pydantic import ValidationError as PydanticValidationError

        data = load_yaml_config("logging.yaml")
        data[field] = value
        with pytest.raises(PydanticValidationError):
            LoggingSchema(**data)

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_out_of_range_port(self, port):
        from pydantic import ValidationError as PydanticValidationError

        data = load_yaml_config("database.yaml")
        data["port"] = port
        with pytest.raises(PydanticValidationError):
            DatabaseSchema(**data)

    def test_caching_returns_same_instance(self):
        assert get_app_config() is get_app_config()


# =============================================================================
# URL builders
# =============================================================================


class TestGetDatabaseUrl:
    """Tests for database URL construction."""

    def test_async_url_uses_asyncpg_driver(self, db_secrets):
        url = get_database_url(async_driver=True)
        assert url.startswith("postgresql+asyncpg://")

    def test_sync_url_uses_postgresql_driver(self, db_secrets):
        url = get_database_url(async_driver=False)
        assert url.startswith("postgresql://")
        assert "+asyncpg" not in url

    def test_url_contains_config_values(self, db_secrets):
        url = get_database_url()
        db = get_app_config().database
        assert f"@{db.host}:{db.port}/{db.name}" in url
        assert f"{db.user}:s3cret@" in url

    def test_environment_override_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./notes.db")
        assert get_database_url() == "sqlite+aiosqlite:///./notes.db"

    @pytest.mark.parametrize("scheme", ["postgres://", "postgresql://"])
    def test_environment_override_gets_async_driver(self, monkeypatch, scheme):
        monkeypatch.setenv("DATABASE_URL", f"{scheme}u:p@db:5432/notes")
        assert get_database_url() == "postgresql+asyncpg://u:p@db:5432/notes"
        assert get_database_url(async_driver=False) == f"{scheme}u:p@db:5432/notes"


class TestGetServerBaseUrl:
    """Tests for server base URL construction."""

    def test_url_contains_host_and_port(self):
        base_url, _ = get_server_base_url()
        server = get_app_config().application.server
        assert base_url == f"http://{server.host}:{server.port}"

    def test_timeout_is_positive_float(self):
        _, timeout = get_server_base_url()
        assert isinstance(timeout, float)
        assert timeout > 0
