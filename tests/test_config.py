"""Tests for code_freeze.config (YAML + env loading, token resolution)."""

from pathlib import Path

import pytest

from code_freeze.config import AppConfig, ConfigError, GitHubConfig, VersionBumpConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("GITHUB_TOKEN", "GITHUB_TOKEN_FILE", "GITHUB_API_URL", "GITHUB_HOST"):
        monkeypatch.delenv(key, raising=False)
    for key in ("BRANCH", "BASE", "VERSION", "COMMIT_MESSAGE", "MANIFEST_PATH", "CLEANUP_CLONE"):
        monkeypatch.delenv(f"VERSION_BUMP_{key}", raising=False)


class TestVersionBumpDefaults:
    """Release values default to the placeholder cycle."""

    def test_defaults(self) -> None:
        """Branch, base, version and messages default to the XX.XX placeholders."""
        cfg = VersionBumpConfig()
        assert cfg.branch == "prep/trunk-for-next-dev-cycle-XX.XX"
        assert cfg.base == "trunk"
        assert cfg.version == "XX.XX"
        assert cfg.render_commit_message() == "Prep trunk for XX.XX cycle"
        assert cfg.pr_title == "Amazing new feature"
        assert cfg.pr_body == "Please pull these awesome changes in!"
        assert cfg.cleanup_clone is False

    def test_manifest_path_ignores_name_by_default(self) -> None:
        """Default manifest path is literal; the repository name is not substituted."""
        cfg = VersionBumpConfig()
        assert cfg.render_manifest_path("widget") == "plugins/woocommerce/woocommerce.php"

    def test_manifest_path_template(self) -> None:
        """{name} in manifest_path is replaced with the repository name."""
        cfg = VersionBumpConfig(manifest_path="plugins/{name}/{name}.php")
        assert cfg.render_manifest_path("widget") == "plugins/widget/widget.php"

    def test_commit_message_uses_version(self) -> None:
        """{version} in commit_message follows the configured version."""
        cfg = VersionBumpConfig(version="9.4")
        assert cfg.render_commit_message() == "Prep trunk for 9.4 cycle"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """VERSION_BUMP_* env vars override defaults."""
        monkeypatch.setenv("VERSION_BUMP_VERSION", "10.1")
        monkeypatch.setenv("VERSION_BUMP_BASE", "main")
        cfg = VersionBumpConfig()
        assert cfg.version == "10.1"
        assert cfg.base == "main"


class TestLoadConfig:
    """load_config reads YAML, substitutes env, falls back to defaults."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing config file yields the default config."""
        config = load_config(tmp_path / "nope.yaml")
        assert isinstance(config, AppConfig)
        assert config.github.api_url == "https://api.github.com"
        assert config.version_bump.base == "trunk"

    def test_yaml_values_and_env_substitution(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sections are read from YAML and ${VAR} is replaced from env."""
        monkeypatch.setenv("MY_TOKEN", "from-env")
        path = tmp_path / "config.yaml"
        path.write_text(
            "github:\n"
            "  token: ${MY_TOKEN}\n"
            "version_bump:\n"
            "  version: '9.5'\n"
            "  branch: prep/trunk-for-next-dev-cycle-9.5\n"
            "logging:\n"
            "  level: DEBUG\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.github.token == "from-env"
        assert config.github_token_resolved == "from-env"
        assert config.version_bump.version == "9.5"
        assert config.version_bump.branch == "prep/trunk-for-next-dev-cycle-9.5"
        assert config.logging.level == "DEBUG"

    def test_invalid_yaml_raises_config_error(self, tmp_path: Path) -> None:
        """Unparseable YAML raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("github: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)

    def test_non_mapping_yaml_raises_config_error(self, tmp_path: Path) -> None:
        """A YAML list at top level raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)


class TestGitHubToken:
    """Token resolution order: config value, GITHUB_TOKEN, GITHUB_TOKEN_FILE."""

    def test_unresolved_placeholder_falls_back_to_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A literal ${...} left in config is ignored in favor of env."""
        path = tmp_path / "config.yaml"
        path.write_text("github:\n  token: ${UNSET_TOKEN_VAR}\n", encoding="utf-8")
        monkeypatch.delenv("UNSET_TOKEN_VAR", raising=False)
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        config = load_config(path)
        assert config.github_token_resolved == "env-token"

    def test_token_from_secret_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """GITHUB_TOKEN_FILE is read when GITHUB_TOKEN is unset."""
        secret = tmp_path / "token"
        secret.write_text("file-token\n", encoding="utf-8")
        monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))
        config = load_config(tmp_path / "missing.yaml")
        assert config.require_github_token() == "file-token"

    def test_require_token_raises_when_missing(self, tmp_path: Path) -> None:
        """require_github_token raises ConfigError without any token."""
        config = load_config(tmp_path / "missing.yaml")
        with pytest.raises(ConfigError, match="GITHUB_TOKEN"):
            config.require_github_token()

    def test_explicit_token_wins(self) -> None:
        """A token set in config is returned as is."""
        config = AppConfig(github=GitHubConfig(token="explicit"))
        assert config.require_github_token() == "explicit"
