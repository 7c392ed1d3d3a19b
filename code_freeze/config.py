"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when a required setting is missing or invalid."""

    pass


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


class GitHubConfig(BaseSettings):
    """GitHub API and remote host settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    host: str = Field(default="github.com", description="Git remote host for HTTPS clones")


class GitConfig(BaseSettings):
    """Local git client settings."""

    model_config = SettingsConfigDict(env_prefix="GIT_", extra="ignore")

    author_name: str = Field(default="Code Freeze Bot", description="user.name for commits")
    author_email: str = Field(default="code-freeze@users.noreply.github.com", description="user.email for commits")
    # Unset means git commands may run as long as they need (large clones)
    timeout_seconds: int | None = Field(default=None, ge=1, description="Timeout for each git command")


class VersionBumpConfig(BaseSettings):
    """Release-cycle values used by the version-bump command."""

    model_config = SettingsConfigDict(env_prefix="VERSION_BUMP_", extra="ignore")

    branch: str = Field(default="prep/trunk-for-next-dev-cycle-XX.XX", description="Branch to create")
    base: str = Field(default="trunk", description="Branch the new branch starts from and the PR targets")
    version: str = Field(default="XX.XX", description="Version written to the manifest header")
    commit_message: str = Field(default="Prep trunk for {version} cycle", description="Commit message")
    pr_title: str = Field(default="Amazing new feature", description="Pull request title")
    pr_body: str = Field(default="Please pull these awesome changes in!", description="Pull request body")
    # Not derived from the repository name unless it contains {name}
    manifest_path: str = Field(
        default="plugins/woocommerce/woocommerce.php",
        description="Manifest file relative to the clone root; may contain {name}",
    )
    cleanup_clone: bool = Field(default=False, description="Remove the temporary clone when done")

    def render_commit_message(self) -> str:
        """Commit message with {version} substituted."""
        return self.commit_message.replace("{version}", self.version)

    def render_manifest_path(self, name: str) -> str:
        """Manifest path with {name} substituted."""
        return self.manifest_path.replace("{name}", name)


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    version_bump: VersionBumpConfig = Field(default_factory=VersionBumpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    def require_github_token(self) -> str:
        """Return the GitHub token or raise ConfigError if none is set."""
        token = self.github_token_resolved
        if not token:
            raise ConfigError("GITHUB_TOKEN is not set (env GITHUB_TOKEN, GITHUB_TOKEN_FILE or github.token)")
        return token


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE. A missing file yields
    defaults (plus env overrides).
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top-level YAML must be a mapping")
    raw = _substitute_env(raw)

    return AppConfig(
        github=GitHubConfig(**(raw.get("github") or {})),
        git=GitConfig(**(raw.get("git") or {})),
        version_bump=VersionBumpConfig(**(raw.get("version_bump") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
