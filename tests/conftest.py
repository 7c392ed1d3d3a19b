"""Shared fixtures: local bare repositories standing in for the GitHub remote."""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from code_freeze.config import AppConfig, GitConfig, GitHubConfig, VersionBumpConfig

MANIFEST_PATH = "plugins/woocommerce/woocommerce.php"


def git(*args: str, cwd: Path) -> str:
    """Run git in cwd with a fixed identity and return stdout."""
    result = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


@pytest.fixture
def make_remote(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Factory: bare repository whose trunk branch holds the given files."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    def _make(files: dict[str, str]) -> Path:
        seed = tmp_path / "seed"
        seed.mkdir()
        git("init", "-q", cwd=seed)
        git("checkout", "-q", "-b", "trunk", cwd=seed)
        for rel, content in files.items():
            path = seed / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        git("add", "-A", cwd=seed)
        git("commit", "-q", "-m", "Initial commit", cwd=seed)
        bare = tmp_path / "remote.git"
        git("clone", "-q", "--bare", str(seed), str(bare), cwd=tmp_path)
        return bare

    return _make


@pytest.fixture
def app_config() -> AppConfig:
    """Config with a token and a fixed commit identity."""
    return AppConfig(
        github=GitHubConfig(token="test-token", api_url="https://api.github.com", host="github.com"),
        git=GitConfig(author_name="Release Bot", author_email="release@example.com"),
        version_bump=VersionBumpConfig(),
    )
