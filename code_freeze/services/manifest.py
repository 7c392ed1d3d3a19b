"""Rewrite the ``Version:`` header of a plugin manifest file."""

import logging
import re
from pathlib import Path

from code_freeze.models import ManifestPatchResult

# First "Version: X.Y.Z" on any line (e.g. " * Version: 8.5.0-dev" in a plugin
# header comment) through the end of that line
VERSION_LINE_RE = re.compile(r"Version: \d+\.\d+\.\d+[^\r\n]*\n", re.ASCII)


def replace_version_line(content: str, version: str) -> tuple[str, bool]:
    """Replace the first version header line with ``Version: <version>``.

    Args:
        content: Manifest text.
        version: New version string (e.g. "9.4" or "XX.XX").

    Returns:
        Tuple of (new content, whether a line was replaced). Content is
        returned unchanged when no line matches.
    """
    new_content, count = VERSION_LINE_RE.subn(lambda _m: f"Version: {version}\n", content, count=1)
    return new_content, count > 0


def patch_manifest(
    path: Path,
    version: str,
    log: logging.Logger | None = None,
) -> ManifestPatchResult:
    """Read path, rewrite its version header, write it back.

    I/O failures do not raise: they are reported as a "skipped" result so
    the caller can continue without the manifest change.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
        new_content, replaced = replace_version_line(content, version)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(new_content)
    except (OSError, UnicodeDecodeError) as e:
        if log:
            log.warning("Could not update %s: %s", path, e)
        return ManifestPatchResult(status="skipped", path=str(path), error=str(e))
    if log:
        if replaced:
            log.info("Set version %s in %s", version, path)
        else:
            log.info("No version header found in %s", path)
    return ManifestPatchResult(status="patched" if replaced else "unchanged", path=str(path))
