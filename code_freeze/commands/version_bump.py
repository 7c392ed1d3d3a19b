"""version-bump: prepare trunk for the next development cycle.

Clones the repository, creates the prep branch from the base branch,
rewrites the version header of the plugin manifest, commits, pushes and
opens a pull request. Steps run strictly one after another; any git or
API failure aborts the run. A manifest that cannot be read or written is
reported and skipped.
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

from code_freeze.adapters.base import GitPlatformAdapter
from code_freeze.adapters.github import GitHubAdapter
from code_freeze.config import AppConfig
from code_freeze.models import PR, BranchSpec, ManifestPatchResult, PullRequestPayload, RepositoryRef
from code_freeze.reporter import ProgressReporter
from code_freeze.services.git import add_paths, commit, create_branch, push_branch, temporary_clone
from code_freeze.services.manifest import patch_manifest

DEFAULT_OWNER = "woocommerce"
DEFAULT_NAME = "woocommerce"

log = logging.getLogger("code_freeze.commands.version_bump")


@dataclass
class VersionBumpResult:
    """What a successful run produced."""

    repo_dir: Path
    branch: BranchSpec
    manifest: ManifestPatchResult
    pr: PR


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    """Register the version-bump subcommand."""
    parser = subparsers.add_parser(
        "version-bump",
        help="Bump versions ahead of new development cycle",
        description="Bump versions ahead of new development cycle",
    )
    parser.add_argument(
        "-o",
        "--owner",
        default=DEFAULT_OWNER,
        help=f"Repository owner. Default: {DEFAULT_OWNER}",
    )
    parser.add_argument(
        "-n",
        "--name",
        default=DEFAULT_NAME,
        help=f"Repository name. Default: {DEFAULT_NAME}",
    )
    parser.add_argument(
        "--cleanup",
        action="store_true",
        default=None,
        help="Remove the temporary clone when done (default: version_bump.cleanup_clone)",
    )
    parser.set_defaults(handler=handle)
    return parser


def handle(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the subcommand from parsed CLI args."""
    cleanup = config.version_bump.cleanup_clone if args.cleanup is None else args.cleanup
    result = run_version_bump(config, owner=args.owner, name=args.name, cleanup=cleanup)
    print(result.pr.html_url or f"Pull request #{result.pr.number} created")
    return 0


def _warn_on_manifest_mismatch(manifest_path: str, name: str, reporter: ProgressReporter) -> None:
    if name != DEFAULT_NAME and name not in Path(manifest_path).parts:
        reporter.warn(
            f"Manifest path '{manifest_path}' does not follow repository name '{name}'; "
            "set version_bump.manifest_path (supports {name}) if this is not intended"
        )


def run_version_bump(
    config: AppConfig,
    owner: str = DEFAULT_OWNER,
    name: str = DEFAULT_NAME,
    adapter: GitPlatformAdapter | None = None,
    reporter: ProgressReporter | None = None,
    cleanup: bool = False,
) -> VersionBumpResult:
    """Clone owner/name, bump the manifest version on a new branch and open a PR.

    Args:
        config: Loaded application config (token, release values, git identity).
        owner: Repository owner.
        name: Repository name.
        adapter: Platform adapter for the PR; a GitHubAdapter is built from
            config when None.
        reporter: Progress reporter; a default one when None.
        cleanup: Remove the clone after the run (success or failure).

    Returns:
        VersionBumpResult with the clone path, branch, manifest outcome and PR.

    Raises:
        ConfigError: If no GitHub token is configured.
        GitRunnerError: If clone, branch, add, commit or push fails.
        GitPlatformError: If the pull request cannot be created.
    """
    token = config.require_github_token()
    reporter = reporter or ProgressReporter()
    bump = config.version_bump
    timeout = config.git.timeout_seconds
    repo = RepositoryRef(owner=owner, name=name, token=token, host=config.github.host)
    branch = BranchSpec(name=bump.branch, base=bump.base)
    if adapter is None:
        adapter = GitHubAdapter(token=token, api_url=config.github.api_url)

    reporter.start_task(f"Making a temporary clone of '{repo.slug}'")
    with temporary_clone(repo.remote_url, cleanup=cleanup, log=log, timeout=timeout) as repo_dir:
        reporter.end_task()
        reporter.notice(f"Temporary clone of '{repo.slug}' created at {repo_dir}")

        create_branch(branch.name, branch.base, repo_dir=repo_dir, log=log)

        manifest_rel = bump.render_manifest_path(name)
        _warn_on_manifest_mismatch(manifest_rel, name, reporter)
        manifest = patch_manifest(repo_dir / manifest_rel, bump.version, log=log)
        if not manifest.ok:
            reporter.error("Unable to update plugin file.")

        reporter.start_task("Adding and committing changes")
        add_paths([manifest_rel], repo_dir=repo_dir, log=log)
        commit(
            bump.render_commit_message(),
            config.git.author_name,
            config.git.author_email,
            repo_dir=repo_dir,
            log=log,
        )
        reporter.end_task()

        reporter.start_task("Pushing to Github")
        push_branch(branch.name, repo_dir=repo_dir, log=log, timeout=timeout)
        reporter.end_task()

        reporter.start_task("Creating a pull request")
        pr = adapter.create_pr(
            PullRequestPayload(
                owner=owner,
                repo=name,
                title=bump.pr_title,
                body=bump.pr_body,
                head=branch.name,
                base=branch.base,
            )
        )
        reporter.end_task()

    reporter.notice(f"Pull request #{pr.number} opened: {pr.html_url or repo.slug}")
    return VersionBumpResult(repo_dir=repo_dir, branch=branch, manifest=manifest, pr=pr)
