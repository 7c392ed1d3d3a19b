"""Data models for repository references, branches, and pull requests."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class RepositoryRef(BaseModel):
    """Remote repository plus the credential used to clone it."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)
    token: str = Field(repr=False)
    host: str = "github.com"

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def remote_url(self) -> str:
        """HTTPS clone URL with owner and token as basic-auth credentials."""
        return f"https://{self.owner}:{self.token}@{self.host}/{self.owner}/{self.name}"


class BranchSpec(BaseModel):
    """Branch to create and the branch it starts from."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="prep/trunk-for-next-dev-cycle-XX.XX", min_length=1)
    base: str = Field(default="trunk", min_length=1)


class PullRequestPayload(BaseModel):
    """Arguments of POST /repos/{owner}/{repo}/pulls."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    title: str
    body: str = ""
    head: str
    base: str

    def to_api(self) -> dict[str, Any]:
        """JSON body for the API (owner and repo go into the URL)."""
        return {"title": self.title, "body": self.body, "head": self.head, "base": self.base}


class PR(BaseModel):
    """Pull request as returned by the hosting platform."""

    number: int
    title: str
    body: str = ""
    head_branch: str
    base_branch: str
    state: str
    html_url: str | None = None


class ManifestPatchResult(BaseModel):
    """Outcome of patching the version header of a manifest file.

    patched: the version line was rewritten.
    unchanged: the file was read and written back, no line matched.
    skipped: reading or writing failed; ``error`` says why.
    """

    status: Literal["patched", "unchanged", "skipped"]
    path: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "skipped"
