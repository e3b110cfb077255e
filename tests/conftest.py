"""Shared fixtures: repository settings and a fake GitHub API."""

import base64

import httpx
import pytest

from edmachina_docs.github_client import DocRepositoryClient
from edmachina_docs.settings import RepoSettings

TREE_SHA = "tree123"

SAMPLE_TREE = [
    {"path": "README.md", "type": "blob"},
    {"path": "src", "type": "tree"},
    {"path": "src/documentation", "type": "tree"},
    {"path": "src/documentation/buttons", "type": "tree"},
    {"path": "src/documentation/buttons/button_default.md", "type": "blob"},
    {"path": "src/documentation/buttons/notes.txt", "type": "blob"},
    {"path": "src/documentation/forms", "type": "tree"},
    {"path": "src/documentation/forms/input_text.md", "type": "blob"},
    {"path": "src/app/main.ts", "type": "blob"},
]

SAMPLE_FILES = {
    "src/documentation/buttons/button_default.md": (
        "# Button Default\n\n| Prop | Tipo |\n| --- | --- |\n| size | `sm` |\n"
    ),
    "src/documentation/forms/input_text.md": (
        "# Input Text\n\n```tsx\n<InputText label=\"Año\" />\n```\n\n> Nota: ñandú\n"
    ),
}


def encode_content(text: str) -> str:
    """Base64 the way GitHub does, wrapped at 60 characters."""
    raw = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(raw[i:i + 60] for i in range(0, len(raw), 60)) + "\n"


class FakeGitHub:
    """Minimal stand-in for the branch, tree and contents endpoints."""

    def __init__(self, tree=None, files=None):
        self.tree = SAMPLE_TREE if tree is None else tree
        self.files = SAMPLE_FILES if files is None else files
        self.requests: list[httpx.Request] = []
        self.branch_status = 200
        self.tree_body = None
        self.contents_body = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/repos/acme/components/branches/main":
            if self.branch_status != 200:
                return httpx.Response(
                    self.branch_status, json={"message": "Branch not found"}
                )
            return httpx.Response(
                200, json={"commit": {"commit": {"tree": {"sha": TREE_SHA}}}}
            )
        if path == f"/repos/acme/components/git/trees/{TREE_SHA}":
            if self.tree_body is not None:
                return httpx.Response(200, json=self.tree_body)
            if request.url.params.get("recursive") == "1":
                entries = self.tree
            else:
                entries = [e for e in self.tree if "/" not in e["path"]]
            return httpx.Response(200, json={"tree": entries, "truncated": False})
        prefix = "/repos/acme/components/contents/"
        if path.startswith(prefix):
            if self.contents_body is not None:
                return httpx.Response(200, json=self.contents_body)
            file_path = path[len(prefix):]
            if file_path not in self.files:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json={
                "path": file_path,
                "encoding": "base64",
                "content": encode_content(self.files[file_path]),
            })
        return httpx.Response(404, json={"message": "Not Found"})

    def paths_requested(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def settings() -> RepoSettings:
    return RepoSettings(
        token="ghp_test", owner="acme", repo="components", branch="main"
    )


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def make_client(settings, github):
    """Factory for clients wired to the fake GitHub."""
    def _make(repo_settings: RepoSettings | None = None) -> DocRepositoryClient:
        return DocRepositoryClient(
            repo_settings or settings, transport=httpx.MockTransport(github)
        )
    return _make
