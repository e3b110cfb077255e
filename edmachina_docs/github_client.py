"""Async client for the GitHub REST API, scoped to the documentation tree."""

import base64
import logging
from urllib.parse import quote

import httpx

from edmachina_docs.errors import (
    ContentUnavailable,
    ErrorDetail,
    ListingUnavailable,
    RepoOrBranchNotFound,
)
from edmachina_docs.settings import RepoSettings

logger = logging.getLogger(__name__)

DOCUMENTATION_ROOT = "src/documentation/"
API_VERSION = "2022-11-28"


class DocRepositoryClient:
    """Resolve branch -> tree -> documentation files for one repository.

    Use as an async context manager; the underlying HTTP client lives for
    a single tool invocation.
    """

    def __init__(
        self,
        settings: RepoSettings,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.api_url,
            headers=self._headers(),
            transport=transport,
            timeout=timeout,
        )

    def _headers(self) -> dict[str, str]:
        """Build auth headers for the GitHub API."""
        return {
            "Authorization": f"Bearer {self.settings.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        }

    async def __aenter__(self) -> "DocRepositoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def _repo_prefix(self) -> str:
        return f"/repos/{self.settings.owner}/{self.settings.repo}"

    async def resolve_tree_id(self) -> str:
        """Return the tree SHA at the head of the configured branch."""
        branch = self.settings.branch
        try:
            resp = await self._client.get(
                f"{self._repo_prefix}/branches/{quote(branch)}"
            )
            resp.raise_for_status()
            return resp.json()["commit"]["commit"]["tree"]["sha"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error(
                "Branch lookup failed for %s@%s: %s",
                self.settings.repo_url, branch, e,
            )
            raise RepoOrBranchNotFound(
                f"{self.settings.repo_url} branch: {branch}",
                ErrorDetail.from_exception(e),
            ) from e

    async def list_documentation_files(
        self, tree_id: str, recursive: bool = False
    ) -> list[str]:
        """List paths under the documentation root, relative to it.

        Without ``recursive`` GitHub returns only the top level of the
        repository, so nothing under the documentation root shows up.
        """
        params = {"recursive": "1"} if recursive else None
        resp = await self._client.get(
            f"{self._repo_prefix}/git/trees/{tree_id}", params=params
        )
        resp.raise_for_status()
        data = resp.json()
        entries = data.get("tree") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ListingUnavailable(f"Unexpected tree response for {tree_id}")
        if data.get("truncated"):
            logger.warning("Tree listing for %s was truncated by GitHub", tree_id)

        paths = []
        for item in entries:
            path = item.get("path", "") if isinstance(item, dict) else ""
            if path.startswith(DOCUMENTATION_ROOT):
                paths.append(path[len(DOCUMENTATION_ROOT):])
        logger.info("Found %d entries under %s", len(paths), DOCUMENTATION_ROOT)
        return paths

    async def fetch_file_content(self, path: str, ref: str | None = None) -> str:
        """Fetch a file's contents at ``ref`` and decode it to text."""
        resp = await self._client.get(
            f"{self._repo_prefix}/contents/{quote(path)}",
            params={"ref": ref or self.settings.branch},
        )
        resp.raise_for_status()
        data = resp.json()
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, str):
            raise ContentUnavailable(path)
        return base64.b64decode(content).decode("utf-8")
