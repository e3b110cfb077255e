"""MCP tools for browsing and reading the component documentation."""

import logging
from dataclasses import dataclass

from edmachina_docs import doc_tree, name_matcher
from edmachina_docs.errors import (
    ContentUnavailable,
    ErrorDetail,
    ListingUnavailable,
    MissingCredential,
    NoMatch,
    RepoOrBranchNotFound,
)
from edmachina_docs.github_client import DOCUMENTATION_ROOT, DocRepositoryClient

logger = logging.getLogger(__name__)

MISSING_TOKEN_TEXT = (
    "Error: GITHUB_TOKEN no está configurado en las variables de entorno."
)


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False


def _error(text: str) -> ToolResult:
    return ToolResult(text, is_error=True)


def _detail_suffix(detail: ErrorDetail | None, message_label: str | None,
                   status_label: str) -> str:
    """Append message/status/body lines for whichever fields are present."""
    if detail is None:
        return ""
    out = ""
    if message_label and detail.message:
        out += f"\n{message_label}: {detail.message}"
    if detail.status is not None:
        out += f"\n{status_label}: {detail.status}"
    if detail.data is not None:
        out += f"\nDatos: {detail.data_json()}"
    return out


def _check_credential(client: DocRepositoryClient) -> None:
    if not client.settings.has_credential:
        raise MissingCredential("GITHUB_TOKEN is not set")


def _not_found_text(client: DocRepositoryClient, e: RepoOrBranchNotFound) -> str:
    settings = client.settings
    return (
        f"No se encontró el repo o la rama: {settings.repo_url} "
        f"branch: {settings.branch}"
        + _detail_suffix(e.detail, "Detalles", "Status")
    )


def _upstream_text(lead: str, e: Exception) -> str:
    detail = ErrorDetail.from_exception(e)
    return f"{lead} {detail.message}" + _detail_suffix(detail, None, "Estado")


async def get_documentation(client: DocRepositoryClient,
                            recursive: bool | None = None) -> ToolResult:
    """List folders and .md files under src/documentation as a tree.

    Args:
        client: Client bound to the configured repository.
        recursive: Forwarded to the tree listing; without it only the
                   repository's top level is fetched.
    """
    try:
        _check_credential(client)
        tree_id = await client.resolve_tree_id()
        paths = await client.list_documentation_files(tree_id, bool(recursive))
        return ToolResult(doc_tree.render_documentation(paths))
    except MissingCredential:
        return _error(MISSING_TOKEN_TEXT)
    except RepoOrBranchNotFound as e:
        return _error(_not_found_text(client, e))
    except ListingUnavailable:
        return _error("No se encontraron archivos en src/ o la respuesta no es válida.")
    except Exception as e:
        logger.exception("Listing documentation failed")
        return _error(_upstream_text("Error al listar la documentación de GitHub:", e))


async def get_doc_by_name(client: DocRepositoryClient, name: str) -> ToolResult:
    """Return one documentation file, unmodified, found by partial name.

    Matches the name against file stems and parent folders. A single
    match returns the file under a heading with its relative path;
    several matches return the list of paths instead.
    """
    try:
        _check_credential(client)
        tree_id = await client.resolve_tree_id()
        paths = await client.list_documentation_files(tree_id, recursive=True)
        candidates = [
            name_matcher.MatchCandidate.from_relative_path(p, DOCUMENTATION_ROOT)
            for p in paths
            if p.endswith(".md")
        ]
        matches = name_matcher.match(candidates, name)
        if not matches:
            raise NoMatch(name)

        if len(matches) > 1:
            listing = "\n".join(f"- {m.relative_path}" for m in matches)
            return ToolResult(
                f"Se encontraron varias coincidencias para '{name}':\n{listing}"
            )

        doc = matches[0]
        content = await client.fetch_file_content(doc.full_path)
        return ToolResult(f"# {doc.relative_path}\n\n{content}")
    except MissingCredential:
        return _error(MISSING_TOKEN_TEXT)
    except RepoOrBranchNotFound as e:
        return _error(_not_found_text(client, e))
    except ListingUnavailable:
        return _error(
            "No se encontraron archivos en src/documentation/ "
            "o la respuesta no es válida."
        )
    except NoMatch:
        return _error(f"No se encontró documentación para '{name}'.")
    except ContentUnavailable as e:
        relative = e.path.removeprefix(DOCUMENTATION_ROOT)
        return _error(f"No se pudo obtener el contenido de '{relative}'.")
    except Exception as e:
        logger.exception("Documentation lookup for %r failed", name)
        return _error(_upstream_text("Error al buscar la documentación:", e))
