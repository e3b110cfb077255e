"""EdMachina components MCP server.

Exposes the component documentation stored under src/documentation in
the configured GitHub repository, so an agent can browse the tree and
read individual Markdown files verbatim.
"""

import logging
import os
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from edmachina_docs.github_client import DocRepositoryClient
from edmachina_docs.settings import RepoSettings, load_env
from edmachina_docs.tools import doc_tools

__version__ = "1.0.0"

# Configure logging (never use print; stdout carries the MCP stdio transport)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger("edmachina_docs")

GET_DOCUMENTATION_DESCRIPTION = """\
Devuelve la lista de carpetas y archivos dentro de /src/documentation en formato \
de árbol ordenado y decorado con los siguientes iconos:

- 📁 para cada carpeta.
- 🧩 para cada archivo Markdown (.md) de documentación. Ejemplo:
  documentation/ 📁
  ├── buttons/ 📁
      ├── button_default.md 🧩
      └── button_icon.md 🧩
  └── forms/ 📁
      └── input_text.md 🧩

IMPORTANTE: No resumas, no reordenes, no elimines ni alteres ninguna línea del \
resultado. NO MUESTRES CARPETAS QUE NO SEAN DE /src/documentation, ni archivos \
que no sean .md."""

GET_DOC_BY_NAME_DESCRIPTION = """\
Devuelve el contenido completo y sin modificar del archivo Markdown de \
documentación del componente solicitado.

No resumas, no reordenes, no elimines ni alteres ninguna sección, línea, formato, \
ni caracteres del archivo.
Muestra absolutamente todo el contenido tal como está en el archivo original, \
desde la primera hasta la última línea, incluyendo encabezados, tablas, ejemplos \
de código, comentarios, advertencias, notas y cualquier otro elemento.
No agregues explicaciones, comentarios adicionales ni resumas el contenido.
Si hay varias coincidencias, muestra la lista de rutas relativas de los archivos \
encontrados, pero nunca mezcles ni modifiques el contenido de los archivos.
Si no se encuentra documentación, responde exactamente: \
"No se encontró documentación para '<nombre_del_componente>'."
El objetivo es que el usuario reciba el archivo Markdown tal cual está en el \
repositorio, sin ninguna alteración."""


def to_call_tool_result(result: doc_tools.ToolResult) -> CallToolResult:
    """Wrap a handler result so the error flag reaches the client."""
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def create_server(settings: RepoSettings | None = None) -> FastMCP:
    """Create and configure the documentation MCP server."""
    if settings is None:
        load_env()
        settings = RepoSettings.from_env()
    logger.info(
        "Serving documentation from %s (branch %s)",
        settings.repo_url, settings.branch or "<unset>",
    )

    port = int(os.environ.get("EDMACHINA_DOCS_PORT", "5100"))
    host = os.environ.get("EDMACHINA_DOCS_HOST", "127.0.0.1")

    mcp = FastMCP(
        "edmachina-components",
        host=host,
        port=port,
        instructions=(
            "Proporciona contexto y documentacion sobre los componentes de "
            "Edmachina. Usa get_documentation para ver el árbol de "
            "documentación y get_doc_by_name para leer un componente."
        ),
    )

    # Tools return CallToolResult as-is so isError is preserved.
    @mcp.tool(description=GET_DOCUMENTATION_DESCRIPTION)
    async def get_documentation(
        recursive: Annotated[bool | None, Field(
            description=(
                "Si es verdadero, devuelve los objetos o subárboles "
                "referenciados por el árbol especificado de forma recursiva."
            ),
        )] = None,
    ):
        async with DocRepositoryClient(settings) as client:
            result = await doc_tools.get_documentation(client, recursive)
        return to_call_tool_result(result)

    @mcp.tool(description=GET_DOC_BY_NAME_DESCRIPTION)
    async def get_doc_by_name(
        name: Annotated[str, Field(
            description=(
                "Nombre del componente a buscar "
                "(ej: button, card_stats, input_default, etc.)"
            ),
        )],
    ):
        async with DocRepositoryClient(settings) as client:
            result = await doc_tools.get_doc_by_name(client, name)
        return to_call_tool_result(result)

    return mcp


def main():
    """Run the documentation MCP server."""
    mcp = create_server()
    transport = os.environ.get("EDMACHINA_DOCS_TRANSPORT", "stdio")
    logger.info("Starting edmachina-components v%s over %s", __version__, transport)
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
