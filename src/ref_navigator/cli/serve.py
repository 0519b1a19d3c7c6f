import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console(stderr=True)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from ref_navigator.loaders.filesystem import FileSystemLoader
    from ref_navigator.mcp.server import create_mcp_server
    from ref_navigator.settings import load_settings

    settings = load_settings()
    server = create_mcp_server(FileSystemLoader(settings.encoding), settings)
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
