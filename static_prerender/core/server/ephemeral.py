"""
Ephemeral Server
================

aiohttp static file server bound to an OS-assigned port. Lives only for the
duration of one capture and is reachable only from the local browser.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator, Optional

from aiohttp import web

from static_prerender.config.logging import get_logger
from static_prerender.core.exceptions import ServerBindError

logger = get_logger(__name__)

URL_HOST = "localhost"


def create_app(root_directory: Path) -> web.Application:
    """Create the static application serving ``root_directory``."""
    root = Path(root_directory).resolve()

    async def index(request: web.Request) -> web.StreamResponse:
        index_file = root / "index.html"
        if not index_file.is_file():
            raise web.HTTPNotFound()
        return web.FileResponse(index_file)

    app = web.Application()
    app.router.add_get("/", index)
    app.router.add_static("/", root, follow_symlinks=False)
    return app


class EphemeralServer:
    """Handle on a running static server."""

    def __init__(self, runner: web.AppRunner, port: int, root_directory: Path):
        self._runner: Optional[web.AppRunner] = runner
        self.port = port
        self.root_directory = root_directory
        self.logger: Any = logger.bind(component="ephemeral_server", port=port)

    @property
    def url(self) -> str:
        return f"http://{URL_HOST}:{self.port}/"

    @property
    def running(self) -> bool:
        return self._runner is not None

    async def stop(self) -> None:
        """Close all connections and release the port. Repeated calls are no-ops."""
        if self._runner is None:
            return
        runner, self._runner = self._runner, None
        await runner.cleanup()
        self.logger.info("Server stopped")


async def start_server(root_directory: Path, bind_host: str = "127.0.0.1") -> EphemeralServer:
    """
    Serve ``root_directory`` on a free port.

    Args:
        root_directory: Directory holding the built output
        bind_host: Loopback address to listen on

    Returns:
        Running EphemeralServer

    Raises:
        ServerBindError: If the directory is missing or the port cannot be bound
    """
    root = Path(root_directory)
    if not root.is_dir():
        raise ServerBindError(f"Cannot serve missing directory: {root}")

    runner = web.AppRunner(create_app(root), access_log=None)
    await runner.setup()
    try:
        site = web.TCPSite(runner, bind_host, 0)
        await site.start()
        port = runner.addresses[0][1]
    except (OSError, IndexError) as e:
        await runner.cleanup()
        logger.error("Server bind failed", host=bind_host, error=str(e))
        raise ServerBindError(f"Cannot bind ephemeral server on {bind_host}: {e}") from e

    server = EphemeralServer(runner, port, root)
    server.logger.info("Server started", root=str(root), url=server.url)
    return server


@asynccontextmanager
async def serve_directory(
    root_directory: Path, bind_host: str = "127.0.0.1"
) -> AsyncGenerator[EphemeralServer, None]:
    """Start a server for the duration of the block and always stop it."""
    server = await start_server(root_directory, bind_host)
    try:
        yield server
    finally:
        await server.stop()
