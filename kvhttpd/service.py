"""
HTTP service: binds an address and serves the key API for a store.
"""
import logging
import socket
import threading
import time
from typing import Optional, Tuple, Union
import uvicorn
from kvhttpd.app import create_app
from kvhttpd.store.base import BaseStore

logger = logging.getLogger(__name__)

Address = Union[str, Tuple[str, int]]

_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def parse_addr(addr: Address) -> Tuple[str, int]:
    """Split "host:port", ":port" or "[v6]:port" into (host, port).

    An empty host means all IPv4 interfaces.
    """
    if isinstance(addr, tuple):
        host, port = addr
        return host or "0.0.0.0", int(port)

    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"IPv6 listen address must be bracketed: {addr!r}")
    return host or "0.0.0.0", int(port)


class Service:
    """Serves the key API for a store on a background thread.

    Usage:
        service = Service(":0", store)
        service.start()
        ...  # talk to service.url
        service.close()
    """

    def __init__(self, addr: Address, store: BaseStore, log_level: str = "warning"):
        self.host, self.port = parse_addr(addr)
        self.log_level = log_level.lower()
        self.app = create_app(store)

        self._socket: Optional[socket.socket] = None
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    def _bind(self) -> socket.socket:
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
        except OSError:
            sock.close()
            raise
        return sock

    def start(self, timeout: float = 5.0) -> None:
        """Bind the address and start serving.

        Bind errors raise here. Returns once the server accepts connections.
        """
        if self._thread is not None:
            raise RuntimeError("Service already started")

        self._socket = self._bind()
        config = uvicorn.Config(self.app, log_level=self.log_level, lifespan="off")
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [self._socket]},
            name="kvhttpd-service",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive():
                self.close()
                raise RuntimeError("HTTP service exited during startup")
            if time.monotonic() > deadline:
                self.close()
                raise TimeoutError(f"HTTP service did not start within {timeout}s")
            time.sleep(0.01)

        logger.info(f"HTTP service listening on {self.url}")

    def close(self, timeout: float = 5.0) -> None:
        """Stop serving and release the listening socket."""
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout)
        if self._socket is not None:
            self._socket.close()
        self._server = None
        self._thread = None
        self._socket = None

    def serve_forever(self) -> None:
        """Serve in the foreground until interrupted."""
        uvicorn.run(self.app, host=self.host, port=self.port, log_level=self.log_level)

    @property
    def addr(self) -> Tuple[str, int]:
        """Actual bound (host, port); the configured address before start()."""
        if self._socket is None:
            return self.host, self.port
        host, port = self._socket.getsockname()[:2]
        return host, port

    @property
    def url(self) -> str:
        host, port = self.addr
        if host in _WILDCARD_HOSTS:
            host = "::1" if host == "::" else "127.0.0.1"
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{port}"

    def __enter__(self) -> "Service":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
