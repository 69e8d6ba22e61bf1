"""A TCP server that prints every line it receives."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import BinaryIO, Iterator, Optional, Sequence, TextIO

DEFAULT_PORT = 42069
_CHUNK_SIZE = 8


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield newline-separated lines from ``stream``, closing it when done.

    A trailing part without a newline is yielded only if it is not empty.
    """
    pending = b""
    try:
        while chunk := stream.read(_CHUNK_SIZE):
            *complete, pending = (pending + chunk).split(b"\n")
            for part in complete:
                yield part.decode("utf-8", errors="replace")
        if pending:
            yield pending.decode("utf-8", errors="replace")
    finally:
        stream.close()


def _format_addr(addr: tuple) -> str:
    host, port = addr[0], addr[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def serve(host: str = "", port: int = DEFAULT_PORT, out: Optional[TextIO] = None) -> None:
    """Accept connections one at a time forever, printing each line received."""
    out = out if out is not None else sys.stdout
    with socket.create_server((host, port)) as listener:
        while True:
            conn, addr = listener.accept()
            remote = _format_addr(addr)
            print(f"A connection from {remote} has been accepted", file=out, flush=True)
            with conn:
                for line in iter_lines(conn.makefile("rb", buffering=0)):
                    print(f"read: {line}", file=out, flush=True)
            print(f"the connection {remote} has been closed", file=out, flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print lines received over TCP.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())