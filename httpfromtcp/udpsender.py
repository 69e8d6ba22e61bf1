"""Send lines typed on standard input as UDP datagrams."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Iterable, Optional, Sequence, TextIO

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 42069


def send_lines(
    lines: Iterable[str],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    out: Optional[TextIO] = None,
) -> int:
    """Send each newline-terminated line as one datagram; return how many were sent.

    Stops at the end of input or at a final line with no newline, which is not sent.
    """
    out = out if out is not None else sys.stdout
    server = f"{host}:{port}"
    sent = 0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect((host, port))
        print(
            f"Sending to {server}. Type your message and press Enter to send. Press Ctrl+C to exit.",
            file=out,
        )
        source = iter(lines)
        while True:
            out.write(">")
            out.flush()
            line = next(source, None)
            if line is None or not line.endswith("\n"):
                break
            sock.send(line.encode("utf-8"))
            out.write(f"Message sent: {line}")
            sent += 1
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Send lines from stdin over UDP.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    args = parser.parse_args(argv)
    try:
        send_lines(sys.stdin, args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())