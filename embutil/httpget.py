"""A minimal HTTP/1.1 GET client that echoes the raw response."""

from __future__ import annotations

import argparse
import socket
import ssl
import sys
from typing import TextIO


def build_request(host: str, url: str) -> bytes:
    """The exact request bytes sent for ``url`` on ``host``."""
    text = f"GET {url} HTTP/1.1\r\nConnection: close\r\nHost:{host}\r\n\r\n"
    return text.encode("latin-1")


def get(host: str, port: int, url: str, secure: bool = False, out: TextIO | None = None) -> bytes:
    """Send a GET request and echo the response to ``out`` (stdout by default).

    Reading stops when the peer closes the connection or a NUL byte arrives.
    Returns the bytes received before that point. Connection errors raise
    OSError.
    """
    out = out if out is not None else sys.stdout
    out.write(f"\n[GET] Connecting {host}\n")
    received = bytearray()
    with socket.create_connection((host, port)) as raw:
        conn = raw
        if secure:
            conn = ssl.create_default_context().wrap_socket(raw, server_hostname=host)
        try:
            out.write("[GET] Send\n")
            conn.sendall(build_request(host, url))
            out.write("[GET] Receive\n")
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                nul = chunk.find(b"\0")
                if nul >= 0:
                    chunk = chunk[:nul]
                received += chunk
                out.write(chunk.decode("latin-1"))
                if nul >= 0:
                    break
        finally:
            if conn is not raw:
                conn.close()
    out.write("\n[GET] DONE\n")
    return bytes(received)


def main(argv: list[str] | None = None) -> int:
    """Fetch a URL from a host and print the raw response."""
    parser = argparse.ArgumentParser(description="Send an HTTP GET and print the raw response.")
    parser.add_argument("host")
    parser.add_argument("url", nargs="?", default="/")
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--tls", action="store_true", help="use TLS (default port 443)")
    args = parser.parse_args(argv)
    port = args.port if args.port is not None else (443 if args.tls else 80)
    try:
        get(args.host, port, args.url, secure=args.tls)
    except OSError as exc:
        print(f"[GET] error: {exc}", file=sys.stderr)
        return 1
    return 0