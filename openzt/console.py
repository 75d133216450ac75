"""Interactive command console that talks to a game server over TCP."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable
from typing import TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
PROMPT = "Enter a command: "
RECV_SIZE = 100024


def run_session(sock: socket.socket, lines: Iterable[str], output: TextIO) -> int:
    """Send each command from ``lines`` over ``sock`` and print the replies.

    Stops on ``quit``, end of input, a closed connection or a socket error.
    Returns the number of replies received.
    """
    replies = 0
    source = iter(lines)
    while True:
        output.write(PROMPT)
        output.flush()
        raw = next(source, None)
        if raw is None:
            break
        command = raw.strip()
        if command.lower() == "quit":
            break
        if not command:
            continue

        try:
            sock.sendall(command.encode("utf-8"))
        except OSError as err:
            print(f"Error sending data to server: {err}", file=sys.stderr)
            break

        try:
            data = sock.recv(RECV_SIZE)
        except OSError as err:
            print(f"Error reading data from server: {err}", file=sys.stderr)
            break
        if not data:
            break

        replies += 1
        print(f"Server response: {data.decode('utf-8', errors='replace')}", file=output)
    return replies


def main(argv: list[str] | None = None) -> int:
    """Connect to the server and run an interactive session on stdin/stdout."""
    parser = argparse.ArgumentParser(description="Send commands to the game console server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    address = f"{args.host}:{args.port}"
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    with sock:
        print(f"Connected to server at {address}")
        run_session(sock, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())