"""A websocket chat client that sends typed lines and prints what arrives."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

import websockets
from websockets.exceptions import ConnectionClosedOK

DEFAULT_URI = "ws://127.0.0.1:2000"


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


async def run_client(uri: str = DEFAULT_URI) -> None:
    """Chat with the server until it hangs up or standard input ends."""
    loop = asyncio.get_running_loop()
    async with websockets.connect(uri) as websocket:
        incoming = asyncio.ensure_future(websocket.recv())
        typed = loop.run_in_executor(None, sys.stdin.readline)
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, typed}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = incoming.result()
                    except ConnectionClosedOK:
                        return
                    if isinstance(message, str):
                        print(f"From server: {message}")
                    incoming = asyncio.ensure_future(websocket.recv())
                if typed in done:
                    line = typed.result()
                    if not line:
                        return
                    await websocket.send(_strip_line_ending(line))
                    typed = loop.run_in_executor(None, sys.stdin.readline)
        finally:
            incoming.cancel()


def main(argv: Sequence[str] | None = None) -> None:
    """Connect to a chat server."""
    parser = argparse.ArgumentParser(description="Chat over a websocket.")
    parser.add_argument("uri", nargs="?", default=DEFAULT_URI)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()