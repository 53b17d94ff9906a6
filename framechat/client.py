"""Terminal chat client: sends typed lines as messages and prints what arrives."""

import argparse
import json
import queue
import select
import socket
import sys
import threading

from .framing import HEADER_SIZE, encode_frame
from .util import GREEN, RESET, log, log_error

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = "4800"
DEFAULT_USER = "client"
DEFAULT_CHANNEL = "default"

POLL_INTERVAL = 0.2
QUEUE_WAIT = 0.001
RECV_SIZE = 4096
SELF_INDENT = 40

_EOF = None


def connect_tcp(host, port):
    """Open a TCP connection to the first address ``host``/``port`` resolves to."""
    try:
        infos = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise ConnectionError(f"getaddrinfo failed: {exc.strerror}") from exc
    if not infos:
        raise ConnectionError("getaddrinfo failed: no address")
    family, socktype, proto, _, address = infos[0]
    try:
        sock = socket.socket(family, socktype, proto)
    except OSError as exc:
        raise ConnectionError("socket() failed") from exc
    try:
        sock.connect(address)
    except OSError as exc:
        sock.close()
        raise ConnectionError("connect() failed") from exc
    return sock


def send_frame(sock, payload):
    """Send ``payload`` with its 4-byte length header; empty payloads send the header alone."""
    sock.sendall(encode_frame(payload))


def build_message(user, text):
    """Return the compact JSON chat message that ``user`` sends for ``text``."""
    message = {
        "type": "message",
        "channel_id": DEFAULT_CHANNEL,
        "user_id": user,
        "payload": {"text": text},
    }
    return json.dumps(message, separators=(",", ":"), ensure_ascii=False)


def _as_text(payload):
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8", errors="replace")
    return payload


def format_message(payload, self_user):
    """Return the line printed for a received payload.

    Messages from ``self_user`` are indented and marked; anything that is not
    a JSON object is shown raw.
    """
    try:
        root = json.loads(payload)
    except (ValueError, TypeError):
        root = None
    if not isinstance(root, dict):
        return f"[recv] {_as_text(payload)}"

    user = root.get("user_id")
    if not isinstance(user, str):
        user = None
    text = None
    body = root.get("payload")
    if isinstance(body, dict):
        text = body.get("text")
    if not isinstance(text, str):
        text = None

    is_self = user is not None and user == self_user
    indent = " " * SELF_INDENT if is_self else ""
    mark = "(me) " if is_self else ""
    return f"{indent}{mark}{user if user is not None else '?'}: {text or ''}"


class _FrameSplitter:
    """Collects received bytes and yields every complete frame payload."""

    def __init__(self):
        self._buffer = bytearray()

    def feed(self, data):
        self._buffer += data
        while len(self._buffer) >= HEADER_SIZE:
            length = int.from_bytes(self._buffer[:HEADER_SIZE], "big")
            end = HEADER_SIZE + length
            if len(self._buffer) < end:
                return
            payload = bytes(self._buffer[HEADER_SIZE:end])
            del self._buffer[:end]
            yield payload


def _read_lines(stream, lines):
    """Queue every non-empty line of ``stream``, then the end-of-input marker."""
    try:
        for line in stream:
            line = line[:-1] if line.endswith("\n") else line
            if line:
                lines.put(line)
    except (OSError, ValueError):
        pass
    finally:
        lines.put(_EOF)


def _queued(lines):
    """Yield what is queued, waiting briefly for the first item."""
    try:
        item = lines.get(timeout=QUEUE_WAIT)
    except queue.Empty:
        return
    while True:
        yield item
        try:
            item = lines.get_nowait()
        except queue.Empty:
            return


def _chat(sock, user, stream):
    lines = queue.Queue()
    reader = threading.Thread(target=_read_lines, args=(stream, lines), daemon=True)
    reader.start()
    frames = _FrameSplitter()

    while True:
        try:
            readable, _, _ = select.select([sock], [], [], POLL_INTERVAL)
        except (OSError, ValueError):
            log_error("poll failed")
            return
        if readable:
            try:
                data = sock.recv(RECV_SIZE)
            except OSError:
                data = b""
            if not data:
                log_error("recv failed")
                return
            for payload in frames.feed(data):
                print(format_message(payload, user), flush=True)

        for line in _queued(lines):
            if line is _EOF:
                return
            try:
                send_frame(sock, build_message(user, line))
            except OSError:
                log_error("send failed")
                return


def main(argv=None):
    """Connect to a chat server and relay stdin lines until input or connection ends."""
    parser = argparse.ArgumentParser(
        prog="framechat-client",
        description="Chat with a framechat server from the terminal.",
    )
    parser.add_argument("host", nargs="?", default=DEFAULT_HOST)
    parser.add_argument("port", nargs="?", default=DEFAULT_PORT)
    parser.add_argument("user", nargs="?", default=DEFAULT_USER)
    args = parser.parse_args(argv)

    try:
        sock = connect_tcp(args.host, args.port)
    except OSError as exc:
        log_error(str(exc))
        return 1
    log(f"{GREEN}connected to {args.host}:{args.port}{RESET}")

    with sock:
        _chat(sock, args.user, sys.stdin)
    return 0