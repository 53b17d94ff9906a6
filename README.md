# framechat

A small TCP chat toolkit. Messages are JSON objects. Each one goes over the
wire as a frame: a 4-byte big-endian length header followed by the payload.

The package provides:

- a terminal chat client (`framechat-client`)
- the frame encoder and decoder (`framechat.framing`)
- a runner for ordered sessions of callables (`framechat.task_runner`)
- logging helpers and a name hash (`framechat.util`)

## What it does not include

This package ships no chat server. The client needs a server that speaks the
same framed JSON protocol, which you have to run from somewhere else.

## Installation

```
pip install .
```

## Running the client

```
framechat-client [HOST] [PORT] [USER]
```

The defaults are `127.0.0.1`, `4800` and `client`. Each non-empty line you
type on standard input is sent as one framed message:

```json
{"type":"message","channel_id":"default","user_id":"<USER>","payload":{"text":"<line>"}}
```

Incoming frames are printed as `user: text`. Your own messages are indented
by 40 spaces and marked `(me)`. A payload that is not a JSON object is printed
as `[recv] <payload>`. The client stops at end of input, or when the
connection is closed or fails. If it cannot connect, it exits with status 1.

The functions behind the command can also be called directly from
`framechat.client`:

- `connect_tcp(host, port)` returns a connected socket and raises
  `ConnectionError` on failure.
- `send_frame(sock, payload)` sends a framed payload.
- `build_message(user, text)` returns the compact JSON message.
- `format_message(payload, self_user)` returns the line to display.
- `main(argv=None)` runs the command.

## Framing

```python
from framechat.framing import FrameDecoder, encode_frame

data = encode_frame(b'{"type":"message"}')
decoder = FrameDecoder(16 * 1024)
for payload in decoder.feed(data):
    print(payload)
```

`encode_frame` accepts `bytes` or `str`. `FrameDecoder.feed` buffers the data
you pass it and yields each complete payload. Partial frames stay buffered,
and `pending()` returns how many bytes are still waiting. Empty frames are
skipped. If a header announces more than the decoder's `max_size` (16 KiB by
default), iterating the result raises `FrameTooLarge`.

## Task runner

`framechat.task_runner.TaskRunner` holds numbered sessions of callables:

```python
from framechat.task_runner import TaskRunner

runner = TaskRunner()
runner.new_session(2)
runner.push_back(0, lambda: print("every run"))
runner.push_front(1, lambda: print("only once"), once=True)
runner.run()
```

`run()` calls every task, session by session and in order. A task pushed with
`once=True` is removed after it has run. `pop_front` and `pop_back` drop a
task. Using a session index that does not exist raises `TaskSessionError`.

## Utilities

`framechat.util` provides these helpers:

- `log(message)` prints a line.
- `log_error(message)` prints a line in red.
- `debug_log(message)` prints only when the `FRAMECHAT_DEBUG` environment
  variable is set.
- `name_hash(text)` returns a 32-bit hash of a name. An empty name or `None`
  hashes to 8603.

## Tests

```
pip install .[test]
pytest
```