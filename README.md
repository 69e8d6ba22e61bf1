# httpfromtcp

Small building blocks for looking at how HTTP sits on top of raw sockets:

- `httpfromtcp.request` parses the request line of an HTTP/1.1 message.
- `tcplistener` accepts TCP connections and prints every line it receives.
- `udpsender` reads lines from standard input and sends each one as a UDP datagram.

The package has no third-party dependencies.

## Installation

```
pip install .
```

Add the `test` extra to get the test runner as well:

```
pip install ".[test]"
```

## Parsing a request line

```python
import io
from httpfromtcp.request import request_from_reader, InvalidMethodError

req = request_from_reader(io.BytesIO(b"GET /coffee HTTP/1.1\r\nHost: localhost:42069\r\n\r\n"))
print(req.request_line.method)          # GET
print(req.request_line.request_target)  # /coffee
print(req.request_line.http_version)    # 1.1

try:
    request_from_reader(io.BytesIO(b"get /coffee HTTP/1.1\r\n\r\n"))
except InvalidMethodError as exc:
    print(exc)
```

`request_from_reader(reader)` reads everything from a binary or text stream and
returns a `Request` whose `request_line` is a `RequestLine` with the fields
`method`, `request_target` and `http_version`. Bytes are decoded as UTF-8.

Only the first CRLF-terminated line is looked at. It has to have exactly three
parts, separated by single spaces. The method has to consist of upper-case letters
only, and the version has to be `HTTP/1.1`; the stored `http_version` is the part
after the slash, `1.1`. Any other request line raises a subclass of `RequestError`
(itself a `ValueError`): `InvalidRequestLineError`, `InvalidMethodError` or
`InvalidVersionError`.

`parse_request_line(raw)` does the same job on a string that is already in memory
and returns the `RequestLine`.

## Watching a TCP stream

```
tcplistener
```

This listens on port 42069 on all interfaces; `--host` and `--port` change that.
Connections are handled one at a time. For each one it prints
`A connection from <address> has been accepted`, then one `read: <line>` for every
newline-terminated line, a final `read:` for any non-empty trailing text, and
`the connection <address> has been closed` when the peer closes. Ctrl+C stops it.

In code, `serve(host, port, out)` runs the same loop and writes to `out`
(standard output by default). `iter_lines(stream)` gives the same line splitting
for any binary stream and closes the stream when it is exhausted.

## Sending lines over UDP

```
udpsender
```

This sends every line you type to `localhost:42069` as one datagram; `--host` and
`--port` change the target. It shows a `>` prompt before each line and prints
`Message sent: <line>` after sending. It stops at the end of input; a last line
without a newline is not sent. Ctrl+C stops it.

In code, `send_lines(lines, host, port, out)` sends lines from any iterable of
strings and returns how many datagrams were sent.

## What it does not do

The parser handles the request line only: headers and the body are read but not
parsed, and only HTTP/1.1 is accepted. `tcplistener` only prints what it receives;
it never answers, so it is not an HTTP server. Nothing in the package listens for
UDP datagrams.