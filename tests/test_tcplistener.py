import io
import socket
import threading
import time

import pytest

from httpfromtcp.tcplistener import iter_lines, main, serve


def test_iter_lines_splits_on_newline():
    assert list(iter_lines(io.BytesIO(b"hello\nworld"))) == ["hello", "world"]


def test_iter_lines_keeps_empty_middle_lines():
    assert list(iter_lines(io.BytesIO(b"a\n\nb\n"))) == ["a", "", "b"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.BytesIO(b""))) == []


def test_iter_lines_long_lines_span_chunks():
    first = "x" * 30
    second = "y" * 17
    data = f"{first}\n{second}\n".encode()
    assert list(iter_lines(io.BytesIO(data))) == [first, second]


def test_iter_lines_multibyte_characters_across_chunks():
    text = "안녕하세요 세계"
    assert list(iter_lines(io.BytesIO((text + "\n").encode("utf-8")))) == [text]


def test_iter_lines_closes_stream():
    stream = io.BytesIO(b"one\ntwo\n")
    lines = list(iter_lines(stream))
    assert lines == ["one", "two"]
    assert stream.closed


def _free_port():
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _connect(port, deadline):
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=2)
        except OSError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.02)


def _wait_for(out, marker, deadline):
    while marker not in out.getvalue() and time.monotonic() < deadline:
        time.sleep(0.02)


def test_serve_prints_received_lines():
    port = _free_port()
    out = io.StringIO()

    thread = threading.Thread(
        target=serve, args=("127.0.0.1", port, out), daemon=True
    )
    thread.start()

    deadline = time.monotonic() + 5
    client = _connect(port, deadline)
    local = client.getsockname()
    with client:
        client.sendall(b"first\nsecond")

    _wait_for(out, "has been closed", deadline)

    remote = f"{local[0]}:{local[1]}"
    printed = list(iter_lines(io.BytesIO(out.getvalue().encode("utf-8"))))
    assert printed == [
        f"A connection from {remote} has been accepted",
        "read: first",
        "read: second",
        f"the connection {remote} has been closed",
    ]
    assert thread.is_alive()


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "notaport"])