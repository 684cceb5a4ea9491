import io
import socket
import threading

from embutil.httpget import build_request, get, main

RESPONSE = b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\n\r\nhi"


def _serve_once(response):
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    seen = []

    def run():
        conn, _ = server.accept()
        with conn:
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            seen.append(data)
            conn.sendall(response)
        server.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return port, seen, thread


def test_build_request_bytes():
    assert build_request("wizio.eu", "/iot.php") == (
        b"GET /iot.php HTTP/1.1\r\nConnection: close\r\nHost:wizio.eu\r\n\r\n"
    )


def test_get_sends_request_and_returns_body():
    port, seen, thread = _serve_once(RESPONSE)
    out = io.StringIO()
    body = get("127.0.0.1", port, "/x", out=out)
    thread.join(5)
    assert body == RESPONSE
    assert seen == [build_request("127.0.0.1", "/x")]
    text = out.getvalue()
    assert text.startswith("\n[GET] Connecting 127.0.0.1\n[GET] Send\n[GET] Receive\n")
    assert text.endswith(RESPONSE.decode() + "\n[GET] DONE\n")


def test_get_stops_at_nul_byte():
    port, _, thread = _serve_once(b"abc\0def")
    out = io.StringIO()
    body = get("127.0.0.1", port, "/", out=out)
    thread.join(5)
    assert body == b"abc"
    assert "def" not in out.getvalue()


def test_main_prints_response(capsys):
    port, seen, thread = _serve_once(RESPONSE)
    code = main(["127.0.0.1", "/page", "--port", str(port)])
    thread.join(5)
    assert code == 0
    assert seen == [build_request("127.0.0.1", "/page")]
    assert "[GET] DONE" in capsys.readouterr().out


def test_main_reports_connection_failure(capsys):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["127.0.0.1", "--port", str(port)]) == 1
    assert "[GET] error" in capsys.readouterr().err