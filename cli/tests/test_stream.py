from __future__ import annotations

import httpx
import pytest

from fourpc_client import ApiError, AuthError, ClientConfig, FourPcClientError, FourPlayerChessClient, NetworkError


def _client(handler) -> FourPlayerChessClient:
    return FourPlayerChessClient(ClientConfig(token="tok123"), transport=httpx.MockTransport(handler))


def _streaming(*chunks: bytes, fail_with: Exception | None = None):
    seen: list[httpx.Request] = []

    def body():
        yield from chunks
        if fail_with is not None:
            raise fail_with

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=body())

    return seen, handler


def test_stream_yields_lines_with_line_endings_stripped() -> None:
    seen, handler = _streaming(b"first\r\n", b"sec", b"ond\n\nthi", b"rd\r\n")
    with _client(handler) as client:
        lines = list(client.stream())

    assert lines == ["first", "second", "", "third"]
    assert str(seen[0].url) == "https://4player-beta.chess.com/bot?token=tok123&stream=1"


def test_stream_yields_unterminated_last_line() -> None:
    _, handler = _streaming(b"a\n", b"tail")
    with _client(handler) as client:
        assert list(client.stream()) == ["a", "tail"]


def test_stream_is_lazy_and_stops_after_close() -> None:
    _, handler = _streaming(b"1\n", b"2\n", b"3\n")
    with _client(handler) as client:
        lines = client.stream()
        assert next(lines) == "1"
        lines.close()
        assert lines.closed
        assert list(lines) == []
        lines.close()


def test_stream_ends_cleanly_when_remote_drops_connection() -> None:
    _, handler = _streaming(
        b"move d2d4\n",
        b"partial",
        fail_with=httpx.RemoteProtocolError("peer closed connection without sending complete message body"),
    )
    with _client(handler) as client:
        with client.stream() as lines:
            assert list(lines) == ["move d2d4", "partial"]
        assert lines.closed


def test_stream_sends_user_agent() -> None:
    seen, handler = _streaming(b"x\n")
    cfg = ClientConfig(token="tok123", user_agent="stream-bot/1.0")
    with FourPlayerChessClient(cfg, transport=httpx.MockTransport(handler)) as client:
        list(client.stream())
    assert seen[0].headers["User-Agent"] == "stream-bot/1.0"


def test_stream_open_rejected_raises_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="bad token")

    with _client(handler) as client:
        with pytest.raises(AuthError) as exc:
            client.stream()
    assert exc.value.status_code == 403
    assert exc.value.details == "bad token"
    assert "tok123" not in str(exc.value)


def test_stream_server_error_raises_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502)

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc:
            client.stream()
    assert exc.value.status_code == 502


def test_stream_connect_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    with _client(handler) as client:
        with pytest.raises(NetworkError):
            client.stream()


def test_stream_rejection_with_truncated_body_raises_api_error() -> None:
    def body():
        yield b"partial error"
        raise httpx.RemoteProtocolError("peer closed connection")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, content=body())

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc:
            client.stream()
    assert exc.value.status_code == 500
    assert exc.value.details is None


def test_stream_transport_failure_mid_body_raises_network_error() -> None:
    _, handler = _streaming(b"one\n", fail_with=httpx.ReadTimeout("read timed out"))
    with _client(handler) as client:
        lines = client.stream()
        assert next(lines) == "one"
        with pytest.raises(NetworkError):
            next(lines)
        assert lines.closed


def test_stream_with_unsendable_url_raises_client_error() -> None:
    _, handler = _streaming(b"x\n")
    client = FourPlayerChessClient(ClientConfig(token="tok\x01en"), transport=httpx.MockTransport(handler))
    with client:
        with pytest.raises(FourPcClientError):
            client.stream()
