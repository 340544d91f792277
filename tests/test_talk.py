import signal
from unittest import mock

import pytest

from minilib.talk import (
    BitDecoder,
    client_main,
    encode_byte,
    encode_message,
    send_message,
    server_main,
)


def test_encode_byte_most_significant_first():
    assert encode_byte(128) == [1, 0, 0, 0, 0, 0, 0, 0]
    assert encode_byte(1) == [0, 0, 0, 0, 0, 0, 0, 1]


def test_encode_byte_value_round_trip():
    for value in range(256):
        bits = encode_byte(value)
        assert len(bits) == 8
        assert int("".join(map(str, bits)), 2) == value


def test_encode_byte_truncates_to_unsigned_char():
    assert encode_byte(-1) == encode_byte(255)
    assert encode_byte(256 + 65) == encode_byte(65)


def test_encode_byte_rejects_non_int():
    with pytest.raises(TypeError):
        encode_byte("A")


def test_encode_message_length():
    assert len(encode_message("mert")) == 32
    assert encode_message("") == []


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_decoder_round_trip_text():
    assert _decode(encode_message("hello world")) == b"hello world"


def test_decoder_round_trip_utf8():
    text = "Merhaba Dünya"
    assert _decode(encode_message(text)).decode("utf-8") == text


def test_decoder_returns_none_until_eighth_bit():
    decoder = BitDecoder()
    bits = encode_byte(ord("Z"))
    results = [decoder.feed(bit) for bit in bits]
    assert results[:7] == [None] * 7
    assert results[7] == ord("Z")


def test_decoder_resets_between_bytes():
    decoder = BitDecoder()
    for bit in encode_byte(255):
        decoder.feed(bit)
    results = [decoder.feed(bit) for bit in encode_byte(0)]
    assert results[-1] == 0


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_message_signals_each_bit(kill, sleep):
    send_message(321, "ok", delay=0.25)
    expected = [
        mock.call(321, signal.SIGUSR1 if bit else signal.SIGUSR2)
        for bit in encode_message("ok")
    ]
    assert kill.call_args_list == expected
    assert sleep.call_count == len(expected)
    assert all(c == mock.call(0.25) for c in sleep.call_args_list)


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_client_main_sends(kill, sleep):
    assert client_main(["123", "A"]) == 0
    sent = [1 if c.args[1] == signal.SIGUSR1 else 0 for c in kill.call_args_list]
    assert sent == encode_message("A")
    assert all(c.args[0] == 123 for c in kill.call_args_list)


@mock.patch("os.kill")
def test_client_main_wrong_argument_count(kill, capsys):
    assert client_main(["123"]) == 0
    assert capsys.readouterr().out == "You failed.\n"
    assert kill.call_count == 0


@mock.patch("os.kill")
def test_client_main_bad_pid(kill, capsys):
    assert client_main(["abc", "hi"]) == 1
    assert "You failed." in capsys.readouterr().out
    assert kill.call_count == 0


def test_server_main_prints_received_bytes(capsys):
    handlers = {}

    def fake_signal(signum, handler):
        handlers[signum] = handler

    def fake_pause():
        for bit in encode_message("hi"):
            handlers[signal.SIGUSR1 if bit else signal.SIGUSR2](
                signal.SIGUSR1 if bit else signal.SIGUSR2, None
            )
        raise KeyboardInterrupt

    with mock.patch("signal.signal", side_effect=fake_signal), mock.patch(
        "signal.pause", side_effect=fake_pause
    ), mock.patch("os.getpid", return_value=4242):
        assert server_main([]) == 0
    assert capsys.readouterr().out == "Server PID=4242\nhi"