"""Sending text between processes one bit per signal.

A one bit is carried by SIGUSR1 and a zero bit by SIGUSR2, most
significant bit first, eight bits per byte.
"""

from __future__ import annotations

import os
import signal
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

DEFAULT_DELAY = 50e-6


def encode_byte(value: int) -> List[int]:
    """Return the eight bits of value, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    value &= 0xFF
    return [(value >> shift) & 1 for shift in range(7, -1, -1)]


def encode_message(text: Union[str, bytes]) -> List[int]:
    """Return the bits of every byte of text; str is encoded as UTF-8."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return [bit for byte in data for bit in encode_byte(byte)]


@dataclass
class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    _position: int = 7
    _value: int = 0

    def feed(self, bit: object) -> Optional[int]:
        """Add one bit; return the byte it completes, otherwise None."""
        self._value += (1 if bit else 0) << self._position
        if self._position == 0:
            byte = self._value
            self._position = 7
            self._value = 0
            return byte
        self._position -= 1
        return None


def send_message(pid: int, text: Union[str, bytes], delay: float = DEFAULT_DELAY) -> None:
    """Signal text to process pid, pausing delay seconds after each bit."""
    for bit in encode_message(text):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def client_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: send the message in argv[1] to the process in argv[0]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("You failed.")
        return 0
    pid_text, message = args
    if not (pid_text.isascii() and pid_text.isdigit()):
        print("You failed.")
        return 1
    send_message(int(pid_text), os.fsencode(message))
    return 0


def _write_byte(byte: int) -> None:
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is not None:
        sys.stdout.flush()
        buffer.write(bytes([byte]))
        buffer.flush()
    else:
        sys.stdout.write(chr(byte))
        sys.stdout.flush()


def server_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: print this process id, then print every byte received."""
    print(f"Server PID={os.getpid()}", flush=True)
    decoder = BitDecoder()

    def handle(signum, frame):
        byte = decoder.feed(signum == signal.SIGUSR1)
        if byte is not None:
            _write_byte(byte)

    signal.signal(signal.SIGUSR1, handle)
    signal.signal(signal.SIGUSR2, handle)
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0