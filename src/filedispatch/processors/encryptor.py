"""Encryption processor and its key buffer."""

import random
import threading
import time

from rich.console import Console

from ..utils.logging import get_logger
from .base import FileReadingProcessor, ProcessorKind
from .errors import AllocationFailureError

logger = get_logger(__name__)

KEY_LENGTH = 15
KEY_BUFFER_SIZE = KEY_LENGTH + 1
# Printable range: space (0x20) up to underscore (0x5F)
KEY_CHAR_BASE = 0x20
KEY_CHAR_SPAN = 64

_random: random.Random | None = None
_random_lock = threading.Lock()


def _get_random() -> random.Random:
    """Return the process-wide random source, seeding it on first use."""
    global _random
    with _random_lock:
        if _random is None:
            _random = random.Random(time.time_ns())
        return _random


def _allocate_key_buffer(size: int) -> bytearray:
    return bytearray(size)


class EncryptionKey:
    """
    A fixed-size key buffer owned by one encryptor.

    The first ``KEY_LENGTH`` bytes are printable ASCII and the last byte is a
    zero terminator. Once cleared, the buffer is zeroed and dropped and no key
    byte can be read again.
    """

    def __init__(self):
        try:
            buffer = _allocate_key_buffer(KEY_BUFFER_SIZE)
        except MemoryError as e:
            raise AllocationFailureError("Could not allocate encryption key buffer") from e

        rng = _get_random()
        for i in range(KEY_LENGTH):
            buffer[i] = rng.randrange(KEY_CHAR_SPAN) + KEY_CHAR_BASE
        buffer[KEY_LENGTH] = 0
        self._buffer: bytearray | None = buffer

    @property
    def is_cleared(self) -> bool:
        return self._buffer is None

    @property
    def value(self) -> str:
        """The key as text, without the terminator."""
        if self._buffer is None:
            raise ValueError("Encryption key has been cleared")
        return self._buffer[:KEY_LENGTH].decode("ascii")

    def clear(self) -> bool:
        """
        Zero and release the buffer.

        Returns:
            True if a key was cleared, False if it was already gone
        """
        if self._buffer is None:
            return False
        for i in range(len(self._buffer)):
            self._buffer[i] = 0
        self._buffer = None
        return True


class FileEncryptor(FileReadingProcessor):
    """Describes encrypting the first token of each file with a random key."""

    kind = ProcessorKind.ENCRYPT

    def __init__(self, console: Console | None = None):
        super().__init__(console=console)
        self._key = EncryptionKey()

    @property
    def key_cleared(self) -> bool:
        return self._key.is_cleared

    def _transform(self, content: str) -> None:
        self.encrypt_file(content)

    def encrypt_file(self, content: str) -> None:
        key = "<cleared>" if self._key.is_cleared else self._key.value
        self.emit(f"encrypting file with content: {content} using key {key}")

    def clear_key(self) -> None:
        """Erase the key. Clearing an already cleared key does nothing."""
        if self._key.clear():
            logger.info("Cleared encryption key")

    def close(self) -> None:
        self.clear_key()

    def __del__(self):
        key = getattr(self, "_key", None)
        if key is not None:
            key.clear()
