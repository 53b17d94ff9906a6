"""Length-prefixed frames: a 4-byte big-endian length followed by the payload."""

from .util import log_error

HEADER_SIZE = 4
MAX_FRAME_SIZE = 16 * 1024
_MAX_LENGTH = 0xFFFFFFFF


class FrameTooLarge(ValueError):
    """Raised when a frame header announces more than the decoder accepts."""

    def __init__(self, length, max_size):
        super().__init__(f"Frame too large: {length} bytes (limit {max_size})")
        self.length = length
        self.max_size = max_size


def encode_frame(payload):
    """Return ``payload`` (bytes or str) with its length header in front."""
    data = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    if len(data) > _MAX_LENGTH:
        raise ValueError("Payload too long for a frame header.")
    return len(data).to_bytes(HEADER_SIZE, "big") + data


class FrameDecoder:
    """Collects received bytes and hands back complete payloads."""

    def __init__(self, max_size=MAX_FRAME_SIZE):
        self.max_size = max_size
        self._buffer = bytearray()

    def feed(self, data):
        """Buffer ``data`` and return an iterator over the complete payloads.

        Empty frames are skipped; an oversized header raises ``FrameTooLarge``
        when the iterator reaches it.
        """
        self._buffer += data
        return self._drain()

    def _drain(self):
        while len(self._buffer) >= HEADER_SIZE:
            length = int.from_bytes(self._buffer[:HEADER_SIZE], "big")
            if length > self.max_size:
                raise FrameTooLarge(length, self.max_size)
            if length == 0:
                log_error("Empty frame.")
                del self._buffer[:HEADER_SIZE]
                continue
            end = HEADER_SIZE + length
            if len(self._buffer) < end:
                return
            payload = bytes(self._buffer[HEADER_SIZE:end])
            del self._buffer[:end]
            yield payload

    def pending(self):
        """Number of buffered bytes not yet returned as payloads."""
        return len(self._buffer)