"""Sequential binary reading of an asset file."""

import io

from teapacket.assets import DEFAULT_ASSET_ROOT, asset_path


class AssetStream:
    """A readable, seekable binary stream over an asset."""

    def __init__(self, path, root=DEFAULT_ASSET_ROOT):
        self.path = path
        self.end_of_field = False
        try:
            self._file = open(asset_path(path, root), "rb")
        except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
            raise FileNotFoundError(f"File {path} failed to open.") from exc

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        """Close the underlying file."""
        self._file.close()

    def read_bytes(self, length):
        """Read up to ``length`` bytes; fewer are returned at end of file."""
        if length < 0:
            raise ValueError("length must not be negative")
        data = self._file.read(length)
        self.end_of_field = len(data) < length
        return data

    def _read_exact(self, length):
        data = self.read_bytes(length)
        if len(data) < length:
            raise EOFError(
                f"needed {length} bytes from {self.path}, only {len(data)} left"
            )
        return data

    def read_byte(self):
        """Read one byte and return it as an integer."""
        return self._read_exact(1)[0]

    def seek(self, amount, whence=io.SEEK_SET):
        """Move the read position relative to ``whence``."""
        self.end_of_field = False
        return self._file.seek(amount, whence)

    def tell(self):
        """Return the current read position."""
        return self._file.tell()

    def skip(self, length):
        """Advance the read position by ``length`` bytes."""
        return self.seek(length, io.SEEK_CUR)

    def read_int(self, size, signed, byteorder):
        """Read an integer of ``size`` bytes in the given byte order."""
        if size not in (1, 2, 4, 8):
            raise ValueError(f"unsupported integer size: {size}")
        return int.from_bytes(self._read_exact(size), byteorder, signed=signed)

    def read_uint16_le(self):
        return self.read_int(2, False, "little")

    def read_int16_le(self):
        return self.read_int(2, True, "little")

    def read_uint32_le(self):
        return self.read_int(4, False, "little")

    def read_int32_le(self):
        return self.read_int(4, True, "little")

    def read_uint64_le(self):
        return self.read_int(8, False, "little")

    def read_int64_le(self):
        return self.read_int(8, True, "little")

    def read_uint16_be(self):
        return self.read_int(2, False, "big")

    def read_int16_be(self):
        return self.read_int(2, True, "big")

    def read_uint32_be(self):
        return self.read_int(4, False, "big")

    def read_int32_be(self):
        return self.read_int(4, True, "big")

    def read_uint64_be(self):
        return self.read_int(8, False, "big")

    def read_int64_be(self):
        return self.read_int(8, True, "big")