# Copyright 2025 Jesse Bate (https://github.com/jbatesy)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Archive enumeration for SAZ captures.

Every file entry is decompressed into memory and decoded to text. Entry
contents are decoded with a lossy policy: invalid UTF-8 sequences are
replaced with U+FFFD instead of raising, so a capture containing binary
bodies still yields its request and status lines.
"""

import io
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import List, Optional

from .errors import ArchiveReadError, InvalidArchiveError
from .sniffer import ByteSource

REQUIRED_FOLDER = "raw/"

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

# Errors zipfile can raise while reading a damaged or unsupported entry
_DECODE_ERRORS = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
)


@dataclass(frozen=True)
class ArchiveEntry:
    """A decompressed file entry of the capture archive."""
    path: str
    size: int
    contents: str

    def __repr__(self) -> str:
        return f"ArchiveEntry({self.path!r}, {self.size} bytes)"


@dataclass(frozen=True)
class EntryInfo:
    """Directory listing row for an archive entry (nothing is decompressed)."""
    name: str
    size: int
    is_dir: bool
    comment: str = ""
    path: Optional[str] = None

    @property
    def is_safe(self) -> bool:
        return self.path is not None


def enclosed_name(name: str) -> Optional[str]:
    """
    Resolve an entry name to a relative path that stays inside the archive.

    Returns:
        The normalized forward-slash path, or None for absolute names,
        drive-qualified names, names containing NUL and any name with a
        parent-directory component
    """
    if not name or "\0" in name:
        return None

    candidate = name.replace("\\", "/")
    if candidate.startswith("/"):
        return None
    # Windows drive letters, e.g. "C:/x"
    if len(candidate) >= 2 and candidate[1] == ":":
        return None

    parts = [p for p in PurePosixPath(candidate).parts if p != "."]
    if not parts or ".." in parts:
        return None
    return "/".join(parts)


def decode_text(data: bytes) -> str:
    """Decode entry bytes with the lossy text policy."""
    return data.decode(TEXT_ENCODING, errors=TEXT_ERRORS)


def _open_zip(source: ByteSource) -> zipfile.ZipFile:
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(source))
    try:
        return zipfile.ZipFile(source)
    except zipfile.BadZipFile as e:
        raise InvalidArchiveError(f"Failed to decode archive: {e}") from e
    except OSError as e:
        raise ArchiveReadError(f"Failed to open archive: {e}") from e


def enumerate_entries(
    source: ByteSource,
    required_folder: str = REQUIRED_FOLDER,
) -> List[ArchiveEntry]:
    """
    Decompress every file entry of a capture archive.

    Directory entries are not returned; they are only checked against the
    required top-level folder. Entries whose names escape the archive root
    are skipped.

    Args:
        source: Path, bytes or binary file holding the archive
        required_folder: Directory entry that must be present (with
            trailing slash)

    Returns:
        Entries in archive order

    Raises:
        InvalidArchiveError: If the archive cannot be decoded or lacks the
            required folder
        ArchiveReadError: If the file cannot be opened or read
    """
    entries: List[ArchiveEntry] = []
    found_folder = False

    with _open_zip(source) as archive:
        for info in archive.infolist():
            if info.is_dir():
                if info.filename == required_folder:
                    found_folder = True
                continue

            path = enclosed_name(info.filename)
            if path is None:
                continue

            try:
                data = archive.read(info)
            except _DECODE_ERRORS as e:
                raise InvalidArchiveError(f"Failed to decompress {info.filename}: {e}") from e
            except OSError as e:
                raise ArchiveReadError(f"Failed to read {info.filename}: {e}") from e

            entries.append(ArchiveEntry(
                path=path,
                size=info.file_size,
                contents=decode_text(data),
            ))

    if not found_folder:
        raise InvalidArchiveError(f"Archive has no '{required_folder}' folder entry")

    return entries


def list_entries(source: ByteSource) -> List[EntryInfo]:
    """
    List the archive directory without decompressing anything.

    Raises:
        InvalidArchiveError: If the archive cannot be decoded
        ArchiveReadError: If the file cannot be opened
    """
    with _open_zip(source) as archive:
        return [
            EntryInfo(
                name=info.filename,
                size=info.file_size,
                is_dir=info.is_dir(),
                comment=info.comment.decode(TEXT_ENCODING, errors=TEXT_ERRORS),
                path=enclosed_name(info.filename),
            )
            for info in archive.infolist()
        ]
