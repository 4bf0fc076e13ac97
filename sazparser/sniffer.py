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
Zip signature sniffing.

Looks at the first four bytes of a capture file to tell a usable archive
apart from an empty one, a spanned one, or something that is not a zip at
all, before paying for full decompression.
"""

import os
from enum import Enum
from typing import BinaryIO, Union

MAGIC_ZIP = b"PK\x03\x04"
MAGIC_ZIP_EMPTY = b"PK\x05\x06"
MAGIC_ZIP_SPANNED = b"PK\x07\x08"

SIGNATURE_SIZE = 4

ByteSource = Union[str, "os.PathLike[str]", bytes, bytearray, memoryview, BinaryIO]


class ZipValidity(Enum):
    """Classification of a capture file by its leading signature."""
    VALID = "valid"
    EMPTY = "empty"
    SPANNED = "spanned"
    INVALID = "invalid"
    READ_ERROR = "read_error"


def classify_header(header: bytes) -> ZipValidity:
    """Classify a buffer by its first four bytes."""
    if len(header) < SIGNATURE_SIZE:
        return ZipValidity.READ_ERROR

    signature = bytes(header[:SIGNATURE_SIZE])
    if signature == MAGIC_ZIP:
        return ZipValidity.VALID
    elif signature == MAGIC_ZIP_EMPTY:
        return ZipValidity.EMPTY
    elif signature == MAGIC_ZIP_SPANNED:
        return ZipValidity.SPANNED
    return ZipValidity.INVALID


def read_signature(source: ByteSource) -> bytes:
    """
    Read the leading signature bytes from a path, buffer or binary file.

    File objects are returned to their original position.

    Raises:
        OSError: If the path cannot be opened or read
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source[:SIGNATURE_SIZE])

    if isinstance(source, (str, os.PathLike)):
        with open(source, 'rb') as f:
            return f.read(SIGNATURE_SIZE)

    position = source.tell()
    try:
        return source.read(SIGNATURE_SIZE)
    finally:
        source.seek(position)


def classify(source: ByteSource) -> ZipValidity:
    """
    Classify a capture source without parsing it.

    This only checks the signature: a VALID result does not guarantee the
    rest of the stream decodes.

    Args:
        source: Path to the file, the raw bytes, or an open binary file

    Returns:
        ZipValidity for the source; READ_ERROR when it cannot be read or
        is shorter than four bytes
    """
    try:
        header = read_signature(source)
    except OSError:
        return ZipValidity.READ_ERROR
    return classify_header(header)
