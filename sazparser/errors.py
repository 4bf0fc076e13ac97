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
Exceptions raised while reading SAZ capture archives.
"""

from typing import Optional

from .sniffer import ZipValidity


class SazError(Exception):
    """Base class for every archive rejection."""
    validity = ZipValidity.INVALID


class EmptyArchiveError(SazError):
    """Raised when the archive has no entries."""
    validity = ZipValidity.EMPTY


class SpannedArchiveError(SazError):
    """Raised for multi-volume archives, which are not supported."""
    validity = ZipValidity.SPANNED


class InvalidArchiveError(SazError):
    """Raised when the file is not a zip, fails to decode, or lacks the expected layout."""
    validity = ZipValidity.INVALID


class ArchiveReadError(SazError):
    """Raised when the capture file cannot be opened or read."""
    validity = ZipValidity.READ_ERROR


class FieldNotFoundError(InvalidArchiveError):
    """Raised when a required field (request line, status line) is missing."""

    def __init__(self, field: str, path: Optional[str] = None):
        self.field = field
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"No {field} found{where}")


_ERRORS = {
    ZipValidity.EMPTY: (EmptyArchiveError, "archive is empty"),
    ZipValidity.SPANNED: (SpannedArchiveError, "spanned archives are not supported"),
    ZipValidity.INVALID: (InvalidArchiveError, "not a zip archive"),
    ZipValidity.READ_ERROR: (ArchiveReadError, "cannot read file"),
}


def error_for_validity(validity: ZipValidity, source: object = None) -> SazError:
    """Build the exception matching a non-VALID sniffer classification."""
    if validity is ZipValidity.VALID:
        raise ValueError("VALID classification has no matching error")
    cls, message = _ERRORS[validity]
    if source is not None:
        message = f"{message}: {source}"
    return cls(message)
