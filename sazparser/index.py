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
Session numbering inferred from archive file names.

SAZ archives carry no manifest of how many sessions they hold, so the count
and the zero-padding width are read off names such as ``raw/0042_c.txt``.
"""

import re
from typing import Iterable, Tuple, Union

from .archive import REQUIRED_FOLDER, ArchiveEntry

REQUEST_SUFFIX = "_c.txt"
RESPONSE_SUFFIX = "_s.txt"

# Example: raw/0042_c.txt -> "0042"
SESSION_NUMBER_PATTERN = re.compile(r'/([0-9]+)_[^/]*$')


def infer_session_range(entries: Iterable[Union[ArchiveEntry, str]]) -> Tuple[int, int]:
    """
    Find the highest session number and the padding width of its file name.

    Args:
        entries: Archive entries or plain entry paths

    Returns:
        (total_sessions, padding_width), or (0, 0) if no name matches
    """
    total_sessions = 0
    padding_width = 0

    for entry in entries:
        path = entry if isinstance(entry, str) else entry.path
        match = SESSION_NUMBER_PATTERN.search(path)
        if not match:
            continue

        digits = match.group(1)
        number = int(digits)
        # Width travels with the maximum so the two always describe one name
        if number > total_sessions:
            total_sessions = number
            padding_width = len(digits)

    return total_sessions, padding_width


def session_paths(index: int, padding_width: int, folder: str = REQUIRED_FOLDER) -> Tuple[str, str]:
    """Build the request and response entry paths of a session."""
    number = str(index).zfill(padding_width)
    return f"{folder}{number}{REQUEST_SUFFIX}", f"{folder}{number}{RESPONSE_SUFFIX}"
