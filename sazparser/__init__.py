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
sazparser - Extract HTTP sessions from Fiddler SAZ capture archives.

A SAZ file is a zip archive with a ``raw/`` folder holding one request file
(``<N>_c.txt``) and one response file (``<N>_s.txt``) per session. This
package validates the archive, pairs the files and pulls the URL, status
code and Content-Length out of each exchange.

Usage:
    # As a CLI tool
    python -m sazparser capture.saz -o sessions.json

    # As a library
    import sazparser

    for session in sazparser.parse("capture.saz"):
        print(session.index, session.result, session.url, session.body)
"""

from .archive import ArchiveEntry, EntryInfo, enumerate_entries, list_entries
from .errors import (
    ArchiveReadError,
    EmptyArchiveError,
    FieldNotFoundError,
    InvalidArchiveError,
    SazError,
    SpannedArchiveError,
)
from .fields import extract_content_length, extract_method, extract_status, extract_url
from .index import infer_session_range, session_paths
from .models import SessionList, SessionRecord
from .parser import SazParser, parse
from .sniffer import ZipValidity, classify, classify_header
from .cli import main

__version__ = "0.1.0"
__all__ = [
    # Entry point
    "parse",
    "SazParser",
    # Models
    "SessionRecord",
    "SessionList",
    "ArchiveEntry",
    "EntryInfo",
    # Pipeline steps
    "classify",
    "classify_header",
    "ZipValidity",
    "enumerate_entries",
    "list_entries",
    "infer_session_range",
    "session_paths",
    "extract_url",
    "extract_method",
    "extract_status",
    "extract_content_length",
    # Errors
    "SazError",
    "EmptyArchiveError",
    "SpannedArchiveError",
    "InvalidArchiveError",
    "FieldNotFoundError",
    "ArchiveReadError",
    # CLI
    "main",
]
