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
Session assembly for SAZ archives.

Ties the sniffer, the archive enumerator, the session index and the field
extractor together. Parsing is all or nothing: any rejected archive,
missing session file or missing required field raises, and no partial
list is ever returned.
"""

import os
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from .archive import REQUIRED_FOLDER, ArchiveEntry, enumerate_entries
from .errors import InvalidArchiveError, error_for_validity
from .fields import extract_content_length, extract_status, extract_url
from .index import infer_session_range, session_paths
from .models import SessionList, SessionRecord
from .sniffer import ZipValidity, classify


class SazParser:
    """
    Parser for Fiddler SAZ capture archives.

    Example:
        parser = SazParser()
        for session in parser.parse("capture.saz"):
            print(f"{session.index} {session.result} {session.url}")
    """

    def __init__(
        self,
        required_folder: str = REQUIRED_FOLDER,
        parallel: bool = False,
        parallel_workers: Optional[int] = None,
        progress: bool = False,
    ):
        """
        Initialize the parser.

        Args:
            required_folder: Top-level folder holding the session files
            parallel: Extract session fields in a thread pool
            parallel_workers: Number of workers when parallel is enabled
            progress: Write a progress line to stderr
        """
        self.required_folder = required_folder
        self.parallel = parallel
        self.parallel_workers = parallel_workers
        self.progress = progress

    def read_entries(self, path: str) -> List[ArchiveEntry]:
        """
        Validate the archive signature and decompress its entries.

        Raises:
            SazError: If the archive is empty, spanned, invalid or unreadable
        """
        validity = classify(path)
        if validity is not ZipValidity.VALID:
            raise error_for_validity(validity, path)
        return enumerate_entries(path, required_folder=self.required_folder)

    def build_record(
        self,
        index: int,
        padding_width: int,
        entries_by_path: Dict[str, ArchiveEntry],
    ) -> SessionRecord:
        """
        Build the record of one session.

        Raises:
            InvalidArchiveError: If either session file is missing
            FieldNotFoundError: If the request or status line is missing
        """
        request_path, response_path = session_paths(index, padding_width, self.required_folder)

        request = entries_by_path.get(request_path)
        if request is None:
            raise InvalidArchiveError(f"Missing request entry {request_path}")
        response = entries_by_path.get(response_path)
        if response is None:
            raise InvalidArchiveError(f"Missing response entry {response_path}")

        return SessionRecord(
            index=index,
            result=extract_status(response.contents, response_path),
            url=extract_url(request.contents, request_path),
            body=extract_content_length(response.contents),
            file_request=request_path,
            file_response=response_path,
            file_request_contents=request.contents,
            file_response_contents=response.contents,
        )

    def parse(self, path: str) -> SessionList:
        """
        Parse a SAZ archive into its sessions.

        Args:
            path: Path to the .saz file

        Returns:
            SessionList ordered by session index

        Raises:
            SazError: If the archive or any session in it is rejected
        """
        entries = self.read_entries(path)
        total, padding_width = infer_session_range(entries)
        entries_by_path: Dict[str, ArchiveEntry] = {}
        for entry in entries:
            # Duplicate names resolve to the first entry in archive order
            entries_by_path.setdefault(entry.path, entry)

        processed = 0
        progress_lock = threading.Lock()

        def advance_progress():
            nonlocal processed
            with progress_lock:
                processed += 1
                if self.progress and total:
                    pct = int((processed / total) * 100)
                    sys.stderr.write(f"\rExtracting sessions: {processed}/{total} ({pct}%)")
                    sys.stderr.flush()

        def handle(index: int) -> SessionRecord:
            record = self.build_record(index, padding_width, entries_by_path)
            advance_progress()
            return record

        indices = range(1, total + 1)
        if self.parallel and total:
            max_workers = self.parallel_workers if self.parallel_workers and self.parallel_workers > 0 else None
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                # map() yields in submission order and re-raises the first failure
                records = list(pool.map(handle, indices))
        else:
            records = [handle(i) for i in indices]

        if self.progress and total:
            sys.stderr.write("\n")

        return SessionList(records, source=os.fspath(path))


def parse(path: str, **options) -> SessionList:
    """
    Parse a SAZ archive with a default SazParser.

    Keyword arguments are passed to SazParser.
    """
    return SazParser(**options).parse(path)
