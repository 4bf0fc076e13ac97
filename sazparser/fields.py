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
Field extraction from raw request and response text.

Capture text is not guaranteed to be RFC compliant, so fields are found by
searching the whole text instead of parsing it line by line. The request
line and status line are required; Content-Length is optional.
"""

import re
from typing import Optional

from .errors import FieldNotFoundError

# Example: GET /index.html HTTP/1.1
REQUEST_LINE_PATTERN = re.compile(
    r'(GET|HEAD|POST|PUT|DELETE|CONNECT|OPTIONS|TRACE) (.*) HTTP/1\.1'
)

# Example: HTTP/1.1 200 OK
STATUS_LINE_PATTERN = re.compile(r'HTTP[^\n]*?\b([0-9]{3})\b')

# Example: Content-Length: 1234
CONTENT_LENGTH_PATTERN = re.compile(r'^Content-Length:[ \t]*([0-9]+)', re.MULTILINE)


def extract_url(text: str, path: Optional[str] = None) -> str:
    """
    Get the URL token of the first request line.

    Args:
        text: Raw request text
        path: Entry path, only used in the error message

    Raises:
        FieldNotFoundError: If no request line is present
    """
    match = REQUEST_LINE_PATTERN.search(text)
    if not match:
        raise FieldNotFoundError("request line", path)
    return match.group(2)


def extract_method(text: str, path: Optional[str] = None) -> str:
    """Get the method token of the first request line."""
    match = REQUEST_LINE_PATTERN.search(text)
    if not match:
        raise FieldNotFoundError("request line", path)
    return match.group(1)


def extract_status(text: str, path: Optional[str] = None) -> int:
    """
    Get the status code of the first status line.

    Raises:
        FieldNotFoundError: If no status line is present
    """
    match = STATUS_LINE_PATTERN.search(text)
    if not match:
        raise FieldNotFoundError("status line", path)
    return int(match.group(1))


def extract_content_length(text: str) -> int:
    """Get the Content-Length header value, or 0 if the header is absent."""
    match = CONTENT_LENGTH_PATTERN.search(text)
    if not match:
        return 0
    return int(match.group(1))
