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
Session records extracted from a SAZ archive, and their serialization.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import yaml

OUTPUT_FORMATS = ("json", "yaml")


@dataclass(frozen=True)
class SessionRecord:
    """One request/response exchange of the capture."""
    index: int
    result: int
    url: str
    body: int
    file_request: str
    file_response: str
    file_request_contents: str
    file_response_contents: str

    @property
    def status(self) -> int:
        """Alias for the HTTP status code."""
        return self.result

    @property
    def content_length(self) -> int:
        """Alias for the response Content-Length."""
        return self.body

    def to_dict(self, include_contents: bool = True) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "index": self.index,
            "result": self.result,
            "url": self.url,
            "body": self.body,
            "file_request": self.file_request,
            "file_response": self.file_response,
        }
        if include_contents:
            result["file_request_contents"] = self.file_request_contents
            result["file_response_contents"] = self.file_response_contents
        return result

    def __repr__(self) -> str:
        return f"SessionRecord(#{self.index} {self.result} {self.url})"


class SessionList(list):
    """
    Ordered sessions of one archive.

    A plain list of SessionRecord, ascending by index, that also knows how
    to render itself as JSON or YAML.
    """

    def __init__(self, records: Iterable[SessionRecord] = (), source: Optional[str] = None):
        super().__init__(records)
        self.source = source

    def to_dict(self, include_contents: bool = True) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        result: Dict[str, Any] = {}
        if self.source is not None:
            result["source"] = self.source
        result["total"] = len(self)
        result["sessions"] = [r.to_dict(include_contents) for r in self]
        return result

    def to_json(self, indent: int = 2, include_contents: bool = True) -> str:
        """Convert to JSON string."""
        return json.dumps(
            self.to_dict(include_contents),
            indent=indent or None,
            ensure_ascii=False,
        )

    def to_yaml(self, indent: int = 2, include_contents: bool = True) -> str:
        """Convert to YAML string."""
        return yaml.safe_dump(
            self.to_dict(include_contents),
            indent=indent if indent and indent >= 2 else 2,
            sort_keys=False,
            allow_unicode=True,
        )

    def dumps(self, fmt: str = "json", indent: int = 2, include_contents: bool = True) -> str:
        """Render in one of OUTPUT_FORMATS."""
        if fmt == "json":
            return self.to_json(indent=indent, include_contents=include_contents)
        elif fmt == "yaml":
            return self.to_yaml(indent=indent, include_contents=include_contents)
        raise ValueError(f"Unknown output format: {fmt}")

    def save(
        self,
        filepath: str,
        fmt: str = "json",
        indent: int = 2,
        include_contents: bool = True,
    ) -> None:
        """Save sessions to a file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self.dumps(fmt, indent=indent, include_contents=include_contents))
