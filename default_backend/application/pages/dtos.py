"""
Data Transfer Objects for the error pages application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class ResolveErrorPageQuery:
    """Input DTO for resolving the error document of one request.

    Attributes:
        headers: Request headers set by the upstream proxy.
        configured_base_path: ``ERROR_FILES_PATH`` as loaded at start-up.
    """

    headers: Mapping[str, str]
    configured_base_path: str
