from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class PublishError:
    kind: Literal[
        "missing_input",
        "invalid_config",
    ]
    message: str
    hint: str | None = None
