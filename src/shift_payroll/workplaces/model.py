from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Workplace:
    """Thực thể miền (domain): Nơi làm việc (cửa hàng)."""

    workplace_id: int
    name: str
