from __future__ import annotations

from typing import Optional, Protocol

from .model import Workplace


class WorkplaceRepository(Protocol):
    def get_by_id(self, workplace_id: int) -> Optional[Workplace]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Workplace]:
        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError
