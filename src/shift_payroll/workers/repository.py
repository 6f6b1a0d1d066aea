from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    """Giao diện repository cho Worker.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Worker]:
        """Lookup by an already lower-cased email."""

        raise NotImplementedError

    def get_many(self, worker_ids: Sequence[int]) -> Sequence[Worker]:
        raise NotImplementedError

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: Optional[str],
        password_hash: str,
    ) -> int:
        raise NotImplementedError
