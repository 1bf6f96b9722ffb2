from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def exists(self, employee_id: int) -> bool:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_ids(self, employee_ids: Iterable[int]) -> Sequence[Employee]:
        """Bulk lookup ordered by id; unknown ids are skipped."""
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by last name."""
        raise NotImplementedError

    def search_by_name(self, term: str) -> Sequence[Employee]:
        raise NotImplementedError

    def exists_by_name(self, first_name: str, last_name: str) -> bool:
        raise NotImplementedError

    def create(self, *, first_name: str, last_name: str) -> Employee:
        raise NotImplementedError

    def update(self, *, employee_id: int, first_name: str, last_name: str) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
