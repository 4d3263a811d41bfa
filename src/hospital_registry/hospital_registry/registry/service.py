from __future__ import annotations

from typing import Iterator, Optional, Union
from uuid import UUID

from ..common.logging_utils import get_logger
from ..core.constants import REPORT_FOOTER, REPORT_HEADER, REPORT_LINE
from ..core.exceptions import StaffNotFoundError
from ..staff.base import StaffMember
from .counter import StaffCounter

logger = get_logger("registry")


class HospitalRegistry:
    """Ordered collection of staff plus the salary report built over it.

    Registries created without a counter share ``StaffCounter.process_wide()``,
    so ``total_staff_count`` counts additions across all of them.
    """

    def __init__(self, *, counter: Optional[StaffCounter] = None):
        self._staff: list[StaffMember] = []
        self._counter = counter or StaffCounter.process_wide()

    @property
    def total_staff_count(self) -> int:
        return self._counter.value

    def add_staff(self, member: StaffMember) -> None:
        self._staff.append(member)
        total = self._counter.increment()
        logger.debug("Added %r (total staff: %d)", member, total)

    def list_staff(self) -> list[StaffMember]:
        return list(self._staff)

    def get(self, staff_id: Union[UUID, str]) -> StaffMember:
        key = str(staff_id)
        for member in self._staff:
            if str(member.staff_id) == key:
                return member
        raise StaffNotFoundError(f"Staff {staff_id} not found")

    def salary_rows(self) -> list[dict]:
        rows = []
        for member in self._staff:
            rows.append(
                {
                    "staff_id": str(member.staff_id),
                    "name": member.name,
                    "kind": member.kind.value,
                    "department": member.get_department(),
                    "salary": member.calculate_salary(),
                }
            )
        return rows

    def total_salary_cost(self) -> float:
        return sum(member.calculate_salary() for member in self._staff)

    def calculate_all_salaries(self) -> list[str]:
        rows = self.salary_rows()
        total = sum(r["salary"] for r in rows)

        lines = [REPORT_HEADER]
        lines.extend(REPORT_LINE.format(**r) for r in rows)
        lines.append(REPORT_FOOTER.format(total=total))

        logger.debug("Salary report built for %d staff, total %.2f", len(rows), total)
        return lines

    def __len__(self) -> int:
        return len(self._staff)

    def __iter__(self) -> Iterator[StaffMember]:
        return iter(self._staff)
