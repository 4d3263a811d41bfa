from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .registry.counter import StaffCounter
from .registry.service import HospitalRegistry
from .staff.doctor import Doctor
from .staff.factory import StaffFactory
from .staff.notifier import log_status_change


@dataclass(frozen=True)
class Container:
    staff_factory: StaffFactory
    registry: HospitalRegistry


def build_container(*, demo_staff: Optional[list[dict]] = None, counter: Optional[StaffCounter] = None) -> Container:
    staff_factory = StaffFactory()
    registry = HospitalRegistry(counter=counter)

    for member in staff_factory.create_many(demo_staff or []):
        if isinstance(member, Doctor):
            member.subscribe(log_status_change)
        registry.add_staff(member)

    return Container(staff_factory=staff_factory, registry=registry)
