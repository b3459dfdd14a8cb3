import logging
from typing import Dict, List, Optional, Tuple

from .models import (
    DEFAULT_QUEUE_CAPACITY,
    DEFAULT_SPECIALIZATIONS,
    Patient,
    Priority,
    QueueError,
    QueueStatus,
    Result,
    SpecializationStats,
)
from .queues import PatientQueue


logger = logging.getLogger(__name__)


class SpecializationRegistry:
    """
    专科集合：编号 1..N，内部按 index = id - 1 存放，创建后数量与容量不再变化。
    """

    def __init__(self, specialization_count: int = DEFAULT_SPECIALIZATIONS,
                 queue_capacity: int = DEFAULT_QUEUE_CAPACITY):
        if specialization_count <= 0:
            raise ValueError("specialization_count must be a positive integer")
        if queue_capacity <= 0:
            raise ValueError("queue_capacity must be a positive integer")
        self.queue_capacity = queue_capacity
        self._queues: List[PatientQueue] = [
            PatientQueue(i, queue_capacity) for i in range(1, specialization_count + 1)
        ]

    def __len__(self) -> int:
        return len(self._queues)

    def is_valid(self, specialization_id) -> bool:
        # bool 是 int 的子类，需要单独排除
        if isinstance(specialization_id, bool) or not isinstance(specialization_id, int):
            return False
        return 1 <= specialization_id <= len(self._queues)

    def _lookup(self, specialization_id) -> Optional[PatientQueue]:
        if not self.is_valid(specialization_id):
            return None
        return self._queues[specialization_id - 1]

    def get(self, specialization_id: int) -> PatientQueue:
        queue = self._lookup(specialization_id)
        if queue is None:
            raise KeyError(specialization_id)
        return queue

    def admit(self, specialization_id: int, name: str, priority: Priority) -> Result:
        queue = self._lookup(specialization_id)
        if queue is None:
            return Result.failure(QueueError.INVALID_SPECIALIZATION)
        return queue.admit(name, priority)

    def dispatch_next(self, specialization_id: int) -> Result:
        queue = self._lookup(specialization_id)
        if queue is None:
            return Result.failure(QueueError.INVALID_SPECIALIZATION)
        return queue.dispatch_next()

    def list_non_empty(self) -> List[Tuple[int, Tuple[Patient, ...]]]:
        listing = []
        for queue in self._queues:
            snapshot = queue.snapshot()
            if snapshot:
                listing.append((queue.specialization_id, snapshot))
        return listing

    def statistics(self) -> List[SpecializationStats]:
        rows = []
        for queue in self._queues:
            occupancy = queue.occupancy()
            rows.append(SpecializationStats(
                specialization_id=queue.specialization_id,
                urgent=occupancy.urgent,
                regular=occupancy.regular,
                total=occupancy.total,
                status=QueueStatus.classify(occupancy.total, queue.capacity),
            ))
        return rows


class HospitalSystem:
    """
    对外的系统封装，便于 Flask / 控制台调用。
    """

    def __init__(self, specialization_count: int = DEFAULT_SPECIALIZATIONS,
                 queue_capacity: int = DEFAULT_QUEUE_CAPACITY):
        self.registry = SpecializationRegistry(specialization_count, queue_capacity)

    @classmethod
    def from_config(cls, config) -> "HospitalSystem":
        return cls(config.specialization_count, config.queue_capacity)

    @property
    def specialization_count(self) -> int:
        return len(self.registry)

    @property
    def queue_capacity(self) -> int:
        return self.registry.queue_capacity

    def add_patient(self, specialization_id: int, name: str, is_urgent: bool) -> Result:
        result = self.registry.admit(specialization_id, name, Priority.from_flag(is_urgent))
        if result.error is QueueError.INVALID_SPECIALIZATION:
            logger.info("add_patient: unknown specialization %r", specialization_id)
        return result

    def next_patient(self, specialization_id: int) -> Result:
        result = self.registry.dispatch_next(specialization_id)
        if result.error is QueueError.INVALID_SPECIALIZATION:
            logger.info("next_patient: unknown specialization %r", specialization_id)
        return result

    def waiting_patients(self) -> List[Tuple[int, Tuple[Patient, ...]]]:
        return self.registry.list_non_empty()

    def statistics(self) -> List[SpecializationStats]:
        return self.registry.statistics()

    def summary(self) -> Dict:
        rows = self.statistics()
        urgent = sum(r.urgent for r in rows)
        regular = sum(r.regular for r in rows)
        return {
            "specializations": len(rows),
            "capacity": self.queue_capacity * len(rows),
            "urgent": urgent,
            "regular": regular,
            "total": urgent + regular,
            "full": sum(1 for r in rows if r.status is QueueStatus.FULL),
        }
