import itertools
import logging
import threading
from collections import deque
from typing import Deque, Tuple

from .models import Occupancy, Patient, Priority, QueueError, Result


logger = logging.getLogger(__name__)


class PatientQueue:
    """
    专科候诊队列：紧急与普通两级先进先出，两级合计人数不超过 capacity
    叫号规则：紧急级非空时总是先叫紧急级队首，否则叫普通级队首
    """

    def __init__(self, specialization_id: int, capacity: int):
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self.specialization_id = specialization_id
        self.capacity = capacity
        self._urgent: Deque[Patient] = deque()
        self._regular: Deque[Patient] = deque()
        # 每个专科一把锁，专科之间互不影响
        self._lock = threading.Lock()
        self._sequence = itertools.count(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._urgent) + len(self._regular)

    def _total(self) -> int:
        return len(self._urgent) + len(self._regular)

    def admit(self, name: str, priority: Priority) -> Result:
        with self._lock:
            if self._total() >= self.capacity:
                logger.warning(
                    "specialization %s is full (%s/%s), rejected %r",
                    self.specialization_id, self._total(), self.capacity, name,
                )
                return Result.failure(QueueError.CAPACITY_EXCEEDED)

            patient = Patient(name=name, priority=priority, sequence=next(self._sequence))
            if patient.is_urgent:
                self._urgent.append(patient)
            else:
                self._regular.append(patient)
            logger.info(
                "admitted %r to specialization %s (%s)",
                name, self.specialization_id, priority.label,
            )
            return Result.success(patient)

    def dispatch_next(self) -> Result:
        with self._lock:
            if self._urgent:
                patient = self._urgent.popleft()
            elif self._regular:
                patient = self._regular.popleft()
            else:
                logger.debug("specialization %s has nobody waiting", self.specialization_id)
                return Result.failure(QueueError.EMPTY_QUEUE)
            logger.info(
                "dispatched %r from specialization %s (%s)",
                patient.name, self.specialization_id, patient.priority.label,
            )
            return Result.success(patient)

    def occupancy(self) -> Occupancy:
        with self._lock:
            return Occupancy(urgent=len(self._urgent), regular=len(self._regular))

    def snapshot(self) -> Tuple[Patient, ...]:
        """
        只读视图：紧急级在前，每一级内部按到达时间从早到晚
        """
        with self._lock:
            urgent = sorted(self._urgent, key=Patient.sort_key)
            regular = sorted(self._regular, key=Patient.sort_key)
        return tuple(urgent + regular)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._urgent and not self._regular
