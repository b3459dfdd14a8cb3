import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_SPECIALIZATIONS = 20
DEFAULT_QUEUE_CAPACITY = 5


class Priority(enum.Enum):
    URGENT = "urgent"
    REGULAR = "regular"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_flag(cls, is_urgent: bool) -> "Priority":
        return cls.URGENT if is_urgent else cls.REGULAR


class QueueStatus(enum.Enum):
    EMPTY = "empty"
    FULL = "full"
    BUSY = "busy"          # 达到容量的 80%
    AVAILABLE = "available"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def classify(cls, total: int, capacity: int) -> "QueueStatus":
        """
        根据当前人数与容量推导状态，不保存任何状态。
        忙碌阈值使用整数比较 total*5 >= capacity*4，等价于 total >= 0.8*capacity
        """
        if total == 0:
            return cls.EMPTY
        if total >= capacity:
            return cls.FULL
        if total * 5 >= capacity * 4:
            return cls.BUSY
        return cls.AVAILABLE


class QueueError(enum.Enum):
    INVALID_SPECIALIZATION = "invalid_specialization"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    EMPTY_QUEUE = "empty_queue"


@dataclass(frozen=True)
class Patient:
    name: str
    priority: Priority
    arrival_time: datetime = field(default_factory=datetime.now)
    # 队列内到达序号：同一秒内到达的病人靠它保持先后顺序
    sequence: int = 0

    @property
    def is_urgent(self) -> bool:
        return self.priority is Priority.URGENT

    def formatted_arrival_time(self) -> str:
        return self.arrival_time.strftime(TIME_FORMAT)

    def sort_key(self):
        return (self.arrival_time, self.sequence)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "priority": self.priority.label,
            "urgent": self.is_urgent,
            "arrival_time": self.formatted_arrival_time(),
        }


@dataclass(frozen=True)
class Occupancy:
    urgent: int = 0
    regular: int = 0

    @property
    def total(self) -> int:
        return self.urgent + self.regular


@dataclass(frozen=True)
class SpecializationStats:
    specialization_id: int
    urgent: int
    regular: int
    total: int
    status: QueueStatus

    def to_dict(self) -> dict:
        return {
            "specialization_id": self.specialization_id,
            "urgent": self.urgent,
            "regular": self.regular,
            "total": self.total,
            "status": self.status.label,
        }


@dataclass(frozen=True)
class Result:
    """
    操作结果：成功时 value 可能为病人，失败时 error 给出原因。
    三种失败都是正常业务情况，不使用异常传递。
    """
    value: Optional[Patient] = None
    error: Optional[QueueError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[Patient] = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: QueueError) -> "Result":
        return cls(error=error)
