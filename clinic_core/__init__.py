from .models import (
    Priority,
    QueueStatus,
    QueueError,
    Patient,
    Occupancy,
    SpecializationStats,
    Result,
)
from .queues import PatientQueue
from .registry import SpecializationRegistry, HospitalSystem
