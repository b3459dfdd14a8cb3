import logging
import os
from dataclasses import dataclass

from clinic_core.models import DEFAULT_QUEUE_CAPACITY, DEFAULT_SPECIALIZATIONS


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _flag(raw: str) -> bool:
    return str(raw).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class HospitalConfig:
    specialization_count: int = DEFAULT_SPECIALIZATIONS
    queue_capacity: int = DEFAULT_QUEUE_CAPACITY
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "HospitalConfig":
        """
        从环境变量读取配置，未设置的项使用默认值
        """
        env = os.environ if environ is None else environ
        return cls(
            specialization_count=_positive_int(
                "HOSPITAL_SPECIALIZATIONS",
                env.get("HOSPITAL_SPECIALIZATIONS", DEFAULT_SPECIALIZATIONS),
            ),
            queue_capacity=_positive_int(
                "HOSPITAL_QUEUE_CAPACITY",
                env.get("HOSPITAL_QUEUE_CAPACITY", DEFAULT_QUEUE_CAPACITY),
            ),
            host=env.get("HOST", "0.0.0.0"),
            port=_positive_int("PORT", env.get("PORT", 5000)),
            debug=_flag(env.get("FLASK_DEBUG", "0")),
            log_level=str(env.get("LOG_LEVEL", "INFO")).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
