"""
Action Environment for actionstack.

The environment is the shared, mutable state threaded through every unit
of an action chain. The chain compiler treats it as opaque; this module
provides the default implementation that ErrorHalt knows how to halt.
"""
from __future__ import annotations

import copy
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HaltRecord:
    """
    Why an environment was halted.

    Attributes:
        reason: Human-readable halt reason
        unit_name: Name of the unit that halted the chain, if known
        error_type: Exception class name, None for deliberate halts
        error_message: Exception message, None for deliberate halts
        stack_trace: Formatted traceback (optional)
        timestamp: When the halt was recorded
    """

    reason: str
    unit_name: str | None = None
    error_type: str | None = None
    error_message: str | None = None
    stack_trace: str | None = None
    timestamp: datetime = field(default_factory=_utc_now)

    @property
    def is_error(self) -> bool:
        return self.error_type is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reason": self.reason,
            "unit_name": self.unit_name,
            "error_type": self.error_type,
            "error_message": self.error_message,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        unit_name: str | None = None,
        include_stack_trace: bool = True,
        reason: str | None = None,
    ) -> HaltRecord:
        """
        Build a record from a caught exception.

        Args:
            exception: The caught exception
            unit_name: Name of the unit that raised it
            include_stack_trace: Whether to keep the formatted traceback
            reason: Override for the default "Type: message" reason
        """
        stack_trace = None
        if include_stack_trace:
            stack_trace = "".join(
                traceback.format_exception(
                    type(exception), exception, exception.__traceback__
                )
            )
        return cls(
            reason=reason or f"{type(exception).__name__}: {exception}",
            unit_name=unit_name,
            error_type=type(exception).__name__,
            error_message=str(exception),
            stack_trace=stack_trace,
        )


@dataclass
class Environment:
    """
    Invocation-scoped state passed through an action chain.

    Provides:
    - Unique execution ID for tracing
    - Free-form shared data with mapping-style access
    - Halt state recorded by ErrorHalt or by units
    - Audit trail of the units that ran

    Example:
        env = Environment(data={"user": "alice"})
        builder.call(env)
        if env.halted:
            print(env.halt_record.reason)
    """

    execution_id: UUID = field(default_factory=uuid4)
    started_at: datetime = field(default_factory=_utc_now)

    data: dict[str, Any] = field(default_factory=dict)

    halted: bool = False
    halt_record: HaltRecord | None = None

    unit_log: list[str] = field(default_factory=list)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds since the environment was created."""
        delta = datetime.now(timezone.utc) - self.started_at
        return delta.total_seconds() * 1000

    @property
    def error(self) -> HaltRecord | None:
        """The halt record if the halt was caused by an exception."""
        if self.halt_record is not None and self.halt_record.is_error:
            return self.halt_record
        return None

    def halt(
        self,
        reason: str,
        *,
        error: BaseException | None = None,
        unit_name: str | None = None,
        include_stack_trace: bool = True,
    ) -> None:
        """
        Mark the environment halted.

        The first halt wins; later calls are ignored so the original
        cause is kept.
        """
        if self.halted:
            return
        if error is not None:
            record = HaltRecord.from_exception(
                error,
                unit_name=unit_name,
                include_stack_trace=include_stack_trace,
                reason=reason,
            )
        else:
            record = HaltRecord(reason=reason, unit_name=unit_name)
        self.halted = True
        self.halt_record = record

    def record_unit(self, unit_name: str) -> None:
        """Append a unit to the audit trail."""
        self.unit_log.append(unit_name)

    def to_audit_dict(self) -> dict[str, Any]:
        """Generate audit record for storage."""
        return {
            "execution_id": str(self.execution_id),
            "started_at": self.started_at.isoformat(),
            "duration_ms": self.elapsed_ms,
            "halted": self.halted,
            "halt": self.halt_record.to_dict() if self.halt_record else None,
            "units": list(self.unit_log),
        }

    def copy(self) -> Environment:
        """
        Create an isolated copy.

        Data values are shared; the data dict and the audit trail are
        copied so the two environments evolve independently.
        """
        return Environment(
            execution_id=self.execution_id,
            started_at=self.started_at,
            data=copy.copy(self.data),
            halted=self.halted,
            halt_record=self.halt_record,
            unit_log=copy.copy(self.unit_log),
        )
