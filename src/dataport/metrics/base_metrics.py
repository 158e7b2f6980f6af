from abc import ABC
from datetime import datetime, timedelta
import time
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from dataport.metrics.runtime_state import RuntimeState


class Metrics(BaseModel, ABC):
    """
    Base class for metrics.
    """

    model_config = ConfigDict(validate_assignment=True)

    _id: str = PrivateAttr(default_factory=lambda: str(uuid4()))
    _started_at_monotonic: Optional[float] = PrivateAttr(default=None)

    status: RuntimeState = RuntimeState.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    started_at: Optional[datetime] = None
    processing_time: timedelta = timedelta(0)
    error_count: int = Field(default=0, ge=0)

    @property
    def id(self) -> str:
        return self._id

    def set_started(self) -> None:
        """
        Set the started_at time and reset processing_time.
        """
        self.started_at = datetime.now()
        self._started_at_monotonic = time.perf_counter()
        self.processing_time = timedelta(0)
        self.status = RuntimeState.RUNNING

    def update_processing_time(self) -> None:
        """Refresh processing_time using the most reliable available clock."""
        if self._started_at_monotonic is not None:
            elapsed = time.perf_counter() - self._started_at_monotonic
            self.processing_time = timedelta(seconds=elapsed)
            return
        if self.started_at is not None:
            self.processing_time = datetime.now() - self.started_at

    def set_finished(self, *, failed: bool = False) -> None:
        self.update_processing_time()
        if failed:
            self.error_count += 1
            self.status = RuntimeState.FAILED
        else:
            self.status = RuntimeState.SUCCESS
