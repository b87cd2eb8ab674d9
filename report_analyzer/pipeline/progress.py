from collections.abc import Callable
from dataclasses import replace

from report_analyzer.logging.logger import Log
from report_analyzer.pipeline.models import PipelineProgress

ProgressListener = Callable[[PipelineProgress], None]


class ProgressChannel:
    """Fans progress out to listeners for the current run only.

    Snapshots from any other run id are dropped. Within a run the published
    percent never decreases.
    """

    def __init__(self) -> None:
        self._listeners: list[ProgressListener] = []
        self._run_id = 0
        self._latest: PipelineProgress | None = None

    @property
    def latest(self) -> PipelineProgress | None:
        return self._latest

    @property
    def current_run_id(self) -> int:
        return self._run_id

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin_run(self, run_id: int) -> None:
        self._run_id = run_id
        self._latest = None

    def publish(self, progress: PipelineProgress) -> bool:
        """Deliver *progress* to listeners. Returns False if it was dropped."""
        if progress.run_id != self._run_id:
            Log.debug(
                "Dropping progress from stale run",
                run_id=progress.run_id,
                current_run_id=self._run_id,
            )
            return False
        if self._latest is not None and progress.percent < self._latest.percent:
            progress = replace(progress, percent=self._latest.percent)
        self._latest = progress
        for listener in list(self._listeners):
            listener(progress)
        return True
