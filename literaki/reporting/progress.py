import logging
from abc import ABC, abstractmethod
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

logger = logging.getLogger(__name__)

class ProgressSink(ABC):
    """
    Receives fire-and-forget progress updates from long-running work.
    """

    @abstractmethod
    def report(self, percent: float) -> None:
        pass

    @abstractmethod
    def report_status(self, message: str) -> None:
        pass

class NullProgressSink(ProgressSink):
    def report(self, percent: float) -> None:
        pass

    def report_status(self, message: str) -> None:
        pass

class LoggingProgressSink(ProgressSink):
    def report(self, percent: float) -> None:
        logger.debug(f"Progress {percent:.0f}%")

    def report_status(self, message: str) -> None:
        logger.debug(f"Status: {message}")

class RichProgressSink(ProgressSink):
    """
    Drives a single rich progress bar. Use as a context manager so the bar
    is cleaned up from the terminal when the work is done.
    """

    def __init__(self, description: str = "[cyan]Working..."):
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            transient=True,
        )
        self.task = self.progress.add_task(description, total=100)

    def __enter__(self) -> "RichProgressSink":
        self.progress.start()
        return self

    def __exit__(self, *exc) -> None:
        self.progress.stop()

    def report(self, percent: float) -> None:
        self.progress.update(self.task, completed=max(0.0, min(100.0, percent)))

    def report_status(self, message: str) -> None:
        self.progress.update(self.task, description=f"[cyan]{message}")
