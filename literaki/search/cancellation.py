class Cancelled:
    """
    Outcome of a search that was superseded before it finished. Callers
    drop it silently; it is not an empty result.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCELLED"

CANCELLED = Cancelled()

class CancellationToken:
    """
    Checked by long-running searches at every checkpoint.
    """

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
