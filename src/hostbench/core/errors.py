class BenchmarkError(Exception):
    """A benchmark phase failed and the run cannot produce a complete summary."""

    def __init__(self, phase: str, message: str):
        super().__init__(message)
        self.phase = phase
        self.message = message

    def __str__(self):
        return f"{self.phase}: {self.message}"


class OutOfMemoryError(BenchmarkError):
    def __init__(self, message: str, phase: str = "memory"):
        super().__init__(phase, message)


class BenchmarkIOError(BenchmarkError):
    def __init__(self, message: str, phase: str = "io"):
        super().__init__(phase, message)


class CleanupWarning(UserWarning):
    """The temporary file could not be removed after a completed measurement."""
