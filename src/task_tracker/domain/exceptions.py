class TaskNotFoundError(Exception):
    """Raised when a task identifier does not resolve under the operation's filter."""

    def __init__(self, task_id: str, message: str | None = None) -> None:
        super().__init__(message or f'Task with ID "{task_id}" was not found.')
        self.task_id = task_id


class TaskAlreadyDeletedError(TaskNotFoundError):
    """Raised when deleting a task that is already marked as deleted."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id, f'Task with ID "{task_id}" is already marked as deleted.')


class TaskNotDeletedError(TaskNotFoundError):
    """Raised when restoring a task that is not marked as deleted."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id, f'Task with ID "{task_id}" is not marked as deleted.')


class TaskStorageError(Exception):
    """Raised by the task store when the backend fails."""


class TaskOperationError(Exception):
    """Generic, caller-safe failure of a task operation."""
