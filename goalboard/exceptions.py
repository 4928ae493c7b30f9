"""
Goalboard exception definitions.

Hierarchy of the errors raised by the composition engine:
- GoalboardError: base class for every known error
- ConfigError: policy or runtime configuration is missing or malformed
- UnknownCategoryError: goal category absent from the policy table
- GoalNotFoundError: no snapshot stored under the requested id
- MalformedSnapshotFieldError: a serialized snapshot field failed to decode
- ModuleNotRegisteredError: an active module id has no capability entry
- InvalidProgressError: progress value outside [0, 1]
"""
from typing import Optional


class GoalboardError(Exception):
    """Base class for all expected engine errors.

    Catching this class handles every anticipated failure of the pipeline.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        """
        Args:
            message: error description
            hint: suggested next step for the user
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def get_user_message(self) -> str:
        """Return a user-facing message including the hint, if any."""
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class ConfigError(GoalboardError):
    """Raised when a configuration file is missing or malformed."""

    def __init__(self, message: str, config_path: Optional[str] = None):
        hint = f"Check the configuration file: {config_path}" if config_path else "Check the configuration format"
        super().__init__(message, hint)
        self.config_path = config_path


class UnknownCategoryError(GoalboardError):
    """The goal category is not registered in the policy table.

    Fatal for create, estimate and regenerate; nothing is persisted.
    """

    def __init__(self, category: str, known: Optional[list] = None):
        hint = None
        if known:
            hint = "Known categories: " + ", ".join(sorted(known))
        super().__init__(f"Unknown goal category: {category}", hint)
        self.category = category


class GoalNotFoundError(GoalboardError):
    """No goal snapshot exists for the given id."""

    def __init__(self, goal_id: str):
        super().__init__(f"Goal not found: {goal_id}")
        self.goal_id = goal_id


class MalformedSnapshotFieldError(GoalboardError):
    """A serialized sub-object of a snapshot could not be decoded."""

    def __init__(self, field_name: str, raw_value: Optional[str] = None, reason: str = ""):
        message = f"Malformed snapshot field '{field_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, hint="The field is treated as empty; regenerate the goal to repair it")
        self.field_name = field_name
        self.raw_value = raw_value


class ModuleNotRegisteredError(GoalboardError):
    """A dashboard module id has no capability entry in the registry."""

    def __init__(self, module_id: str):
        super().__init__(f"Dashboard module not registered: {module_id}")
        self.module_id = module_id


class InvalidProgressError(GoalboardError):
    """Progress must be a fraction between 0 and 1."""

    def __init__(self, progress: float):
        super().__init__(
            f"Progress must be between 0 and 1, got {progress}",
            hint="Pass 0.5 for 50%",
        )
        self.progress = progress
