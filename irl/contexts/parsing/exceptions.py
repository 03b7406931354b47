"""Custom exceptions for the parsing context."""


class InvalidIntentStructureError(ValueError):
    """
    Exception raised when a serialized intent is invalid or missing required fields.

    This is raised when a mapping doesn't conform to the intent wire format
    (e.g., missing 'primaryGoal', an unknown conflict severity, or a
    'requiresClarification' flag that contradicts its conflicts).
    """

    pass
