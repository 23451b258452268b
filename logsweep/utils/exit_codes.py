"""Centralized exit codes for the logsweep CLI."""


class ExitCodes:
    """Standard exit codes for the logsweep command."""

    SUCCESS = 0

    # Bad arguments, unreadable root, or an unexpected crash
    FAILURE = 1

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - traversal completed",
            cls.FAILURE: "Usage error or fatal traversal failure",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
