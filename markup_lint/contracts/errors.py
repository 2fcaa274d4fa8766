"""
Errors - Exceptions raised by the linter.
"""

from typing import Optional


class LintError(Exception):
    """
    A rule failed while linting a document.

    The whole document is considered failed: no partial issue list is
    returned. The original exception is chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        rule_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.file_name = file_name
        self.rule_name = rule_name

    def __str__(self) -> str:
        message = super().__str__()
        if self.file_name:
            return f"{self.file_name}: {message}"
        return message
