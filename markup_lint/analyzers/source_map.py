"""
Source map - Convert absolute source offsets to line/column positions.

Usage:
    source_map = SourceMap(html)
    line, column = source_map.line_column(42)
    issue = source_map.locate(issue)
"""

from bisect import bisect_right
from typing import List, Tuple

from ..contracts.issues import Issue


class SourceMap:
    """
    Line index over a source document.

    Lines and columns are 1-indexed. Offsets past the end of the source
    clamp to the end.
    """

    def __init__(self, source: str):
        self._source = source
        self._line_starts = self._build_line_starts(source)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_column(self, index: int) -> Tuple[int, int]:
        """
        Get the (line, column) of an absolute offset.

        Args:
            index: Absolute offset into the source

        Returns:
            Tuple of 1-indexed line and column
        """
        index = max(0, min(index, len(self._source)))
        line = bisect_right(self._line_starts, index)
        return line, index - self._line_starts[line - 1] + 1

    def locate(self, issue: Issue) -> Issue:
        """Return the issue with line/column filled in (unchanged if it has no index)."""
        if issue.index is None:
            return issue
        return issue.with_location(*self.line_column(issue.index))

    def _build_line_starts(self, source: str) -> List[int]:
        starts = [0]
        for i, char in enumerate(source):
            if char == "\n":
                starts.append(i + 1)
        return starts

    def __repr__(self) -> str:
        return f"SourceMap({self.line_count} lines)"
