"""
Command layer shared by the CLI.

Each command takes a request dataclass and returns a Result with either
data or a structured CommandError.
"""

from pattern_spine.app.commands.executions import (
    RunAllPatternsCommand,
    RunAllPatternsRequest,
    RunAllPatternsResult,
    RunPatternCommand,
    RunPatternRequest,
    RunPatternResult,
)
from pattern_spine.app.commands.patterns import (
    DescribePatternCommand,
    DescribePatternRequest,
    DescribePatternResult,
    ListPatternsCommand,
    ListPatternsRequest,
    ListPatternsResult,
)

__all__ = [
    "DescribePatternCommand",
    "DescribePatternRequest",
    "DescribePatternResult",
    "ListPatternsCommand",
    "ListPatternsRequest",
    "ListPatternsResult",
    "RunAllPatternsCommand",
    "RunAllPatternsRequest",
    "RunAllPatternsResult",
    "RunPatternCommand",
    "RunPatternRequest",
    "RunPatternResult",
]
