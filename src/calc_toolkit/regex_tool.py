"""
Regex tester: does a pattern match anywhere in a test string?

Patterns are compiled with Python's re module; no translation from Java
(Spring Boot) syntax is attempted. Most everyday patterns behave the same.
"""

import re

from calc_toolkit.models import RegexTestResult


def check_pattern(pattern: str, text: str) -> RegexTestResult:
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        return RegexTestResult(matched=None, message="Invalid regex pattern", error=str(exc))

    if compiled.search(text):
        return RegexTestResult(matched=True, message="Match!")
    return RegexTestResult(matched=False, message="No match")
