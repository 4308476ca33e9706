"""Module to contain compatibility objects based on different Python versions supported."""

__all__ = ["StrEnum", "assert_never"]

import sys

if sys.version_info >= (3, 11):
    from enum import StrEnum
    from typing import assert_never
else:
    from backports.strenum import StrEnum
    from typing_extensions import assert_never
