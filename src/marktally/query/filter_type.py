# SPDX-License-Identifier: MIT

from enum import StrEnum


class FilterOp(StrEnum):
    EQUALS = "="
    NOT_EQUALS = "!="
    INCLUDES = "includes"
    REGEX = "regex"
    GREATER = ">"
    LESS = "<"


class FilterLogic(StrEnum):
    AND = "and"
    OR = "or"
