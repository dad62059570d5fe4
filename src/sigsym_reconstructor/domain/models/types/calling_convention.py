#!/usr/bin/env python3

"""Calling conventions recorded on function signatures."""

from enum import Enum


class CallingConvention(Enum):
    """The closed set of calling conventions a signature may carry."""

    NEAR_C = "near_c"  # cdecl
    NEAR_FAST = "near_fast"  # fastcall and the 64-bit platform default
    NEAR_STDCALL = "near_stdcall"
    THIS_CALL = "thiscall"

    def __str__(self) -> str:
        return self.value
