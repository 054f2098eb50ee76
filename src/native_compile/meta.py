# src/native_compile/meta.py
"""Program identity shared by the logger, options and tests."""

PROGRAM_PACKAGE = "native_compile"
PROGRAM_ENV = "NATIVE_COMPILE"
