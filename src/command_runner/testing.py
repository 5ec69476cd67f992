"""Test doubles for code that depends on a `CommandRunner`."""

from __future__ import annotations

from .runner.testing import Invocation, TestCommandRunner

__all__ = ["Invocation", "TestCommandRunner"]
