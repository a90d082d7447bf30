from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
  pass

class FatalError(Exception):
  pass

class UsageError(FatalError):
  pass

class InvalidReplaceValueError(FatalError):
  pass
