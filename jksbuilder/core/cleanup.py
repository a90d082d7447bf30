from __future__ import annotations
from typing import TYPE_CHECKING

import os
from contextlib import contextmanager

from jksbuilder.core.exc import FatalError
from jksbuilder.core.ui import ui

if TYPE_CHECKING:
  from typing import Iterator

def remove_artifacts(*paths: str) -> None:
  for path in paths:
    if os.path.isfile(path):
      os.remove(path)

@contextmanager
def artifacts_removed_on_failure(*paths: str) -> Iterator[None]:
  """Remove every artifact in ``paths`` if the enclosed block fails.

  Errors are reported once and surface as ``FatalError`` so callers only need
  to handle one failure type. Interrupts and exits still remove the artifacts
  but propagate unchanged.
  """
  try:
    yield None
  except BaseException as e:
    remove_artifacts(*paths)
    ui.error('Script failed. Cleaned up generated files.')
    if isinstance(e, FatalError) or not isinstance(e, Exception):
      raise
    raise FatalError(str(e)) from e
