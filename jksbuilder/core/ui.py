from __future__ import annotations
from typing import TYPE_CHECKING

import sys
from jksbuilder.core.exc import FatalError

if TYPE_CHECKING:
  from typing import NoReturn, TextIO, Any, Type
  from typing_extensions import Final

class UI:
  DEBUG: Final = 0
  INFO: Final = 1
  WARN: Final = 2
  ERROR: Final = 3

  level = INFO
  is_debugging = False

  def set_level(self, level: int) -> None:
    self.level = level
    self.is_debugging = (self.level == self.DEBUG)

  def colored(self, x: str, f: TextIO, **kw: Any) -> str:
    from termcolor import colored
    can = self._can_do_colour(f)
    return colored(x, no_color=not can, force_color=can, **kw)

  def fatal(self, msg: str, nl: bool = True, typ: Type[FatalError] = FatalError) -> NoReturn:
    self.stderr(self._format_msg(msg, 'error', sys.stderr), nl=nl)
    raise typ(msg)

  def error(self, msg: str, nl: bool = True) -> None:
    if self.level <= self.ERROR:
      self.stderr(self._format_msg(msg, 'error', sys.stderr), nl=nl)

  def warn(self, msg: str, nl: bool = True) -> None:
    if self.level <= self.WARN:
      self.stdout(self._format_msg(msg, 'warn', sys.stdout), nl=nl)

  def debug(self, msg: str, nl: bool = True) -> None:
    if self.level <= self.DEBUG:
      self.stderr(self._format_msg(msg, 'debug', sys.stderr), nl=nl)

  def success(self, msg: str, nl: bool = True) -> None:
    self.stdout(self._format_msg(msg, 'success', sys.stdout), nl=nl)

  def stdout(self, msg: str, nl: bool = True) -> None:
    self._write(sys.stdout, msg, nl=nl)

  def stderr(self, msg: str, nl: bool = True) -> None:
    self._write(sys.stderr, msg, nl=nl)

  def _write(self, f: TextIO, msg: str, nl: bool = True) -> None:
    f.write(msg)
    if nl:
      f.write('\n')
    f.flush()

  def _format_msg(self, msg: str, flagtyp: str, f: TextIO) -> str:
    if flagtyp == 'error':
      return self.colored(f'Error: {msg}', f, color='red')
    elif flagtyp == 'warn':
      return self.colored(f'Warning: {msg}', f, color='yellow')
    elif flagtyp == 'success':
      return self.colored(f'✅ {msg}', f, color='green')
    elif flagtyp == 'debug':
      return self.colored(msg, f, color='dark_grey')
    assert False, f'invalid type of message: {flagtyp}'

  # termcolor 2.4 compatible color capability checker, applied to the stream we are about to write
  def _can_do_colour(self, f: TextIO) -> bool:
    from io import UnsupportedOperation
    from os import environ, isatty

    if "ANSI_COLORS_DISABLED" in environ:
      return False
    if "NO_COLOR" in environ:
      return False
    if "FORCE_COLOR" in environ:
      return True

    if environ.get("TERM") == "dumb":
      return False
    if not hasattr(f, "fileno"):
      return False

    try:
      return isatty(f.fileno())
    except UnsupportedOperation:
      return f.isatty()

ui = UI()
