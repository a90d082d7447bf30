from __future__ import annotations
from typing import TYPE_CHECKING
import sys
from argparse import ArgumentParser

from jksbuilder.core.exc import FatalError, UsageError
from jksbuilder.core.ui import ui

if TYPE_CHECKING:
  from typing import List, Optional, NoReturn, Sequence
  from jksbuilder.core.config import BuildConfig

VALUE_OPTIONS = ('--store-pass', '--key-pass', '--replace', '--cn', '--ou', '--org', '--location', '--state', '--country')

class _Parser(ArgumentParser):
  def error(self, message: str) -> NoReturn:
    ui.fatal(message, typ=UsageError)

class Shell:
  prog = 'jksbuilder'

  @classmethod
  def _usage(cls) -> str:
    #   ..............................................................................80
    return (
      f'Usage: {cls.prog} --store-pass PASSWORD --key-pass PASSWORD --replace y/n [OPTIONS]\n'
       '\n' # noqa: E131
       'Required:\n'
       '    --store-pass PASSWORD   Keystore password (min 6 chars)\n'
       '    --key-pass PASSWORD     Key password (min 6 chars)\n'
       '    --replace y/n           Replace existing keystore? (y/n)\n'
       '\n'
       'Optional:\n'
       '    --cn TEXT               Common Name\n'
       '    --ou TEXT               Organizational Unit\n'
       '    --org TEXT              Organization\n'
       '    --location TEXT         City/Location\n'
       '    --state TEXT            State/Province\n'
       '    --country TEXT          Country Code\n'
       '    --help                  Show this help message\n'
       '\n'
       'Example:\n'
      f'    {cls.prog} --store-pass 123456 --key-pass 123456 --replace y \\\n'
       '               --cn "App Name" --ou "Unit" --org "Company" \\\n'
       '               --location "City" --state "State" --country "US"\n'
    )

  def _parser(self) -> ArgumentParser:
    parser = _Parser(prog=self.prog, add_help=False, allow_abbrev=False)
    parser.add_argument('--help', action='store_true')
    for opt in VALUE_OPTIONS:
      parser.add_argument(opt, dest=opt[2:].replace('-', '_'))
    return parser

  @staticmethod
  def _paired(argv: Sequence[str]) -> List[str]:
    # the token after a value-taking option is always its value, even when it starts with a dash
    o: List[str] = []
    it = iter(argv)
    for x in it:
      if x in VALUE_OPTIONS:
        v = next(it, None)
        o.append(x if v is None else f'{x}={v}')
      else:
        o.append(x)
    return o

  def parse(self, argv: Sequence[str]) -> Optional[BuildConfig]:
    """Returns None when help was requested."""
    from jksbuilder.core.config import BuildConfig

    args, extras = self._parser().parse_known_args(self._paired(argv))
    for x in extras:
      if x.startswith('-'):
        ui.fatal(f'Unknown option {x}', typ=UsageError)
      else:
        ui.fatal(f'Invalid argument {x}', typ=UsageError)
    if args.help:
      return None
    return BuildConfig.from_args(vars(args))

  def invoke(self, argv: Optional[List[str]] = None) -> int:
    from jksbuilder.core.env import is_debugging
    from jksbuilder.app.build import BuildMode

    if is_debugging():
      ui.set_level(ui.DEBUG)

    try:
      config = self.parse(sys.argv[1:] if argv is None else argv)
    except UsageError:
      ui.stdout(self._usage(), nl=False)
      return 1

    if config is None:
      ui.stdout(self._usage(), nl=False)
      return 1

    try:
      return BuildMode(config).build()
    except FatalError:
      return 1
    except OSError as e:
      ui.error(str(e))
      return 1

def entry() -> None:
  try:
    sys.exit(Shell().invoke())
  except FatalError:
    sys.exit(1)
