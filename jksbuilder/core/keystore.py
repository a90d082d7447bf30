from __future__ import annotations
from typing import TYPE_CHECKING, NamedTuple

import os

from jksbuilder.core.exc import InvalidReplaceValueError
from jksbuilder.core.tools import invoke_sync, masked
from jksbuilder.core.ui import ui

if TYPE_CHECKING:
  from typing import List, Optional
  from jksbuilder.core.config import BuildConfig
  from jksbuilder.core.tools import ProcessResult

KEY_ALIAS = 'app'

class DistinguishedName(NamedTuple):
  cn: str = ''
  ou: str = ''
  o: str = ''
  l: str = ''
  st: str = ''
  c: str = ''

  @classmethod
  def from_config(cls, config: BuildConfig) -> DistinguishedName:
    return cls(cn=config.cn, ou=config.ou, o=config.org, l=config.location, st=config.state, c=config.country)

  def render(self) -> str:
    # empty fields still render as KEY=
    return f'CN={self.cn}, OU={self.ou}, O={self.o}, L={self.l}, ST={self.st}, C={self.c}'

class OverwriteGuard:
  _path: str

  def __init__(self, path: str) -> None:
    self._path = path

  def resolve(self, replace: str) -> bool:
    """Returns True when the run may go on to generate the keystore."""
    if not os.path.exists(self._path):
      return True
    decision = replace.lower()
    if decision in ('y', 'yes'):
      ui.success('Replacing the existing keystore...')
      try:
        os.remove(self._path)
      except OSError as e:
        ui.fatal(f'Cannot remove existing keystore: {e}')
      return True
    elif decision in ('n', 'no'):
      ui.success('Exiting without replacing the keystore.')
      return False
    else:
      ui.fatal("Invalid --replace argument. Use 'y' to replace or 'n' to exit.", typ=InvalidReplaceValueError)

class KeystoreGenerator:
  KEYALG = 'RSA'
  KEYSIZE = 2048
  VALIDITY_DAYS = 10000

  _path: str
  _keytool: str

  def __init__(self, path: str, keytool: Optional[str] = None) -> None:
    from jksbuilder.core.env import get_keytool_path
    self._path = path
    self._keytool = keytool if keytool is not None else get_keytool_path()

  def command(self, config: BuildConfig) -> List[str]:
    return [
      self._keytool, '-genkey', '-v',
      '-keystore', self._path,
      '-keyalg', self.KEYALG,
      '-keysize', str(self.KEYSIZE),
      '-validity', str(self.VALIDITY_DAYS),
      '-alias', KEY_ALIAS,
      '-dname', DistinguishedName.from_config(config).render(),
      '-storepass', config.store_pass,
      '-keypass', config.key_pass,
    ]

  def generate(self, config: BuildConfig) -> ProcessResult:
    from subprocess import CalledProcessError
    cmdline = self.command(config)
    ui.debug('invoking: {}'.format(masked(cmdline, (config.store_pass, config.key_pass))))
    try:
      result = invoke_sync(cmdline)
    except FileNotFoundError:
      ui.fatal(f'keytool not found: {self._keytool}')
    except CalledProcessError as e:
      if e.output:
        ui.stderr(e.output, nl=False)
      ui.fatal('Failed to generate keystore.')

    if ui.is_debugging:
      ui.debug(result.output, nl=False)
    if not os.path.exists(self._path):
      ui.fatal(f'keytool did not produce {self._path}')
    ui.success('Keystore generated successfully!')
    return result
