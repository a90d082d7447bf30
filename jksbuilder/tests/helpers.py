from __future__ import annotations
from typing import TYPE_CHECKING

import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

if TYPE_CHECKING:
  from typing import Any, Dict, List

FAKE_KEYTOOL = '''#!{python}
import json, os, sys
args = sys.argv[1:]
with open({log!r}, 'a') as f:
  f.write(json.dumps(dict(
    args=args,
    keystore_present=os.path.exists('upload-keystore.jks'),
    properties_present=os.path.exists('key.properties'),
  )) + '\\n')
if {create!r}:
  with open(args[args.index('-keystore') + 1], 'wb') as f:
    f.write(b'\\xfe\\xed\\xfe\\xed')
print('fake keytool: exiting with {code}')
sys.exit({code})
'''

def make_fake_keytool(dirpath: str, code: int = 0, create: bool = True) -> str:
  path = os.path.join(dirpath, 'keytool')
  with open(path, 'w') as f:
    f.write(FAKE_KEYTOOL.format(python=sys.executable, log=keytool_log(dirpath), create=create, code=code))
  os.chmod(path, 0o755)
  return path

def keytool_log(dirpath: str) -> str:
  return os.path.join(dirpath, 'keytool.log')

def read_invocations(dirpath: str) -> List[Dict[str, Any]]:
  try:
    with open(keytool_log(dirpath), 'r') as f:
      return [json.loads(l) for l in f]
  except FileNotFoundError:
    return []

class WorkdirTestCase(unittest.TestCase):
  """Runs each test inside an empty working directory with a fake keytool."""
  bindir: str
  workdir: str
  stdout: str
  stderr: str

  def setUp(self) -> None:
    from jksbuilder.core.env import get_keytool_path
    tmp = tempfile.TemporaryDirectory()
    self.addCleanup(tmp.cleanup)
    self.bindir = os.path.join(tmp.name, 'bin')
    self.workdir = os.path.join(tmp.name, 'work')
    os.makedirs(self.bindir)
    os.makedirs(self.workdir)

    cwd = os.getcwd()
    os.chdir(self.workdir)
    self.addCleanup(os.chdir, cwd)

    patcher = mock.patch.dict(os.environ, {'JKSB_KEYTOOL': os.path.join(self.bindir, 'keytool')})
    patcher.start()
    self.addCleanup(patcher.stop)
    get_keytool_path.cache_clear()
    self.addCleanup(get_keytool_path.cache_clear)

  def use_keytool(self, code: int = 0, create: bool = True) -> str:
    return make_fake_keytool(self.bindir, code=code, create=create)

  def invocations(self) -> List[Dict[str, Any]]:
    return read_invocations(self.bindir)

  def path(self, name: str) -> str:
    return os.path.join(self.workdir, name)

  def run_shell(self, *argv: str) -> int:
    from jksbuilder.app.shell import Shell
    with redirect_stdout(io.StringIO()) as out, redirect_stderr(io.StringIO()) as err:
      code = Shell().invoke(list(argv))
    self.stdout, self.stderr = out.getvalue(), err.getvalue()
    return code
