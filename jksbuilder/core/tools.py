from __future__ import annotations
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
  from typing import Any, List, Sequence, Iterable

class ProcessResult(NamedTuple):
  args: List[str]
  returncode: int
  output: str

def _check_return_code(p: Any, args: Any, out: Any, err: Any) -> None:
  if p.returncode:
    from subprocess import CalledProcessError
    raise CalledProcessError(p.returncode, args, out, err)

def invoke_sync(args: Sequence[str]) -> ProcessResult:
  """Run a child process to completion, capturing stdout and stderr together.

  Raises ``CalledProcessError`` on a non-zero exit and ``FileNotFoundError``
  when the executable cannot be found.
  """
  from subprocess import PIPE, STDOUT, run
  argv = list(args)
  p = run(argv, stdout=PIPE, stderr=STDOUT, stdin=PIPE)
  out = p.stdout.decode('UTF-8', errors='replace')
  _check_return_code(p, argv, out, None)
  return ProcessResult(args=argv, returncode=p.returncode, output=out)

def masked(args: Sequence[str], secrets: Iterable[str]) -> str:
  import shlex
  hidden = {s for s in secrets if s}
  return ' '.join(('[hidden]' if a in hidden else shlex.quote(a)) for a in args)
