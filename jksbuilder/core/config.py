from __future__ import annotations
from typing import TYPE_CHECKING, NamedTuple

from jksbuilder.core.exc import UsageError
from jksbuilder.core.ui import ui

if TYPE_CHECKING:
  from typing import Any, Mapping, Tuple

MIN_PASSWORD_LENGTH = 6

# (option name, attribute, minimum length)
REQUIRED_ARGS: Tuple[Tuple[str, str, int], ...] = (
  ('store-pass', 'store_pass', MIN_PASSWORD_LENGTH),
  ('key-pass', 'key_pass', MIN_PASSWORD_LENGTH),
  ('replace', 'replace', 1),
)

OPTIONAL_ARGS: Tuple[Tuple[str, str], ...] = (
  ('cn', 'cn'),
  ('ou', 'ou'),
  ('org', 'org'),
  ('location', 'location'),
  ('state', 'state'),
  ('country', 'country'),
)

class BuildConfig(NamedTuple):
  store_pass: str
  key_pass: str
  replace: str
  cn: str = ''
  ou: str = ''
  org: str = ''
  location: str = ''
  state: str = ''
  country: str = ''

  @classmethod
  def from_args(cls, args: Mapping[str, Any]) -> BuildConfig:
    """Validate parsed options and freeze them.

    Required options are checked in declaration order and the first offender
    raises ``UsageError``. Missing optional options only warn and become
    empty strings.
    """
    values = dict()
    for name, attr, min_length in REQUIRED_ARGS:
      values[attr] = validate_required_arg(name, args.get(attr), min_length)
    for name, attr in OPTIONAL_ARGS:
      values[attr] = validate_optional_arg(name, args.get(attr))
    return cls(**values)

  def describe(self) -> Tuple[Tuple[str, str], ...]:
    return (
      ('store-pass', '[hidden]'),
      ('key-pass', '[hidden]'),
    ) + tuple((name, getattr(self, attr)) for name, attr in OPTIONAL_ARGS)

def validate_required_arg(name: str, value: Any, min_length: int) -> str:
  if not value:
    ui.fatal(f'--{name} is required', typ=UsageError)
  if len(value) < min_length:
    ui.fatal(f'--{name} must be at least {min_length} characters', typ=UsageError)
  return str(value)

def validate_optional_arg(name: str, value: Any) -> str:
  if not value:
    ui.warn(f'--{name} is not provided. Using default/empty value.')
    return ''
  return str(value)
