from __future__ import annotations
from typing import TYPE_CHECKING

from functools import cache
import os

if TYPE_CHECKING:
  pass

KEYSTORE_FILE_NAME = 'upload-keystore.jks'
KEY_PROPERTIES_FILE_NAME = 'key.properties'

@cache
def get_keytool_path() -> str:
  explicit = os.environ.get('JKSB_KEYTOOL')
  if explicit:
    return explicit
  java_home = os.environ.get('JAVA_HOME')
  if java_home:
    return os.path.join(java_home, 'bin', 'keytool')
  return 'keytool'

@cache
def is_debugging() -> bool:
  return bool(os.environ.get('JKSB_DEBUG'))
