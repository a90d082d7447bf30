from __future__ import annotations
from typing import TYPE_CHECKING

import os

from jksbuilder.core.ui import ui

if TYPE_CHECKING:
  from typing import Optional
  from jksbuilder.core.config import BuildConfig

class BuildMode:
  _config: BuildConfig
  _keystore_path: str
  _properties_path: str
  _keytool: Optional[str]

  def __init__(self, config: BuildConfig, workdir: str = os.curdir, keytool: Optional[str] = None) -> None:
    from jksbuilder.core.env import KEYSTORE_FILE_NAME, KEY_PROPERTIES_FILE_NAME
    self._config = config
    self._keystore_path = os.path.join(workdir, KEYSTORE_FILE_NAME)
    self._properties_path = os.path.join(workdir, KEY_PROPERTIES_FILE_NAME)
    self._keytool = keytool

  def build(self) -> int:
    from jksbuilder.core.cleanup import artifacts_removed_on_failure
    from jksbuilder.core.keystore import KeystoreGenerator, OverwriteGuard
    from jksbuilder.core.properties import PropertiesWriter

    if not OverwriteGuard(self._keystore_path).resolve(self._config.replace):
      return 0

    self._show_config()

    with artifacts_removed_on_failure(self._keystore_path, self._properties_path):
      KeystoreGenerator(self._keystore_path, keytool=self._keytool).generate(self._config)
      PropertiesWriter(self._properties_path, os.path.basename(self._keystore_path)).write(self._config)
    return 0

  def _show_config(self) -> None:
    ui.success('Configuration:')
    for name, value in self._config.describe():
      ui.success(f'{name}: {value}')
