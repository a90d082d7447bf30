from __future__ import annotations
from typing import TYPE_CHECKING

import os

from jksbuilder.core.keystore import KEY_ALIAS
from jksbuilder.core.ui import ui

if TYPE_CHECKING:
  from jksbuilder.core.config import BuildConfig

class PropertiesWriter:
  """Writes the key.properties file consumed by the Gradle signing config."""
  _path: str
  _keystore_file_name: str

  def __init__(self, path: str, keystore_file_name: str) -> None:
    self._path = path
    self._keystore_file_name = keystore_file_name

  def store_file(self) -> str:
    return f'../app/{self._keystore_file_name}'

  def render(self, config: BuildConfig) -> str:
    from importlib.resources import files, as_file
    from jinja2 import Environment, FileSystemLoader
    with as_file(files('jksbuilder')/'libs'/'template') as path:
      env = Environment(loader=FileSystemLoader(path), autoescape=False, keep_trailing_newline=True)
      return env.get_template('key.properties.j2').render(
        store_pass=config.store_pass,
        key_pass=config.key_pass,
        alias=KEY_ALIAS,
        store_file=self.store_file(),
      )

  def write(self, config: BuildConfig) -> None:
    ui.success(f'Generating {os.path.basename(self._path)} file...')
    content = self.render(config)
    with open(self._path, 'w', encoding='utf-8') as f:
      f.write(content)

    if os.path.exists(self._path):
      ui.success(f'{os.path.basename(self._path)} file created successfully!')
    else:
      ui.fatal(f'Failed to create {os.path.basename(self._path)} file.')
