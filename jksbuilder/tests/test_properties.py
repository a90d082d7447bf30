import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from hypothesis import given
from hypothesis.strategies import characters, text

from jksbuilder.core.config import BuildConfig
from jksbuilder.core.properties import PropertiesWriter

class PropertiesWriterTest(unittest.TestCase):
  def test_render(self):
    writer = PropertiesWriter('key.properties', 'upload-keystore.jks')
    self.assertEqual(
      writer.render(BuildConfig('secret1', 'secret2', 'y')),
      'storePassword=secret1\nkeyPassword=secret2\nkeyAlias=app\nstoreFile=../app/upload-keystore.jks\n',
    )

  @given(text(characters(exclude_categories=('Cs', 'Cc', 'Zl', 'Zp')), min_size=6))
  def test_render_passes_values_verbatim(self, pw):
    rendered = PropertiesWriter('key.properties', 'upload-keystore.jks').render(BuildConfig(pw, pw, 'y'))
    self.assertEqual(rendered.splitlines()[:2], [f'storePassword={pw}', f'keyPassword={pw}'])

  def test_write_replaces_previous_file(self):
    with tempfile.TemporaryDirectory() as d:
      path = os.path.join(d, 'key.properties')
      with open(path, 'w') as f:
        f.write('stale=1\n')
      with redirect_stdout(io.StringIO()) as out:
        PropertiesWriter(path, 'upload-keystore.jks').write(BuildConfig('secret1', 'secret2', 'y'))
      with open(path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()
      self.assertEqual(len(lines), 4)
      self.assertNotIn('stale=1', lines)
      self.assertIn('key.properties file created successfully!', out.getvalue())

if __name__ == '__main__':
  unittest.main()
