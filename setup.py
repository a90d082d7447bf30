from setuptools import setup, find_packages

metadata = dict(
  name='jksbuilder',
  version='1.0.0',
  description='jksbuilder generates an Android upload keystore and its key.properties file.',
  classifiers=[
    "Topic :: Security",
    "Topic :: Software Development :: Build Tools",
    "Operating System :: Android",
    "Programming Language :: Java",
    "Programming Language :: Python :: 3",
  ],
  keywords='android java keystore keytool signing gradle',
)

README = open('README.rst').read()

setup(
  long_description=README,
  packages=find_packages(),
  package_data={'jksbuilder':['libs/template/*']},
  include_package_data=True,
  zip_safe=False,
  python_requires='>=3.9',
  install_requires=[
    "termcolor>=2.4",
    "jinja2",
  ],
  extras_require={
    'test':[
      "pytest",
      "hypothesis>=6.82",
    ],
  },
  setup_requires=[
    "wheel",
  ],
  entry_points = {'console_scripts':['jksbuilder = jksbuilder.app.shell:entry']},
  **metadata
)
