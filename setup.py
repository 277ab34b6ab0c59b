from setuptools import setup, find_packages
import unittest
import codecs

def test_suite():
  test_loader = unittest.TestLoader()
  test_suite = test_loader.discover("tests", pattern="test_*.py")

  return test_suite


exec(open('cli_tooling/version_info.py').read())

setup(
  name="cli_tooling",
  version=__version__,
  description="Small command line tools reading their values from arguments or piped standard input",
  long_description=codecs.open("README.md", encoding="utf-8").read(),
  long_description_content_type="text/markdown",
  test_suite="setup.test_suite",
  classifiers=[
  "Intended Audience :: Developers",
  "Environment :: Console",
  "Topic :: Utilities",
  "Programming Language :: Python :: 3",
  ],
  packages=find_packages(exclude=["tests"]),
  entry_points={
    "console_scripts": [
      "to-lower=cli_tooling.tools_main:to_lower_main",
      "to-upper=cli_tooling.tools_main:to_upper_main",
      "to-hex=cli_tooling.tools_main:to_hex_main",
      "to-dec=cli_tooling.tools_main:to_dec_main",
      "to-base64=cli_tooling.tools_main:to_base64_main",
      "to-ascii=cli_tooling.tools_main:to_ascii_main",
      "stats=cli_tooling.tools_main:stats_main",
      "skip=cli_tooling.tools_main:skip_main",
    ],
  },
  install_requires=[
    "numpy",
  ],
  extras_require={
    "test": ["pytest"],
  },
  include_package_data=True,
)
