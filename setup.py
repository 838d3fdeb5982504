#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup
import sys
from pathlib import Path

basedir = Path(__file__).parent.absolute()
sys.path.insert(0, str(basedir))

from libotp import __version__

with open(basedir / "README.rst", "rb") as fd:
	readmeText = fd.read().decode("UTF-8")

setup(
	name		= "libotp-python",
	version		= __version__,
	description	= "HOTP/TOTP one-time password generator and validator",
	author		= "Michael Büsch",
	author_email	= "m@bues.ch",
	license		= "GPL-2.0-or-later",
	url		= "https://bues.ch/",
	python_requires = ">=3.7",
	install_requires = [
		"cffi",
		"pycryptodomex",
	],
	extras_require = {
		"test" : [ "pytest", ],
	},
	packages	= [ "libotp", ],
	scripts		= [ "otpgen", ],
	keywords	= "HOTP TOTP 2FA one-time password Google Authenticator",
	classifiers	= [
		"Development Status :: 5 - Production/Stable",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Intended Audience :: System Administrators",
		"Operating System :: OS Independent",
		"Programming Language :: Python :: 3",
		"Topic :: Security :: Cryptography",
	],
	long_description=readmeText,
	long_description_content_type="text/x-rst",
)

# vim: ts=8 sw=8 noexpandtab
