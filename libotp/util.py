# -*- coding: utf-8 -*-
"""
# One-time password generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import getpass
import os
import sys

__all__ = [
	"str2bool",
	"osIsPosix",
	"osIsLinux",
	"readSecret",
]

osIsPosix = os.name == "posix"
osIsLinux = osIsPosix and "linux" in sys.platform.lower()

def str2bool(string, default=False):
	s = string.lower().strip()
	if not s:
		return default
	if s in ("true", "yes", "on", "1"):
		return True
	if s in ("false", "no", "off", "0"):
		return False
	try:
		return bool(int(s))
	except ValueError:
		return default

def _do_getpass(prompt):
	if str2bool(os.getenv("LIBOTP_RAWGETPASS", "")):
		return input(prompt)
	else:
		return getpass.getpass(prompt)

def readSecret(prompt):
	"""Read a secret from the terminal without echo.
	Returns None, if the user aborted.
	"""
	try:
		while True:
			secret = _do_getpass(prompt + ": ").strip()
			if secret:
				return secret
	except (EOFError, KeyboardInterrupt) as e:
		print("", file=sys.stderr)
		return None
	except (getpass.GetPassWarning) as e:
		print(str(e), file=sys.stderr)
		return None
