# -*- coding: utf-8 -*-
"""
# mlock support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.util import osIsLinux

import os
import platform

__all__ = [
	"MemLock",
]

class MemLock:
	"""Keeps the process memory (and the secrets in it)
	from being swapped to disk.
	"""

	__singleton = None

	@classmethod
	def get(cls):
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	def __init__(self):
		self.__ffi = None
		self.__libc = None
		self.__importError = ""

		if not osIsLinux:
			return # Unsupported OS.
		try:
			from cffi import FFI
		except ImportError as e:
			self.__importError = ("Failed to import CFFI: %s\n"
					      "You might want to install CFFI by running: "
					      "pip3 install cffi" % str(e))
			return
		ffi = FFI()
		# Use getattr to avoid Cython cdef compile error.
		getattr(ffi, "cdef")("int mlockall(int flags);\n"
				     "int munlockall(void);")
		self.__libc = ffi.dlopen(None)
		self.__ffi = ffi

	@property
	def supported(self):
		return self.__libc is not None

	@staticmethod
	def __flags():
		if platform.machine().lower() in (
				"alpha",
				"ppc", "ppc64", "ppcle", "ppc64le",
				"sparc", "sparc64" ):
			return 0x2000, 0x4000
		return 0x1, 0x2

	def lockAll(self):
		"""Lock all current and all future memory.
		Returns an error message string or an empty string on success.
		"""
		if not self.supported:
			return self.__importError or \
			       "mlockall() is not supported on this operating system."
		MCL_CURRENT, MCL_FUTURE = self.__flags()
		ret = self.__libc.mlockall(MCL_CURRENT | MCL_FUTURE)
		return os.strerror(self.__ffi.errno) if ret else ""

	def unlockAll(self):
		"""Unlock all memory.
		Returns an error message string or an empty string on success.
		"""
		if not self.supported:
			return self.__importError or \
			       "munlockall() is not supported on this operating system."
		ret = self.__libc.munlockall()
		return os.strerror(self.__ffi.errno) if ret else ""
