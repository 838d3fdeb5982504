# -*- coding: utf-8 -*-
"""
# HMAC and random number wrapper
# Copyright (c) 2023-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.config import normalizeHmacAlgorithm
from libotp.exception import *

import os
import sys

__all__ = [
	"CryptoLib",
]

class CryptoLib:
	"""Abstraction layer for the HMAC and
	secure random number implementations.
	"""

	DIGEST_SIZES = {
		"SHA1"		: 160 // 8,
		"SHA256"	: 256 // 8,
		"SHA512"	: 512 // 8,
	}

	__singleton = None
	DEBUG = False

	@classmethod
	def get(cls):
		"""Get the CryptoLib singleton.
		"""
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	@classmethod
	def reset(cls):
		"""Drop the singleton.
		The next get() selects the implementation again.
		"""
		cls.__singleton = None

	def __init__(self):
		self.__cryptodome = None
		self.__hashlib = None

		cryptolib = os.getenv("LIBOTP_CRYPTOLIB", "").lower().strip()

		if cryptolib in ("", "cryptodome", "pycryptodomex"):
			# Try to use Cryptodome
			try:
				import Cryptodome
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				import Cryptodome.Hash.SHA256
				import Cryptodome.Hash.SHA512
				import Cryptodome.Random
				self.__cryptodome = Cryptodome
				self.__debug("Using Cryptodome.")
				return
			except ImportError as e:
				pass

		if cryptolib == "hashlib":
			# Use the Python standard library,
			# but only if explicitly selected.
			import hashlib
			import hmac
			import secrets
			self.__hashlib = (hashlib, hmac, secrets)
			self.__debug("Using hashlib.")
			return

		msg = "Python module import error."
		if cryptolib == "":
			msg += "\n'pycryptodomex' is not installed."
		else:
			msg += "\n'LIBOTP_CRYPTOLIB=%s' is not supported or not installed." % cryptolib
		raise OtpError(msg)

	@classmethod
	def __debug(cls, message):
		if cls.DEBUG:
			print("CryptoLib: %s" % message, file=sys.stderr)

	@property
	def name(self):
		"""The name of the selected implementation.
		"""
		if self.__cryptodome is not None:
			return "cryptodome"
		return "hashlib"

	def digestSize(self, hmacAlgorithm):
		"""Get the HMAC digest size, in bytes.
		"""
		return self.DIGEST_SIZES[normalizeHmacAlgorithm(hmacAlgorithm)]

	def hmac(self, hmacAlgorithm, key, data):
		"""Calculate a HMAC.
		hmacAlgorithm: The name of the hash algorithm: SHA1, SHA256 or SHA512.
		key: The HMAC key bytes.
		data: The message bytes.
		Returns the digest bytes.
		"""
		hmacAlgorithm = normalizeHmacAlgorithm(hmacAlgorithm)
		try:
			if self.__cryptodome is not None:
				# Use Cryptodome
				digestmod = {
					"SHA1"		: self.__cryptodome.Hash.SHA1,
					"SHA256"	: self.__cryptodome.Hash.SHA256,
					"SHA512"	: self.__cryptodome.Hash.SHA512,
				}[hmacAlgorithm]
				h = self.__cryptodome.Hash.HMAC.new(key=key,
								     msg=data,
								     digestmod=digestmod)
				return h.digest()

			if self.__hashlib is not None:
				# Use hashlib
				hashlib, hmac, secrets = self.__hashlib
				digestmod = {
					"SHA1"		: hashlib.sha1,
					"SHA256"	: hashlib.sha256,
					"SHA512"	: hashlib.sha512,
				}[hmacAlgorithm]
				return hmac.new(key, data, digestmod).digest()

		except (KeyError, ValueError) as e:
			raise UnsupportedDigest("HMAC-%s is not available: %s" % (
						hmacAlgorithm, str(e)))
		except Exception as e:
			raise OtpError("HMAC error: %s: %s" % (type(e), str(e)))
		raise OtpError("HMAC not implemented.")

	def randomBytes(self, count):
		"""Get cryptographically secure random bytes.
		"""
		if not isinstance(count, int) or count < 1:
			raise OtpError("Invalid number of random bytes.")
		try:
			if self.__cryptodome is not None:
				return self.__cryptodome.Random.get_random_bytes(count)
			if self.__hashlib is not None:
				hashlib, hmac, secrets = self.__hashlib
				return secrets.token_bytes(count)
		except Exception as e:
			raise OtpError("Random error: %s: %s" % (type(e), str(e)))
		raise OtpError("Random not implemented.")

	@classmethod
	def quickSelfTest(cls):
		inst = cls.get()
		h = inst.hmac("SHA1", key=(b"\x0B" * 20), data=b"Hi There")
		if h != bytes.fromhex("b617318655057264e28bc0b6fb378c8ef146be00"):
			raise OtpError("HMAC-SHA1: Quick self test failed.")
		if len(inst.randomBytes(16)) != 16:
			raise OtpError("Random: Quick self test failed.")
