# -*- coding: utf-8 -*-
"""
# HOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.config import *
from libotp.cryptolib import *
from libotp.exception import *

__all__ = [
	"HotpGenerator",
	"MAX_COUNTER",
]

MAX_COUNTER = (2 ** 64) - 1

class HotpGenerator:
	"""HOTP - An HMAC-Based One-Time Password Algorithm (RFC 4226).
	secret: The shared secret as raw bytes.
	config: The OtpConfig. The time step is not used here.
	"""

	def __init__(self, secret, config=None):
		if not isinstance(secret, (bytes, bytearray)):
			raise InvalidSecret("The secret must be raw bytes.")
		if len(secret) < 1:
			raise InvalidSecret("The secret is empty.")
		if config is None:
			config = OtpConfig()
		if not isinstance(config, OtpConfig):
			raise InvalidConfiguration("Invalid configuration object.")
		self.__secret = bytes(secret)
		self.__config = config
		self.__crypto = CryptoLib.get()
		# Raises UnsupportedDigest early.
		self.__digestSize = self.__crypto.digestSize(config.hmacAlgorithm)
		self.__fmt = "%0" + str(config.codeDigits) + "d"

	@property
	def config(self):
		return self.__config

	def generate(self, counter):
		"""Calculate the HOTP code for a counter.
		counter: The HOTP counter integer. 0 to 2**64-1.
		Returns the code string with exactly codeDigits digits.
		"""
		if (not isinstance(counter, int) or
		    isinstance(counter, bool) or
		    not (0 <= counter <= MAX_COUNTER)):
			raise OtpError("Invalid counter.")

		counter = counter.to_bytes(length=8, byteorder="big", signed=False)
		h = bytearray(self.__crypto.hmac(self.__config.hmacAlgorithm,
						 key=self.__secret,
						 data=counter))
		if len(h) != self.__digestSize:
			raise UnsupportedDigest("HMAC returned an invalid digest size.")

		# Dynamic truncation
		offset = h[-1] & 0xF
		h[offset] &= 0x7F
		hSlice = int.from_bytes(h[offset:offset+4], byteorder="big", signed=False)
		otp = hSlice % (10 ** self.__config.codeDigits)
		return self.__fmt % otp
