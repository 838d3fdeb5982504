# -*- coding: utf-8 -*-
"""
# Google Authenticator compatible TOTP
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.codec import *
from libotp.config import *
from libotp.cryptolib import *
from libotp.exception import *
from libotp.totp import *

__all__ = [
	"GOOGLE_AUTHENTICATOR_CONFIG",
	"GoogleAuthenticator",
]

GOOGLE_AUTHENTICATOR_CONFIG = OtpConfig(codeDigits=6,
					hmacAlgorithm="SHA1",
					timeStep=30,
					timeStepUnit=TimeUnit.SECONDS)

class GoogleAuthenticator:
	"""TOTP with the parameters used by the Google Authenticator:
	HMAC-SHA1, 30 seconds time step and 6 digits.

	base32secret: The shared secret. It must already be Base32 encoded.
	windowSize: The default number of time slots before and after
	            the current one that isValid() accepts.
	"""

	CODEC = "base32"
	# Base32 expands 10 bytes to 16 characters without padding.
	RANDOM_SECRET_BYTES = 10

	def __init__(self, base32secret, windowSize=1):
		checkWindowSize(windowSize)
		secret = getCodec(self.CODEC).decode(base32secret)
		if not secret:
			raise InvalidSecretEncoding("The secret is empty.")
		self.__totp = TotpGenerator(secret, GOOGLE_AUTHENTICATOR_CONFIG)
		self.__windowSize = windowSize

	@property
	def config(self):
		return self.__totp.config

	@property
	def windowSize(self):
		return self.__windowSize

	def counter(self, timestamp=None):
		return self.__totp.counter(toTimestampMillis(timestamp))

	def timeslotStart(self, counter):
		return self.__totp.timeslotStart(counter)

	def timeRemaining(self, timestamp=None):
		"""Get the number of milliseconds until the next code.
		"""
		timestamp = toTimestampMillis(timestamp)
		counter = self.__totp.counter(timestamp)
		return self.__totp.timeslotStart(counter + 1) - timestamp

	def generate(self, timestamp=None):
		"""Generate the code for the timestamp.
		timestamp: Milliseconds or datetime. Defaults to the current time.
		"""
		return self.__totp.generate(toTimestampMillis(timestamp))

	def generateWindow(self, windowSize=None, timestamp=None):
		"""Generate the codes around the timestamp.
		windowSize defaults to the window size of this instance.
		"""
		if windowSize is None:
			windowSize = self.__windowSize
		return self.__totp.generateWindow(windowSize,
						  toTimestampMillis(timestamp))

	def isValid(self, code, timestamp=None, overrideWindowSize=None):
		"""Validate a code.
		code: The code string to check.
		timestamp: Milliseconds or datetime. Defaults to the current time.
		overrideWindowSize: Use this window size instead of the
		                    instance's window size. 0 means exact match.
		"""
		if overrideWindowSize is None:
			overrideWindowSize = self.__windowSize
		return self.__totp.isValid(code,
					   windowSize=overrideWindowSize,
					   timestamp=toTimestampMillis(timestamp))

	@classmethod
	def createRandomSecret(cls):
		"""Generate a new random secret as Base32 encoded string.
		"""
		secret = CryptoLib.get().randomBytes(cls.RANDOM_SECRET_BYTES)
		return getCodec(cls.CODEC).encode(secret)
