# -*- coding: utf-8 -*-
"""
# HOTP/TOTP configuration
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import *

import enum
from dataclasses import dataclass

__all__ = [
	"HMAC_ALGORITHMS",
	"MAX_CODE_DIGITS",
	"OtpConfig",
	"TimeUnit",
	"normalizeHmacAlgorithm",
]

HMAC_ALGORITHMS = ("SHA1", "SHA256", "SHA512")

# The truncated HOTP value is a 31 bit integer.
# It never has more than 10 decimal digits.
MAX_CODE_DIGITS = 10

class TimeUnit(enum.Enum):
	"""Time unit of the TOTP time step.
	The value is the number of nanoseconds per unit.
	"""
	NANOSECONDS	= 1
	MICROSECONDS	= 1000
	MILLISECONDS	= 1000 * 1000
	SECONDS		= 1000 * 1000 * 1000
	MINUTES		= 60 * 1000 * 1000 * 1000
	HOURS		= 60 * 60 * 1000 * 1000 * 1000
	DAYS		= 24 * 60 * 60 * 1000 * 1000 * 1000

	def toMillis(self, duration):
		"""Convert a duration in this unit to milliseconds.
		Fractions of a millisecond are truncated.
		"""
		return (duration * self.value) // TimeUnit.MILLISECONDS.value

def normalizeHmacAlgorithm(hmacHash):
	"""Convert a hash algorithm name like "sha-256" or "HmacSHA256"
	to its canonical name "SHA256".
	Raises UnsupportedDigest, if the name is not known.
	"""
	if not isinstance(hmacHash, str):
		raise UnsupportedDigest("Invalid HMAC hash type.")
	name = hmacHash.replace("-", "")
	name = name.replace("_", "")
	name = name.replace(" ", "")
	name = name.upper().strip()
	if name.startswith("HMAC"):
		name = name[4:]
	if name not in HMAC_ALGORITHMS:
		raise UnsupportedDigest("Invalid HMAC hash type: %s" % hmacHash)
	return name

def _isInt(value):
	return isinstance(value, int) and not isinstance(value, bool)

@dataclass(frozen=True)
class OtpConfig:
	"""HOTP/TOTP parameter set.
	codeDigits: The number of digits of a generated code. 1 to 10.
	hmacAlgorithm: The name of the HMAC hash algorithm.
	timeStep: The TOTP time step duration. Zero disables time stepping.
	timeStepUnit: The TimeUnit of timeStep.
	"""
	codeDigits	: int = 6
	hmacAlgorithm	: str = "SHA1"
	timeStep	: int = 30
	timeStepUnit	: TimeUnit = TimeUnit.SECONDS

	def __post_init__(self):
		if (not _isInt(self.codeDigits) or
		    not (1 <= self.codeDigits <= MAX_CODE_DIGITS)):
			raise InvalidConfiguration("Invalid number of digits.")
		if not _isInt(self.timeStep) or self.timeStep < 0:
			raise InvalidConfiguration("Invalid time step.")
		if not isinstance(self.timeStepUnit, TimeUnit):
			raise InvalidConfiguration("Invalid time step unit.")
		if self.timeStep > 0 and self.timeStepMillis == 0:
			raise InvalidConfiguration("Time step is shorter than one millisecond.")
		object.__setattr__(self, "hmacAlgorithm",
				   normalizeHmacAlgorithm(self.hmacAlgorithm))

	@property
	def timeStepMillis(self):
		"""The time step in milliseconds.
		"""
		return self.timeStepUnit.toMillis(self.timeStep)
