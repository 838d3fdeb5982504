# -*- coding: utf-8 -*-
"""
# One-time password generator
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"OtpError",
	"InvalidConfiguration",
	"UnsupportedDigest",
	"InvalidWindowSize",
	"InvalidSecret",
	"InvalidSecretEncoding",
]

class OtpError(Exception):
	"""Main HOTP/TOTP exception.
	"""

class InvalidConfiguration(OtpError):
	"""Invalid number of digits or invalid time step.
	"""

class UnsupportedDigest(OtpError):
	"""The HMAC hash algorithm is unknown or not available.
	"""

class InvalidWindowSize(OtpError):
	"""The validation window size is negative or not an integer.
	"""

class InvalidSecret(OtpError):
	"""The shared secret is empty or not a byte string.
	"""

class InvalidSecretEncoding(InvalidSecret):
	"""The encoded secret text could not be decoded.
	"""
