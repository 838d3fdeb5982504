# -*- coding: utf-8 -*-
"""
# Secret text codecs
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import *

from base64 import b32decode, b32encode
import binascii

__all__ = [
	"Base32Codec",
	"getCodec",
]

class Base32Codec:
	"""RFC 4648 Base32 with '=' padding.
	"""

	name = "base32"

	@staticmethod
	def encode(data):
		"""Encode raw bytes to Base32 text.
		"""
		if not isinstance(data, (bytes, bytearray)):
			raise OtpError("Base32: Can only encode bytes.")
		return b32encode(bytes(data)).decode("ASCII")

	@staticmethod
	def decode(text):
		"""Decode Base32 text to raw bytes.
		Lower case letters are accepted.
		Raises InvalidSecretEncoding on illegal characters or bad padding.
		"""
		if not isinstance(text, str):
			raise InvalidSecretEncoding("Base32: Secret is not a string.")
		try:
			return b32decode(text.encode("ASCII"), casefold=True)
		except (binascii.Error, UnicodeError):
			raise InvalidSecretEncoding("Invalid Base32 secret.")

_codecs = {
	Base32Codec.name : Base32Codec,
}

def getCodec(name):
	"""Get a codec by its name.
	"""
	try:
		return _codecs[name.lower().strip()]
	except (KeyError, AttributeError):
		raise OtpError("Unknown codec: %s" % name)
