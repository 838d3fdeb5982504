from unittest import TestCase
import os

__all__ = [
	"TestCase",
	"initTest",
	"selectCryptoLib",
	"RFC4226_SECRET",
	"RFC6238_SECRETS",
]

RFC4226_SECRET = b"12345678901234567890"

RFC6238_SECRETS = {
	"SHA1"		: b"12345678901234567890",
	"SHA256"	: b"12345678901234567890123456789012",
	"SHA512"	: b"1234567890123456789012345678901234567890123456789012345678901234",
}

def initTest(testCaseFile):
	from os.path import basename
	print("(test case file: %s)" % basename(testCaseFile))

def selectCryptoLib(name):
	"""Select the CryptoLib implementation for the following tests.
	Returns the previous LIBOTP_CRYPTOLIB value.
	"""
	from libotp.cryptolib import CryptoLib
	old = os.environ.get("LIBOTP_CRYPTOLIB", None)
	if name is None:
		os.environ.pop("LIBOTP_CRYPTOLIB", None)
	else:
		os.environ["LIBOTP_CRYPTOLIB"] = name
	CryptoLib.reset()
	return old
