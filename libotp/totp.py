# -*- coding: utf-8 -*-
"""
# TOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.config import *
from libotp.exception import *
from libotp.hotp import *

import datetime
import hmac
import time

__all__ = [
	"TotpGenerator",
	"checkWindowSize",
	"currentTimeMillis",
	"toTimestampMillis",
]

def currentTimeMillis():
	"""Get the current Unix time in milliseconds.
	"""
	return time.time_ns() // 1000000

def toTimestampMillis(timestamp=None):
	"""Convert a timestamp to Unix time in milliseconds.
	timestamp: Milliseconds integer, datetime.datetime or None for 'now'.
	Naive datetime objects are interpreted as UTC.
	"""
	if timestamp is None:
		return currentTimeMillis()
	if isinstance(timestamp, datetime.datetime):
		if timestamp.tzinfo is None:
			timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
		epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
		timestamp = (timestamp - epoch) // datetime.timedelta(milliseconds=1)
	elif not isinstance(timestamp, int) or isinstance(timestamp, bool):
		raise OtpError("Invalid timestamp.")
	if timestamp < 0:
		raise OtpError("Invalid timestamp.")
	return timestamp

def checkWindowSize(windowSize):
	"""Raise InvalidWindowSize, if windowSize is not usable.
	"""
	if (not isinstance(windowSize, int) or
	    isinstance(windowSize, bool) or
	    windowSize < 0 or
	    (2 * windowSize) + 1 > MAX_COUNTER + 1):
		raise InvalidWindowSize("Invalid window size.")

class TotpGenerator:
	"""TOTP - Time-Based One-Time Password Algorithm (RFC 6238).
	secret: The shared secret as raw bytes.
	config: The OtpConfig.

	All timestamp parameters are Unix times in milliseconds
	or datetime.datetime objects. If a timestamp is not given,
	the current time is used.
	"""

	def __init__(self, secret, config=None):
		self.__hotp = HotpGenerator(secret, config)
		self.__config = self.__hotp.config

	@property
	def config(self):
		return self.__config

	def counter(self, timestamp=None):
		"""Calculate the time slot counter.
		This is the number of time steps which fit into the timestamp.
		A time step of zero always yields counter 0.
		"""
		timestamp = toTimestampMillis(timestamp)
		if self.__config.timeStep == 0:
			return 0
		return timestamp // self.__config.timeStepMillis

	def timeslotStart(self, counter):
		"""Calculate the start of a time slot in milliseconds.
		This is the reverse of counter().
		"""
		if not isinstance(counter, int) or counter < 0:
			raise OtpError("Invalid counter.")
		return counter * self.__config.timeStepMillis

	def generate(self, timestamp=None):
		"""Generate the TOTP code for the timestamp.
		"""
		return self.__hotp.generate(self.counter(timestamp))

	def generateWindow(self, windowSize=1, timestamp=None):
		"""Generate the codes of the time slots around the timestamp.
		Returns a list of 2*windowSize+1 codes in ascending counter order.
		The middle element is the code of the timestamp itself.
		"""
		checkWindowSize(windowSize)
		counter = self.counter(timestamp)
		return [ self.__hotp.generate((counter + i) & MAX_COUNTER)
			 for i in range(-windowSize, windowSize + 1) ]

	def isValid(self, code, windowSize=1, timestamp=None):
		"""Check whether code is one of the codes in the window
		around the timestamp. The whole window is always compared.
		"""
		window = self.generateWindow(windowSize, timestamp)
		if not isinstance(code, str):
			return False
		code = code.encode("UTF-8", "surrogatepass")
		valid = False
		for candidate in window:
			valid |= hmac.compare_digest(candidate.encode("UTF-8"), code)
		return valid
