# -*- coding: utf-8 -*-
"""
# otpauth:// key URI
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.codec import *
from libotp.exception import *
from libotp.googleauth import GOOGLE_AUTHENTICATOR_CONFIG

from urllib.parse import quote, urlencode

__all__ = [
	"buildKeyUri",
]

def buildKeyUri(base32secret, account, issuer=None, config=None, counter=None):
	"""Build a key URI for provisioning an authenticator app.
	See https://github.com/google/google-authenticator/wiki/Key-Uri-Format

	base32secret: The Base32 encoded shared secret.
	account: The account name.
	issuer: Optional; the name of the service.
	config: Optional OtpConfig. Parameters equal to the Google Authenticator
	        defaults are left out of the URI.
	counter: Optional; the initial counter. Builds a HOTP URI, if given.
	"""
	if config is None:
		config = GOOGLE_AUTHENTICATOR_CONFIG
	if not account:
		raise OtpError("Key URI: The account name is empty.")
	# Check the encoding. The URI omits the padding.
	getCodec("base32").decode(base32secret)
	secret = base32secret.upper().rstrip("=")

	label = quote(account, safe="")
	args = { "secret" : secret, }
	if issuer:
		label = quote(issuer, safe="") + ":" + label
		args["issuer"] = issuer
	if config.hmacAlgorithm != GOOGLE_AUTHENTICATOR_CONFIG.hmacAlgorithm:
		args["algorithm"] = config.hmacAlgorithm
	if config.codeDigits != GOOGLE_AUTHENTICATOR_CONFIG.codeDigits:
		args["digits"] = config.codeDigits

	if counter is None:
		otpType = "totp"
		periodMillis = config.timeStepMillis
		if periodMillis <= 0 or periodMillis % 1000:
			raise OtpError("Key URI: The time step must be whole seconds.")
		if periodMillis != GOOGLE_AUTHENTICATOR_CONFIG.timeStepMillis:
			args["period"] = periodMillis // 1000
	else:
		if not isinstance(counter, int) or counter < 0:
			raise OtpError("Key URI: Invalid counter.")
		otpType = "hotp"
		args["counter"] = counter

	return "otpauth://%s/%s?%s" % (otpType, label,
				       urlencode(args).replace("+", "%20"))
