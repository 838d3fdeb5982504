# -*- coding: utf-8 -*-
"""
# One-time password generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import argparse
import hmac
import libotp
import libotp.memlock
import libotp.util
import sys

__all__ = [
	"main",
]

def getSecret(args):
	if args.secret:
		return args.secret
	return libotp.util.readSecret("Base32 secret")

def getConfig(args):
	"""Get the custom OtpConfig from the command line
	or None, if the Google Authenticator profile shall be used.
	"""
	if (args.digits is None and
	    args.algorithm is None and
	    args.step is None and
	    args.hotp is None):
		return None
	return libotp.OtpConfig(
		codeDigits=6 if args.digits is None else args.digits,
		hmacAlgorithm="SHA1" if args.algorithm is None else args.algorithm,
		timeStep=30 if args.step is None else args.step,
		timeStepUnit=libotp.TimeUnit.SECONDS)

def run_new_secret():
	print(libotp.GoogleAuthenticator.createRandomSecret())
	return 0

def run_uri(secret, config, account, issuer, counter):
	print(libotp.buildKeyUri(secret,
				 account=account,
				 issuer=issuer,
				 config=config,
				 counter=counter))
	return 0

def run_hotp(secret, config, counter, window, check):
	hotp = libotp.HotpGenerator(libotp.getCodec("base32").decode(secret),
				    config)
	libotp.checkWindowSize(window or 0)
	# HOTP looks ahead only. The counter never goes backwards.
	codes = [ hotp.generate(c)
		  for c in range(counter, min(counter + (window or 0),
					      libotp.MAX_COUNTER) + 1) ]
	if check is not None:
		valid = False
		for code in codes:
			valid |= hmac.compare_digest(code.encode("UTF-8"),
						     check.encode("UTF-8", "surrogatepass"))
		print("valid" if valid else "invalid")
		return 0 if valid else 1
	print(", ".join(codes))
	return 0

def run_totp(secret, config, timestamp, window, check, remaining):
	# Sample the current time only once.
	timestamp = libotp.toTimestampMillis(timestamp)
	if config is None:
		gen = libotp.GoogleAuthenticator(secret)
		config = gen.config
		isValid = lambda code, windowSize: gen.isValid(
			code, timestamp=timestamp, overrideWindowSize=windowSize)
	else:
		gen = libotp.TotpGenerator(libotp.getCodec("base32").decode(secret),
					   config)
		isValid = lambda code, windowSize: gen.isValid(
			code, windowSize=windowSize, timestamp=timestamp)

	if check is not None:
		valid = isValid(check, 1 if window is None else window)
		print("valid" if valid else "invalid")
		return 0 if valid else 1

	if window is None:
		print(gen.generate(timestamp))
	else:
		print(", ".join(gen.generateWindow(window, timestamp)))
	if remaining and config.timeStep > 0:
		nextStart = gen.timeslotStart(gen.counter(timestamp) + 1)
		print("%d seconds remaining" % (
		      (nextStart - timestamp + 999) // 1000),
		      file=sys.stderr)
	return 0

def main(argv=None):
	p = argparse.ArgumentParser(
		description="HOTP/TOTP one-time password generator - "
			    "libotp version %s" % libotp.__version__)
	p.add_argument("-v", "--version", action="store_true",
		       help="show the libotp version and exit")
	grp = p.add_mutually_exclusive_group()
	grp.add_argument("-n", "--new-secret", action="store_true",
			 help="Generate a new random Base32 secret and exit.")
	grp.add_argument("-c", "--check", type=str, default=None, metavar="CODE",
			 help="Validate CODE instead of generating a code. "
			      "The exit code is 0, if CODE is valid.")
	grp.add_argument("-u", "--uri", type=str, default=None, metavar="ACCOUNT",
			 help="Print the otpauth:// key URI for ACCOUNT.")
	p.add_argument("-i", "--issuer", type=str, default=None,
		       help="The issuer name for -u|--uri.")
	p.add_argument("-w", "--window", type=int, default=None, metavar="N",
		       help="Print the codes of N time steps before and after the "
			    "current one. With -c|--check: Accept N time steps "
			    "of clock drift. Default for --check: 1")
	p.add_argument("-t", "--time", type=int, default=None, metavar="MILLIS",
		       help="Use this Unix time in milliseconds instead of the current time.")
	p.add_argument("-H", "--hotp", type=int, default=None, metavar="COUNTER",
		       help="Generate a counter based HOTP code instead of TOTP.")
	p.add_argument("-d", "--digits", type=int, default=None,
		       help="Number of code digits. Default: 6")
	p.add_argument("-a", "--algorithm", type=str, default=None,
		       help="HMAC hash algorithm: %s. Default: SHA1" % (
			    ", ".join(libotp.HMAC_ALGORITHMS)))
	p.add_argument("-s", "--step", type=int, default=None, metavar="SECONDS",
		       help="TOTP time step in seconds. Default: 30")
	p.add_argument("-r", "--remaining", action="store_true",
		       help="Also print the time until the next TOTP code.")
	p.add_argument("--no-mlock", action="store_true",
		       help="Do not lock memory and allow swapping to disk.")
	p.add_argument("secret", nargs="?", metavar="SECRET", default=None,
		       help="The Base32 encoded shared secret. "
			    "If not given, it is read from the terminal.")
	args = p.parse_args(argv)

	if args.version:
		print("libotp version %s" % libotp.__version__)
		return 0

	memLock = None
	try:
		if args.new_secret:
			return run_new_secret()

		if not args.no_mlock:
			memLock = libotp.memlock.MemLock.get()
			err = memLock.lockAll()
			if err:
				memLock = None
				print("WARNING: %s\n"
				      "The secret could possibly be written "
				      "to a swap-file or swap-partition on disk." % err,
				      file=sys.stderr)

		secret = getSecret(args)
		if secret is None:
			return 1
		config = getConfig(args)

		if args.uri is not None:
			return run_uri(secret, config,
				       account=args.uri,
				       issuer=args.issuer,
				       counter=args.hotp)
		if args.hotp is not None:
			return run_hotp(secret, config,
					counter=args.hotp,
					window=args.window,
					check=args.check)
		return run_totp(secret, config,
				timestamp=args.time,
				window=args.window,
				check=args.check,
				remaining=args.remaining)
	except libotp.OtpError as e:
		print("Error: " + str(e), file=sys.stderr)
		return 1
	finally:
		if memLock is not None:
			memLock.unlockAll()

if __name__ == "__main__":
	sys.exit(main())
