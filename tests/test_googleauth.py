from otp_tstlib import *
initTest(__file__)

from libotp.codec import *
from libotp.exception import *
from libotp.googleauth import *
from libotp.totp import *

from base64 import b32decode
import datetime

class Test_GoogleAuthenticator(TestCase):
	# Base32 of RFC6238_SECRETS["SHA1"]
	SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"

	def test_profile(self):
		ga = GoogleAuthenticator(self.SECRET)
		self.assertEqual(ga.config.codeDigits, 6)
		self.assertEqual(ga.config.hmacAlgorithm, "SHA1")
		self.assertEqual(ga.config.timeStepMillis, 30000)
		self.assertEqual(ga.windowSize, 1)

	def test_generate(self):
		ga = GoogleAuthenticator(self.SECRET)
		self.assertEqual(ga.generate(59000), "287082")
		self.assertEqual(ga.generate(1111111109000), "081804")
		self.assertEqual(ga.generate(1234567890000), "005924")
		self.assertEqual(ga.generate(2000000000000), "279037")
		self.assertEqual(ga.generate(datetime.datetime(2009, 2, 13, 23, 31, 30)),
				 "005924")
		self.assertEqual(GoogleAuthenticator(self.SECRET.lower()).generate(59000),
				 "287082")

	def test_same_as_totp(self):
		ga = GoogleAuthenticator(self.SECRET)
		totp = TotpGenerator(RFC6238_SECRETS["SHA1"], GOOGLE_AUTHENTICATOR_CONFIG)
		for t in (0, 59000, 1111111111000, 20000000000000):
			self.assertEqual(ga.generate(t), totp.generate(t))
			self.assertEqual(ga.generateWindow(3, t), totp.generateWindow(3, t))
			self.assertEqual(ga.counter(t), totp.counter(t))

	def test_now(self):
		ga = GoogleAuthenticator(self.SECRET)
		code = ga.generate()
		self.assertEqual(len(code), 6)
		self.assertIn(code, ga.generateWindow())
		self.assertTrue(ga.isValid(code))
		self.assertGreater(ga.timeRemaining(), 0)
		self.assertLessEqual(ga.timeRemaining(), 30000)

	def test_window(self):
		t = 1111111111000
		ga = GoogleAuthenticator(self.SECRET)
		window = ga.generateWindow(timestamp=t)
		self.assertEqual(len(window), 3)
		self.assertEqual(window[:2], [ "081804", "050471", ])
		self.assertEqual(len(ga.generateWindow(0, t)), 1)
		self.assertEqual(ga.generateWindow(0, t), [ ga.generate(t), ])
		ga = GoogleAuthenticator(self.SECRET, windowSize=2)
		self.assertEqual(len(ga.generateWindow(timestamp=t)), 5)
		self.assertEqual(len(ga.generateWindow(4, t)), 9)

	def test_isValid(self):
		t = 1234567890000
		ga = GoogleAuthenticator(self.SECRET)
		code = ga.generate(t)
		self.assertEqual(code, "005924")
		self.assertTrue(ga.isValid(code, t))
		self.assertTrue(ga.isValid(code, t + 30000))
		self.assertTrue(ga.isValid(code, t - 30000))
		self.assertFalse(ga.isValid(code, t + 60000))
		self.assertFalse(ga.isValid("5924", t))

		# Override 0: exact match only.
		self.assertTrue(ga.isValid(code, t, overrideWindowSize=0))
		self.assertFalse(ga.isValid(code, t + 30000, overrideWindowSize=0))
		self.assertTrue(ga.isValid(code, t + 60000, overrideWindowSize=2))

		ga = GoogleAuthenticator(self.SECRET, windowSize=0)
		self.assertFalse(ga.isValid(code, t + 30000))
		self.assertTrue(ga.isValid(code, t + 30000, overrideWindowSize=1))

	def test_time_conversion(self):
		ga = GoogleAuthenticator(self.SECRET)
		self.assertEqual(ga.counter(59000), 1)
		self.assertEqual(ga.timeslotStart(2), 60000)
		self.assertEqual(ga.timeRemaining(59000), 1000)
		self.assertEqual(ga.timeRemaining(60000), 30000)
		self.assertEqual(ga.timeRemaining(0), 30000)

	def test_createRandomSecret(self):
		secret0 = GoogleAuthenticator.createRandomSecret()
		secret1 = GoogleAuthenticator.createRandomSecret()
		self.assertNotEqual(secret0, secret1)
		for secret in (secret0, secret1):
			self.assertEqual(len(secret), 16)
			self.assertTrue(all(c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
					    for c in secret))
			self.assertEqual(len(b32decode(secret)), 10)
			self.assertEqual(len(getCodec("base32").decode(secret)), 10)
			self.assertEqual(len(GoogleAuthenticator(secret).generate()), 6)

	def test_errors(self):
		for secret in ("", "ORSXG5A", "not base32!", "GEZDGNBV1", "ÄÖÜ=====", b"GEZDGNBV", None):
			self.assertRaises(InvalidSecretEncoding,
					  lambda: GoogleAuthenticator(secret))
		self.assertRaises(InvalidSecret, lambda: GoogleAuthenticator(""))
		self.assertRaises(InvalidWindowSize,
				  lambda: GoogleAuthenticator(self.SECRET, windowSize=-1))
		ga = GoogleAuthenticator(self.SECRET)
		self.assertRaises(InvalidWindowSize,
				  lambda: ga.isValid("287082", 59000, overrideWindowSize=-1))
		self.assertRaises(InvalidWindowSize,
				  lambda: ga.generateWindow(-2, 59000))

class Test_GoogleAuthenticator_hashlib(Test_GoogleAuthenticator):
	def setUp(self):
		self.__oldCryptoLib = selectCryptoLib("hashlib")

	def tearDown(self):
		selectCryptoLib(self.__oldCryptoLib)
