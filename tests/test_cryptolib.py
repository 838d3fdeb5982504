from otp_tstlib import *
initTest(__file__)

from libotp.cryptolib import *
from libotp.exception import *

class Test_CryptoLib(TestCase):
	CRYPTOLIB = "cryptodome"

	def setUp(self):
		self.__oldCryptoLib = selectCryptoLib(self.CRYPTOLIB)

	def tearDown(self):
		selectCryptoLib(self.__oldCryptoLib)

	def test_selection(self):
		inst = CryptoLib.get()
		self.assertIs(CryptoLib.get(), inst)
		self.assertEqual(inst.name, self.CRYPTOLIB)

	def test_selftest(self):
		CryptoLib.quickSelfTest()

	def test_hmac(self):
		inst = CryptoLib.get()
		# RFC 4231 test case 2
		key = b"Jefe"
		data = b"what do ya want for nothing?"
		self.assertEqual(inst.hmac("SHA1", key, data).hex(),
				 "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79")
		self.assertEqual(inst.hmac("SHA256", key, data).hex(),
				 "5bdcc146bf60754e6a042426089575c7"
				 "5a003f089d2739839dec58b964ec3843")
		self.assertEqual(inst.hmac("sha-512", key, data).hex(),
				 "164b7a7bfcf819e2e395fbe73b56e0a3"
				 "87bd64222e831fd610270cd7ea250554"
				 "9758bf75c05a994a6d034f65f8f0e6fd"
				 "caeab1a34d4a6b4b636e070a38bce737")
		for name, size in (("SHA1", 20), ("SHA256", 32), ("SHA512", 64)):
			self.assertEqual(inst.digestSize(name), size)
			self.assertEqual(len(inst.hmac(name, b"k", b"")), size)
		self.assertRaises(UnsupportedDigest,
				  lambda: inst.hmac("MD5", key, data))
		self.assertRaises(UnsupportedDigest,
				  lambda: inst.digestSize("SHA3"))

	def test_random(self):
		inst = CryptoLib.get()
		a = inst.randomBytes(10)
		b = inst.randomBytes(10)
		self.assertEqual(len(a), 10)
		self.assertEqual(len(b), 10)
		self.assertNotEqual(a, b)
		self.assertRaises(OtpError, lambda: inst.randomBytes(0))
		self.assertRaises(OtpError, lambda: inst.randomBytes(-1))

class Test_CryptoLib_hashlib(Test_CryptoLib):
	CRYPTOLIB = "hashlib"

class Test_CryptoLib_invalid(TestCase):
	def setUp(self):
		self.__oldCryptoLib = selectCryptoLib("doesnotexist")

	def tearDown(self):
		selectCryptoLib(self.__oldCryptoLib)

	def test_invalid(self):
		self.assertRaises(OtpError, lambda: CryptoLib.get())
