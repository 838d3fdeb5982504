# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("libotp requires Python >=3.7")
del sys

import libotp.codec
import libotp.config
import libotp.cryptolib
import libotp.exception
import libotp.googleauth
import libotp.hotp
import libotp.keyuri
import libotp.memlock
import libotp.totp
import libotp.util
import libotp.version

from libotp.codec import *
from libotp.config import *
from libotp.cryptolib import *
from libotp.exception import *
from libotp.googleauth import *
from libotp.hotp import *
from libotp.keyuri import *
from libotp.totp import *
from libotp.version import *

__version__ = VERSION_STRING
