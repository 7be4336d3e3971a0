'''
A persistent HTTP cookie jar
'''

from .cookie import Cookie
from .config import ConfigurationError
from .jar import CookieJar
from .serialization import CookiestxtCoder, PickleCoder, YAMLCoder, get_coder, register_coder
from .urls import URL

__title__ = 'cojar'
__author__ = 'cojar contributors'
__license__ = 'Apache 2.0'
__copyright__ = 'Copyright 2026 cojar contributors'

__all__ = ['Cookie', 'CookieJar', 'ConfigurationError', 'URL',
           'YAMLCoder', 'CookiestxtCoder', 'PickleCoder', 'get_coder', 'register_coder']
