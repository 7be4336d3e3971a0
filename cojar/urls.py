'''
URL container for cookie matching.

The cookie predicates only need a few canonical pieces of an url: the
scheme, a lower-cased punycoded hostname, and the path. We compute
those once, upon creation.
'''

import ipaddress
import logging
import unicodedata
import urllib.parse

import tldextract

LOGGER = logging.getLogger(__name__)

# bundled public suffix list snapshot, never fetched over the network
_tldextract = tldextract.TLDExtract(suffix_list_urls=(), include_psl_private_domains=True)


def parse_netloc(netloc):
    '''
    Split a netloc into hostname and port, discarding any user:password@.
    '''
    if '@' in netloc:
        _, _, netloc = netloc.rpartition('@')
    if netloc.startswith('['):
        # ipv6 literal
        hostname, _, rest = netloc.partition(']')
        hostname = hostname[1:]
        port = rest[1:] if rest.startswith(':') else ''
    elif ':' in netloc:
        hostname, _, port = netloc.rpartition(':')
    else:
        hostname = netloc
        port = ''
    return hostname, port


def hostname_to_punycanon(hostname):
    '''
    Hostnames are complicated. They may be ascii or utf8, and might
    still have % escapes.
    '''
    hostname = hostname.rstrip('.')
    try:
        unquoted = urllib.parse.unquote(hostname, encoding='utf-8', errors='strict')
    except UnicodeDecodeError:
        LOGGER.error('encoding of hostname %s confused me', hostname)
        return hostname.lower()

    unquoted = unicodedata.normalize('NFKC', unquoted).lower()

    try:
        return unquoted.encode('ascii').decode('ascii')
    except UnicodeEncodeError:
        pass
    try:
        return unquoted.encode('idna').decode('ascii')
    except UnicodeError:
        LOGGER.error('failed trying to punycode hostname %r', unquoted)
        return unquoted


def is_ip_address(hostname):
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


def is_public_suffix(domain):
    '''
    True if domain is a public suffix such as com or co.uk, which
    nobody is allowed to set a cookie for.
    '''
    tlde = _tldextract(domain)
    return not tlde.domain and bool(tlde.suffix)


class URL(object):
    '''
    Container for the parts of an url that cookies care about.
    The path is writable, everything else is fixed at creation.
    '''
    def __init__(self, url):
        self._url = url
        parts = urllib.parse.urlsplit(url)
        self._scheme = parts.scheme.lower()
        hostname, self._port = parse_netloc(parts.netloc)
        self._hostname = hostname_to_punycanon(hostname)
        self.path = parts.path

    @property
    def url(self):
        return self._url

    def __str__(self):
        return self._url

    def __repr__(self):
        return 'URL({!r})'.format(self._url)

    @property
    def scheme(self):
        return self._scheme

    @property
    def hostname(self):
        return self._hostname

    @property
    def port(self):
        return self._port

    @property
    def is_secure(self):
        return self._scheme in ('https', 'wss')

    @property
    def is_ip(self):
        return is_ip_address(self._hostname)
