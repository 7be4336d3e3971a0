'''
The Cookie entity, and the two predicates the jar asks of it: may this
cookie be set by a response from some url, and should it be sent with a
request to some url.
'''

import logging
import time

from . import urls

LOGGER = logging.getLogger(__name__)

# attributes that round-trip through to_dict() and from_dict()
ATTRIBUTES = ('name', 'value', 'domain', 'path', 'secure', 'for_domain',
              'expires', 'version', 'created_at', 'accessed_at')


def domain_match(hostname, domain):
    '''
    RFC 6265 5.1.3: hostname is domain, or ends with .domain and is not
    an ip address.
    '''
    if hostname == domain:
        return True
    return hostname.endswith('.' + domain) and not urls.is_ip_address(hostname)


def path_match(request_path, cookie_path):
    '''
    RFC 6265 5.1.4
    '''
    if request_path == cookie_path:
        return True
    if request_path.startswith(cookie_path):
        if cookie_path.endswith('/'):
            return True
        if request_path[len(cookie_path)] == '/':
            return True
    return False


def _as_url(url):
    if isinstance(url, urls.URL):
        return url
    return urls.URL(url)


class Cookie(object):
    '''
    A single cookie. domain is stored without a leading dot; a leading
    dot on the way in means the cookie is for the whole domain.
    '''
    def __init__(self, name, value, domain='', path='/', secure=False,
                 for_domain=False, expires=None, max_age=None, version=0,
                 created_at=None):
        self.name = name
        self.value = value
        if domain.startswith('.'):
            domain = domain[1:]
            for_domain = True
        self.domain = domain
        self.path = path
        self.secure = secure
        self.for_domain = for_domain
        if max_age is not None:
            expires = time.time() + max_age
        self.expires = expires
        self.version = version
        self.created_at = created_at if created_at is not None else time.time()
        self.accessed_at = self.created_at

    @property
    def expires(self):
        return self._expires

    @expires.setter
    def expires(self, value):
        if value is not None:
            value = float(value)
        self._expires = value

    @property
    def session(self):
        return self._expires is None

    @property
    def key(self):
        return self.domain.lower(), self.path, self.name

    def expired(self, now=None):
        if self._expires is None:
            return False
        if now is None:
            now = time.time()
        return self._expires <= now

    def acceptable_from_url(self, url):
        '''
        Can a response from url set this cookie?
        '''
        url = _as_url(url)
        host = url.hostname
        domain = self.domain.lower()

        if not self.path:
            LOGGER.debug('rejecting cookie %s: empty path', self.name)
            return False
        if not domain:
            return False

        if not self.for_domain or url.is_ip:
            return host == domain

        if urls.is_public_suffix(domain):
            LOGGER.debug('rejecting cookie %s: %s is a public suffix', self.name, domain)
            return False
        return domain_match(host, domain)

    def valid_for_url(self, url):
        '''
        Should this cookie be sent with a request to url?
        '''
        url = _as_url(url)
        if self.secure and not url.is_secure:
            return False
        domain = self.domain.lower()
        if self.for_domain:
            if not domain_match(url.hostname, domain):
                return False
        elif url.hostname != domain:
            return False
        return path_match(url.path or '/', self.path)

    def copy(self):
        return Cookie.from_dict(self.to_dict())

    def to_dict(self):
        return dict((a, getattr(self, a)) for a in ATTRIBUTES)

    @classmethod
    def from_dict(cls, d):
        c = cls(d['name'], d['value'], domain=d['domain'], path=d.get('path', '/'),
                secure=d.get('secure', False), for_domain=d.get('for_domain', False),
                expires=d.get('expires'), version=d.get('version', 0),
                created_at=d.get('created_at'))
        if d.get('accessed_at') is not None:
            c.accessed_at = d['accessed_at']
        return c

    def __eq__(self, other):
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self):
        return '{}={}'.format(self.name, self.value)

    def __repr__(self):
        args = ', '.join('{}={!r}'.format(a, getattr(self, a)) for a in ATTRIBUTES)
        return 'Cookie({})'.format(args)
