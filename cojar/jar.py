'''
The cookie jar.

Cookies are indexed domain -> path -> name, so adding a cookie with the
same domain, path and name replaces the old one. Expired cookies are
purged lazily, before every read and every save.

The jar has no locking; one owner at a time.
'''

import copy
import logging
import time

from .urls import URL
from . import config
from . import serialization
from . import stats

LOGGER = logging.getLogger(__name__)


def _truthy(value):
    # config overrides from the command line arrive as strings
    if isinstance(value, str):
        return value.lower() in ('true', 'yes', '1')
    return bool(value)


class CookieJar:
    def __init__(self):
        self.jar = {}

    def __deepcopy__(self, memo):
        other = CookieJar()
        for domain, paths in self.jar.items():
            other.jar[domain] = {}
            for path, names in paths.items():
                other.jar[domain][path] = dict((name, c.copy()) for name, c in names.items())
        return other

    def copy(self):
        return copy.deepcopy(self)

    def add(self, url, cookie):
        '''
        Add cookie if it is acceptable from url. Returns the cookie if
        it was added, otherwise None.
        '''
        if not isinstance(url, URL):
            url = URL(url)
        if not cookie.acceptable_from_url(url):
            LOGGER.debug('cookie %s for %s not acceptable from %s', cookie.name, cookie.domain, url.url)
            stats.stats_sum('cookies rejected', 1)
            return None
        self.add_unconditional(cookie)
        return cookie

    def add_unconditional(self, cookie):
        '''
        Add cookie without asking if it is acceptable. Returns the jar.
        '''
        serialization.index_add(self.jar, cookie)
        stats.stats_sum('cookies added', 1)
        return self

    def cookies(self, url):
        '''
        Cookies to send with a request to url, most specific path first,
        and then oldest first (RFC 6265 5.4).
        '''
        self.cleanup()
        if not isinstance(url, URL):
            url = URL(url)
        if not url.path:
            url.path = '/'
        now = time.time()

        selected = []
        for cookie in self._walk():
            if not cookie.expired(now) and cookie.valid_for_url(url):
                cookie.accessed_at = now
                selected.append(cookie)

        return sorted(selected, key=lambda c: (-len(c.path), c.created_at))

    def is_empty(self, url):
        return not self.cookies(url)

    def __iter__(self):
        self.cleanup()
        return iter(self._walk())

    def _walk(self):
        return list(serialization.walk_index(self.jar))

    def __len__(self):
        return sum(1 for _ in self)

    def __contains__(self, cookie):
        domain, path, name = cookie.key
        return name in self.jar.get(domain, {}).get(path, {})

    def clear(self):
        self.jar = {}

    def cleanup(self, session=False):
        '''
        Remove expired cookies, and session cookies too if session is True.
        '''
        now = time.time()
        expired = 0
        purged = 0
        live = 0
        for domain in list(self.jar):
            paths = self.jar[domain]
            for path in list(paths):
                names = paths[path]
                for name in list(names):
                    cookie = names[name]
                    if cookie.expired(now):
                        expired += 1
                    elif session and cookie.session:
                        purged += 1
                    else:
                        live += 1
                        continue
                    del names[name]
                if not names:
                    del paths[path]
            if not paths:
                del self.jar[domain]

        stats.stats_max('jar size', live)
        stats.stats_set('jar domains', len(self.jar))

        if expired:
            LOGGER.debug('cleanup removed %d expired cookies', expired)
            stats.stats_sum('cookies expired', expired)
        if purged:
            LOGGER.debug('cleanup removed %d session cookies', purged)
            stats.stats_sum('cookies purged session', purged)

    def serialize(self, coder=None, session=None):
        '''
        Return the jar as a string (or bytes, for binary coders). Session
        cookies are left out unless session is True.
        '''
        coder = self._get_coder(coder)
        if session is None:
            session = _truthy(config.read('Jar', 'SaveSessionCookies'))
        jar = self.copy()
        jar.cleanup(session=not session)
        return coder.dump(jar.jar)

    def deserialize(self, data, coder=None):
        '''
        Replace the contents of the jar with the serialized data.
        '''
        coder = self._get_coder(coder)
        self.jar = coder.load(data)
        self.cleanup()
        return self

    def save(self, filename, coder=None, session=None):
        coder = self._get_coder(coder)
        mode = 'wb' if getattr(coder, 'binary', False) else 'w'
        with open(filename, mode) as f:
            f.write(self.serialize(coder, session=session))
        LOGGER.info('saved cookie jar to %s', filename)
        stats.stats_sum('jar saves', 1)
        return self

    def load(self, filename, coder=None):
        coder = self._get_coder(coder)
        mode = 'rb' if getattr(coder, 'binary', False) else 'r'
        with open(filename, mode) as f:
            self.deserialize(f.read(), coder)
        LOGGER.info('loaded %d cookies from %s', len(self), filename)
        stats.stats_sum('jar loads', 1)
        return self

    def summarize(self):
        '''Print a human-readable summary of what's in the jar'''
        print('{} cookies in {} domains'.format(len(self), len(self.jar)))

    def _get_coder(self, coder):
        if coder is None:
            coder = config.read('Jar', 'Format') or 'structured'
        return serialization.get_coder(coder)
