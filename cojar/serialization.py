'''
Coders turn the jar's index (domain -> path -> name -> Cookie) into a
string or bytes and back again.

A coder is any object with dump(index) and load(data). The built-in
ones are looked up by name.
'''

import logging
import pickle
import time

import yaml

from .cookie import Cookie
from .config import ConfigurationError
from . import stats

LOGGER = logging.getLogger(__name__)

COOKIESTXT_HEADER = '# Netscape HTTP Cookie File'


def index_add(index, cookie):
    '''
    Put cookie into a nested index, replacing any cookie with the same key.
    '''
    domain, path, name = cookie.key
    index.setdefault(domain, {}).setdefault(path, {})[name] = cookie
    return index


def walk_index(index):
    for paths in index.values():
        for names in paths.values():
            for cookie in names.values():
                yield cookie


class YAMLCoder:
    '''
    The whole index as a YAML document. Every cookie attribute survives,
    including the timestamps.
    '''
    binary = False

    def dump(self, index):
        plain = {}
        for domain, paths in index.items():
            plain[domain] = {}
            for path, names in paths.items():
                plain[domain][path] = dict((name, c.to_dict()) for name, c in names.items())
        return yaml.safe_dump(plain, default_flow_style=False)

    def load(self, data):
        plain = yaml.safe_load(data) or {}
        if not isinstance(plain, dict):
            raise ValueError('structured cookie data is not a mapping')
        index = {}
        for paths in plain.values():
            for names in paths.values():
                for d in names.values():
                    index_add(index, Cookie.from_dict(d))
        return index


class CookiestxtCoder:
    '''
    Mozilla's cookies.txt: one cookie per line, 7 tab-separated fields

    domain  for_domain  path  secure  expires  name  value

    Lossy: version is always 0, the timestamps are not saved, and
    everything after a # is a comment, so a value containing # comes
    back truncated.
    '''
    binary = False

    def dump(self, index):
        lines = [COOKIESTXT_HEADER, '']
        for c in walk_index(index):
            domain = c.domain
            if c.for_domain and not domain.startswith('.'):
                domain = '.' + domain
            lines.append('\t'.join((
                domain,
                'TRUE' if c.for_domain else 'FALSE',
                c.path,
                'TRUE' if c.secure else 'FALSE',
                str(int(c.expires or 0)),
                c.name,
                c.value)))
        return '\n'.join(lines) + '\n'

    def load(self, data):
        now = time.time()
        index = {}
        for lineno, line in enumerate(data.splitlines(), start=1):
            if '#' in line:
                line, _ = line.split('#', 1)
            if not line.strip():
                continue
            fields = line.split('\t')
            if len(fields) != 7:
                LOGGER.warning('cookies.txt line %d has %d fields, skipping', lineno, len(fields))
                stats.stats_sum('cookiestxt lines skipped', 1)
                continue
            domain, for_domain, path, secure, expires, name, value = fields

            try:
                expires = int(float(expires))
            except (ValueError, OverflowError):
                LOGGER.warning('cookies.txt line %d has invalid expiry %r, skipping', lineno, expires)
                stats.stats_sum('cookiestxt lines skipped', 1)
                continue
            expires = expires or None
            if expires is not None and expires < now:
                LOGGER.debug('cookies.txt line %d already expired, skipping', lineno)
                continue

            # the for_domain field wins over a leading dot
            if domain.startswith('.'):
                domain = domain[1:]

            # Netscape cookie spec
            c = Cookie(name, value, domain=domain, path=path,
                       secure=(secure == 'TRUE'), for_domain=(for_domain == 'TRUE'),
                       expires=expires, version=0)
            index_add(index, c)
        return index


class PickleCoder:
    '''
    The whole index as a pickle. Only load pickles you wrote yourself.
    '''
    binary = True

    def dump(self, index):
        return pickle.dumps(index)

    def load(self, data):
        return pickle.loads(data)


coders = {
    'structured': YAMLCoder,
    'yaml': YAMLCoder,
    'cookiestxt': CookiestxtCoder,
    'pickle': PickleCoder,
}


def register_coder(name, cls):
    coders[name] = cls


def get_coder(coder):
    '''
    Return a coder object, given a registered name or something
    that already has dump() and load().
    '''
    if isinstance(coder, str):
        if coder not in coders:
            raise ConfigurationError('Invalid serializer {!r}'.format(coder))
        return coders[coder]()
    if callable(getattr(coder, 'dump', None)) and callable(getattr(coder, 'load', None)):
        return coder
    raise ConfigurationError('Invalid serializer {!r}'.format(coder))
