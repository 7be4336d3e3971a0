import time

import pytest

import cojar.serialization as serialization
from cojar import ConfigurationError, Cookie


def make_index(*cookies):
    index = {}
    for c in cookies:
        serialization.index_add(index, c)
    return index


def test_index_add():
    index = make_index(Cookie('a', '1', domain='Example.com'),
                       Cookie('a', '2', domain='example.com'),
                       Cookie('b', '3', domain='example.com', path='/x'))
    assert list(index) == ['example.com']
    assert index['example.com']['/']['a'].value == '2'
    assert index['example.com']['/x']['b'].value == '3'
    assert len(list(serialization.walk_index(index))) == 2


def test_yaml_coder():
    coder = serialization.YAMLCoder()
    c = Cookie('a', 'b', domain='example.com', path='/x', secure=True, for_domain=True,
               expires=2000000000.5, version=1, created_at=1000.25)
    c.accessed_at = 1234.5
    session = Cookie('s', 't', domain='example.org')

    data = coder.dump(make_index(c, session))
    assert isinstance(data, str)
    index = coder.load(data)
    assert index['example.com']['/x']['a'] == c
    assert index['example.org']['/']['s'] == session
    assert index['example.org']['/']['s'].expires is None

    assert coder.load('') == {}
    with pytest.raises(ValueError):
        coder.load('- a\n- b\n')


def test_cookiestxt_dump():
    coder = serialization.CookiestxtCoder()
    index = make_index(Cookie('a', 'b', domain='example.com', path='/x', secure=True,
                              for_domain=True, expires=2000000000.7),
                       Cookie('c', 'd', domain='example.org'))
    lines = coder.dump(index).splitlines()
    assert lines[0] == '# Netscape HTTP Cookie File'
    assert '.example.com\tTRUE\t/x\tTRUE\t2000000000\ta\tb' in lines
    assert 'example.org\tFALSE\t/\tFALSE\t0\tc\td' in lines


def test_cookiestxt_load():
    coder = serialization.CookiestxtCoder()
    expired = int(time.time()) - 3600
    data = '\n'.join((
        '# Netscape HTTP Cookie File',
        '',
        '.example.com\tTRUE\t/\tFALSE\t2000000000\tlive\t1',
        'example.com\tFALSE\t/\tFALSE\t2000000000.5\tfrac\t5',
        'example.com\tFALSE\t/x\tTRUE\t0\tsession\t2  # trailing comment',
        'example.com\tFALSE\t/\tFALSE\t{}\tdead\t3'.format(expired),
        'example.com\tFALSE\t/\tFALSE\t0\tshort',
        'example.com\tFALSE\t/\tFALSE\tsoon\tbadexpiry\t4',
        'example.com\tFALSE\t/\tFALSE\t0\ttoo\tmany\tfields',
    ))
    skipped = serialization.stats.stat_value('cookiestxt lines skipped') or 0
    index = coder.load(data)

    cookies = dict((c.name, c) for c in serialization.walk_index(index))
    assert sorted(cookies) == ['frac', 'live', 'session']
    assert cookies['frac'].expires == 2000000000

    live = cookies['live']
    assert live.domain == 'example.com'
    assert live.for_domain
    assert live.expires == 2000000000
    assert live.version == 0
    assert not live.secure

    session = cookies['session']
    assert session.session
    assert session.secure
    assert session.path == '/x'
    assert session.value == '2  '

    assert serialization.stats.stat_value('cookiestxt lines skipped') == skipped + 3


def test_pickle_coder():
    coder = serialization.PickleCoder()
    c = Cookie('a', 'b', domain='example.com', expires=2000000000)
    data = coder.dump(make_index(c))
    assert isinstance(data, bytes)
    assert coder.load(data)['example.com']['/']['a'] == c


def test_get_coder():
    assert isinstance(serialization.get_coder('structured'), serialization.YAMLCoder)
    assert isinstance(serialization.get_coder('yaml'), serialization.YAMLCoder)
    assert isinstance(serialization.get_coder('cookiestxt'), serialization.CookiestxtCoder)
    assert isinstance(serialization.get_coder('pickle'), serialization.PickleCoder)

    coder = serialization.CookiestxtCoder()
    assert serialization.get_coder(coder) is coder

    with pytest.raises(ConfigurationError):
        serialization.get_coder('xml')
    with pytest.raises(ConfigurationError):
        serialization.get_coder(42)

    class DumpOnly:
        def dump(self, index):
            return ''
    with pytest.raises(ConfigurationError):
        serialization.get_coder(DumpOnly())


def test_register_coder():
    serialization.register_coder('txt', serialization.CookiestxtCoder)
    try:
        assert isinstance(serialization.get_coder('txt'), serialization.CookiestxtCoder)
    finally:
        del serialization.coders['txt']


def test_cookiestxt_load_expiry_forms():
    coder = serialization.CookiestxtCoder()
    index = coder.load('example.com\tFALSE\t/\tFALSE\t2000000000.5\tfrac\t1\n'
                       'example.com\tFALSE\t/\tFALSE\t2e9\texp\t2\n'
                       'example.com\tFALSE\t/\tFALSE\tinf\tinf\t3\n')
    cookies = dict((c.name, c) for c in serialization.walk_index(index))
    assert sorted(cookies) == ['exp', 'frac']
    assert cookies['frac'].expires == 2000000000
    assert cookies['exp'].expires == 2000000000


def test_cookiestxt_load_for_domain_field():
    coder = serialization.CookiestxtCoder()
    index = coder.load('.example.com\tFALSE\t/\tFALSE\t0\thost\t1\n'
                       'example.org\tTRUE\t/\tFALSE\t0\tdomain\t2\n')
    host = index['example.com']['/']['host']
    assert host.domain == 'example.com'
    assert not host.for_domain
    domain = index['example.org']['/']['domain']
    assert domain.for_domain


def test_cookiestxt_hash_in_value():
    coder = serialization.CookiestxtCoder()
    data = coder.dump(make_index(Cookie('a', 'x#y', domain='example.com')))
    index = coder.load(data)
    assert index['example.com']['/']['a'].value == 'x'
