import logging
import yaml

LOGGER = logging.getLogger(__name__)

'''
default_yaml exists to both set defaults and to document all
possible configuration variables.
'''

default_yaml = '''
Jar:
  Format: structured
  SaveSessionCookies: False

Logging:
  LoggingLevel: INFO
'''

_config = None


class ConfigurationError(ValueError):
    '''
    Raised for a configuration that cannot be used, such as an unknown
    serialization format.
    '''
    pass


def print_default():
    print(default_yaml)


def print_final():
    print(yaml.safe_dump(_get(), default_flow_style=False))


def merge_dicts(a, b):
    '''
    Merge 2-level dict b into a.
    Not very general purpose!
    '''
    c = a
    for k1 in b:
        for k2 in b[k1]:
            v = b[k1][k2]
            if k1 not in c or not c[k1]:
                c[k1] = {}
            if k2 not in c[k1]:
                c[k1][k2] = {}
            c[k1][k2] = v
    return c


def type_fixup(rhs):
    '''
    Command-line overrides arrive as strings. Turn [a,b,c] into a list,
    leave everything else alone.
    '''
    if rhs.startswith('[') and rhs.endswith(']'):
        return rhs[1:-1].split(',')
    return rhs


def config(configfile, configlist):
    '''
    Return a config dict which is the sum of all the various configurations
    '''

    default = yaml.safe_load(default_yaml)

    config_from_file = {}
    if configfile:
        with open(configfile, 'r') as c:
            config_from_file = yaml.safe_load(c) or {}

    combined = merge_dicts(default, config_from_file)

    if configlist:
        for c in configlist:
            # the syntax is... dangerous
            if ':' not in c:
                raise ConfigurationError('invalid config of {}'.format(c))
            lhs, rhs = c.split(':', maxsplit=1)
            if '.' not in lhs:
                raise ConfigurationError('invalid config of {}'.format(c))
            xpath = lhs.split('.')
            key = xpath.pop()
            temp = combined
            for x in xpath:
                if not isinstance(temp.get(x), dict):
                    raise ConfigurationError('invalid config of {}, no section {}'.format(c, x))
                temp = temp[x]
            temp[key] = type_fixup(rhs)

    set_config(combined)
    return combined


def logging_level():
    '''
    Logging.LoggingLevel as something logging.basicConfig() accepts.
    Either a level name like INFO or a number.
    '''
    level = read('Logging', 'LoggingLevel')
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    level = str(level)
    if level.isdigit():
        return int(level)
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ConfigurationError('invalid Logging LoggingLevel of {}'.format(level))
    return value


def set_config(c):
    global _config
    _config = c


def _get():
    if _config is None:
        set_config(yaml.safe_load(default_yaml))
    return _config


def read(*l):
    '''
    Walk down the config dict. Missing keys return None.
    '''
    c = _get()
    for x in l:
        if not isinstance(c, dict):
            return None
        c = c.get(x)
        if c is None:
            return None
    return c
