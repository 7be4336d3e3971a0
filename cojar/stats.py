'''
A trivial stats system for cojar
'''

import logging
import time

LOGGER = logging.getLogger(__name__)

start_time = time.time()
maxes = {}
sums = {}
sets = {}


def stats_max(name, value):
    maxes[name] = max(maxes.get(name, value), value)


def stats_sum(name, value):
    sums[name] = sums.get(name, 0) + value
    return sums[name]


def stats_set(name, value):
    sets[name] = value


def stat_value(name):
    if name in sums:
        return sums[name]
    if name in maxes:
        return maxes[name]
    if name in sets:
        return sets[name]


def report():
    LOGGER.info('Stats report:')
    for s in sorted(sums):
        LOGGER.info('  %s: %d', s, sums[s])
    for s in sorted(maxes):
        LOGGER.info('  %s: %d', s, maxes[s])
    for s in sorted(sets):
        LOGGER.info('  %s: %s', s, sets[s])
    LOGGER.info('  elapsed: %.1f seconds', time.time() - start_time)


def clear():
    global maxes
    maxes = {}
    global sums
    sums = {}
    global sets
    sets = {}
