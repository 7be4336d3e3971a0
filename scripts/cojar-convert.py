#!/usr/bin/env python

'''
Convert a saved cookie jar from one format to another, e.g.

  cojar-convert.py --from cookiestxt --to structured cookies.txt jar.yaml
'''
import os
import sys

import argparse
import logging

import cojar
import cojar.config as config
import cojar.stats as stats

LOGGER = logging.getLogger(__name__)

ARGS = argparse.ArgumentParser(description='Convert a cookie jar between formats')
ARGS.add_argument('infile', nargs='?')
ARGS.add_argument('outfile', nargs='?')
ARGS.add_argument('--from', dest='informat', action='store', help='format of infile, default from config')
ARGS.add_argument('--to', dest='outformat', action='store', help='format of outfile, default from config')
ARGS.add_argument('--session', action='store_true', help='keep session cookies in the output')
ARGS.add_argument('--summarize', action='store_true', help='print a summary of the jar')
ARGS.add_argument('--config', action='append')
ARGS.add_argument('--configfile', action='store')
ARGS.add_argument('--printdefault', action='store_true', help='print the default configuration')
ARGS.add_argument('--printfinal', action='store_true', help='print the final configuration')
ARGS.add_argument('--loglevel', action='store', help='set logging level, default from config Logging.LoggingLevel')
ARGS.add_argument('--verbose', '-v', action='count', help='set logging level to DEBUG')


def main():
    args = ARGS.parse_args()

    if args.printdefault:
        config.print_default()
        sys.exit(1)

    try:
        config.config(args.configfile, args.config)
        configured_level = config.logging_level()
    except cojar.ConfigurationError as e:
        logging.basicConfig()
        LOGGER.error('%s', e)
        sys.exit(1)

    loglevel = os.getenv('COJAR_LOGLEVEL')
    if loglevel is None and args.verbose:
        loglevel = 'DEBUG'
    if loglevel is None and args.loglevel:
        loglevel = args.loglevel
    if loglevel is None:
        loglevel = configured_level

    logging.basicConfig(level=loglevel)

    if args.printfinal:
        config.print_final()
        sys.exit(1)

    if not args.infile:
        ARGS.error('infile is required')

    jar = cojar.CookieJar()
    try:
        jar.load(args.infile, args.informat)
        if args.summarize:
            jar.summarize()
        if args.outfile:
            jar.save(args.outfile, args.outformat, session=args.session or None)
    except cojar.ConfigurationError as e:
        LOGGER.error('%s', e)
        sys.exit(1)

    stats.report()


if __name__ == '__main__':
    main()
