# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import sys
import logging
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from .version import version_str as version
from .config import load_config
from .log import basic_config as log_basic_config, setup_logging
from .error import HostsMergeError
from .core import HostsMerger


USAGE = """\
USAGE: hostsmerge [verbose] [check] [clean] [ipv6dup] [output=<filename>]

verbose: print more info about what is going on
check: checks the whitelist and blacklist (reports whitelisted entries that \
are blocked by the lists again and blacklisted entries that are already \
blocked), furthermore non-resolving domains are reported
clean: cleanup whitelist and blacklist files (fixes the issues reported by \
check)
ipv6dup: duplicate all the domains with '::0' as prefix instead of '0.0.0.0'
output=<filename>: write the merged hosts file to <filename>
"""

MODES = ("verbose", "check", "clean", "ipv6dup")
OUTPUT_PREFIX = "output="

log = logging.getLogger(__name__)


def parse_arguments(args):
    parser = ArgumentParser(description="Merge ad-blocking hosts files",
                            epilog=USAGE,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-V", "--version", action='version', version=version)

    add_arg = lambda _p, *args, **kwargs: _p.add_argument(*args, **kwargs)

    add_arg(parser, "modes", nargs="*", metavar="MODE",
            help="verbose, check, clean, ipv6dup or output=<filename>")
    add_arg(parser, "--config", help="Path to config file")
    add_arg(parser, "--loglevel",
            choices=["debug", "info", "warning", "error", "fatal",
                     "critical"],
            help="Log level (default: info)")

    args, unknown = parser.parse_known_args(args)

    args.verbose = args.check = args.clean = args.ipv6dup = False
    args.output = None
    args.unknown = list(unknown)
    for mode in args.modes:
        if mode in MODES:
            setattr(args, mode, True)
        elif mode.startswith(OUTPUT_PREFIX):
            args.output = mode[len(OUTPUT_PREFIX):]
        else:
            args.unknown.append(mode)
    return args


def print_usage(file=None):
    print(USAGE, end="", file=file or sys.stdout)


def main(args=None):
    args = parse_arguments(args)
    if args.unknown:
        print_usage()
        return 0

    log_basic_config(level=args.loglevel, verbose=args.verbose)
    try:
        config = load_config(args.config)
        setup_logging(
            verbose=args.verbose,
            log_file=config.LOG_FILE,
            level=args.loglevel or config.LOGLEVEL,
            reset=True,
        )
        merger = HostsMerger.from_config(
            result_path=args.output,
            check=args.check,
            clean=args.clean,
            ipv6dup=args.ipv6dup,
        )
        merger.run()
    except (HostsMergeError, OSError, ValueError) as ex:
        log.error("%s", ex)
        print(ex, file=sys.stderr)
        return 1
    return 0
