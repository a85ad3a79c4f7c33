"""
 ZSKR DNSsec ZSK Rollover
 
 Copyright (c) 2012-2019 Axel Rau, axel.rau@chaos1.de

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.

# -----------------------------------------
# utility module of ZSKR (commandline parsing)
# -----------------------------------------
"""

#--------------- imported modules --------------
import optparse


#--------------- command line options --------------

def make_parser():
    parser = optparse.OptionParser(usage='%prog [options] [server]',
                    description='ZSKR DNSsec ZSK Rollover. '
                    'Roll over the zone signing key of a DNS installation '
                    'with the pre-publish method: activate the pre-published key, '
                    'publish its successor, retire and finally delete old keys.')

    parser.add_option('--config', '-C', action='store',
                       help='Read site configuration from this file instead of zskr_conf.py.')

    parser.add_option('--cron', '-c', dest='cron', action='store_true',
                       default=False,
                       help='Run as cronjob. Mail errors and warnings.')

    parser.add_option('--dry-run', '-n', dest='dry_run', action='store_true',
                       default=False,
                       help='Show the actions due, but do not perform them.')

    parser.add_option('--list', '-l', action='store_true',
                       default=False,
                       help='List the ZSKs of the installation and the actions due and terminate.')

    parser.add_option('--debug', '-d', action='store_true',
                       default=False,
                       help='Turn on debugging.')
    parser.add_option('--verbose', '-v', dest='verbose', action='store_true',
                       default=False,
                       help='Be more verbose.')
    return parser

def parse_args(argv=None):
    parser = make_parser()
    options, args = parser.parse_args(argv)
    if len(args) > 1:
        parser.error('At most one server endpoint expected, got %d' % len(args))
    if options.debug: options.verbose = True
    return options, args
