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
conf.py - configuration module - shipped defaults of site specific parameters

A site overrides them in zskr_conf.py (see config.py).
"""

#------------------------------------------------------------------------------
# key management service
# -----------------------------------------

SERVER = None                   # e.g. 'https://dns-admin.my.net/rpc'
ACCOUNT_NAME = None
ACCOUNT_PW = None
CA_FILE = None                  # None: system trust store
RPC_TIMEOUT = 30                # seconds

#--------------------------
# Email addresses for mailing error messages
#--------------------------

sender = 'hostmaster@localhost'
recipients = ()
mailRelay = None                # no mail, if not configured

#--------------------------
#   policy constants
#--------------------------

SAFETY_FACTOR = 10              # safety window is SAFETY_FACTOR * max TTL

# key algorithm and size of follow-up ZSKs
KEY_ALGO_ZSK = 'RSASHA256'
KEY_SIZE_ZSK = 1024
