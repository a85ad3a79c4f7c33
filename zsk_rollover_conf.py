#!/usr/bin/env python3
#

"""
 Copyright (c) 2012-2019 Axel Rau, axel.rau@chaos1.de

 Example of site configuration; install as zskr_conf.py in
 <sys.prefix>/etc or /usr/local/etc/ZSKR.
"""

#------------------------------------------------------------------------------
# key management service
# -----------------------------------------

SERVER = 'https://dns-admin.my.domain/rpc'
ACCOUNT_NAME = 'zskr'
ACCOUNT_PW = 'secret'
CA_FILE = '/usr/local/etc/ZSKR/ca.pem'
RPC_TIMEOUT = 30                # seconds

#--------------------------
# Email addresses for mailing error messages
#--------------------------

sender = 'hostmaster@my.domain'
recipients = ('me@my.domain', )
mailRelay = 'localhost'

#--------------------------
#   policy constants
#--------------------------

SAFETY_FACTOR = 10              # safety window is SAFETY_FACTOR * max TTL

KEY_ALGO_ZSK = 'RSASHA256'
KEY_SIZE_ZSK = 1024
