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
config.py - load site configuration into a Config instance
"""

import importlib.machinery
import importlib.util
import os
import sys
import urllib.parse

import dns.dnssec
import dns.exception

import ZSKR.conf as conf
import ZSKR.logger as logger
l = logger.Logger()
import ZSKR.misc as misc

# name of site config module
CONFIG_MODULE = 'zskr_conf'

# place where to find it (sys.prefix point at venve if we are in a venv)
CONFIG_MODULE_DIRS =(   sys.prefix + '/etc',
                        '/usr/local/etc/ZSKR')

#--------------------------
#   classes
#--------------------------

class Config(object):
    """Settings of one run, handed to the service client and logger"""
    
    def __init__(self, server, account_name=None, account_pw=None, ca_file=None,
                 timeout=conf.RPC_TIMEOUT, safety_factor=conf.SAFETY_FACTOR,
                 key_algorithm=conf.KEY_ALGO_ZSK, key_size=conf.KEY_SIZE_ZSK,
                 sender=conf.sender, recipients=conf.recipients,
                 mail_relay=conf.mailRelay):
        self.server = server
        self.account_name = account_name
        self.account_pw = account_pw
        self.ca_file = ca_file
        self.timeout = timeout
        self.safety_factor = safety_factor
        self.key_algorithm = key_algorithm
        self.key_size = key_size
        self.sender = sender
        self.recipients = recipients
        self.mail_relay = mail_relay
    
    def __repr__(self):                 # never show the password
        return 'Config(server=%r, account_name=%r, ca_file=%r, safety_factor=%r)' % (
                self.server, self.account_name, self.ca_file, self.safety_factor)


#--------------------------
#   functions
#--------------------------

def find_config():
    for d in CONFIG_MODULE_DIRS:
        p = os.path.join(d, CONFIG_MODULE + '.py')
        if os.path.exists(p):
            return p
    return None

def read_module(file_name):
    """Execute the config module at file_name and return it"""
    l.logDebug('Reading configuration from %s' % file_name)
    loader = importlib.machinery.SourceFileLoader(CONFIG_MODULE, file_name)
    spec = importlib.util.spec_from_file_location(CONFIG_MODULE, file_name, loader=loader)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:              # any error of the site module
        raise misc.ConfigError("Can't read configuration %s, because %s" % (file_name, e))
    return module

def normalize_server(server):
    """Turn 'host' into 'https://host/', reject anything but http(s) URLs"""
    if not server or not str(server).strip():
        raise misc.ConfigError('No server endpoint configured or given')
    server = str(server).strip()
    if '://' not in server:
        server = 'https://' + server + '/'
    u = urllib.parse.urlsplit(server)
    if u.scheme not in ('http', 'https') or not u.hostname:
        raise misc.ConfigError('Malformed server endpoint "%s"' % server)
    try:
        u.port                          # raises on garbage port
    except ValueError:
        raise misc.ConfigError('Malformed port in server endpoint "%s"' % server)
    return server

def safety_factor_from(value):
    if value is None:
        return conf.SAFETY_FACTOR
    try:
        sf = int(value)
    except (TypeError, ValueError):
        l.logWarn('SAFETY_FACTOR "%s" not numeric, using %d' % (value, conf.SAFETY_FACTOR))
        return conf.SAFETY_FACTOR
    if sf < 0:
        l.logWarn('SAFETY_FACTOR %d negative, using %d' % (sf, conf.SAFETY_FACTOR))
        return conf.SAFETY_FACTOR
    return sf

def check_algorithm(name):
    if not isinstance(name, str):
        raise misc.ConfigError('Unknown key algorithm "%s"' % (name,))
    try:
        algorithm = dns.dnssec.algorithm_from_text(name)
    except (ValueError, dns.exception.DNSException):
        raise misc.ConfigError('Unknown key algorithm "%s"' % name)
    return dns.dnssec.algorithm_to_text(algorithm)

def load_config(file_name=None, server=None):
    """Build the Config of this run.
    
    file_name names a config module; without it, the default locations
    are searched and shipped defaults are used if none exists.
    server (from the command line) takes precedence over SERVER.
    """
    if file_name is None:
        file_name = find_config()
    elif not os.path.exists(file_name):
        raise misc.ConfigError('Configuration file %s not found' % file_name)
    
    module = None
    if file_name:
        module = read_module(file_name)
    
    def get(name):
        if module is not None and hasattr(module, name):
            return getattr(module, name)
        return getattr(conf, name)
    
    if not server:
        server = get('SERVER')
    server = normalize_server(server)
    
    name = get('ACCOUNT_NAME')
    pw = get('ACCOUNT_PW')
    if bool(name) != bool(pw):
        raise misc.ConfigError('ACCOUNT_NAME and ACCOUNT_PW must be configured together')
    
    ca_file = get('CA_FILE')
    if ca_file and not os.path.exists(ca_file):
        raise misc.ConfigError('CA file %s not found' % ca_file)
    
    key_size = get('KEY_SIZE_ZSK')
    if not isinstance(key_size, int) or isinstance(key_size, bool) or key_size <= 0:
        raise misc.ConfigError('KEY_SIZE_ZSK must be a positive number, not "%s"' % (key_size,))
    
    timeout = get('RPC_TIMEOUT')
    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
        raise misc.ConfigError('RPC_TIMEOUT must be a positive number of seconds, not "%s"' % (timeout,))
    
    recipients = get('recipients')
    if isinstance(recipients, str):
        recipients = (recipients,)
    if not isinstance(recipients, (list, tuple)) or \
            not all(isinstance(r, str) for r in recipients):
        raise misc.ConfigError('recipients must be a mail address or a list of them, not "%s"' % (recipients,))
    
    cfg = Config(server, account_name=name, account_pw=pw, ca_file=ca_file,
                 timeout=timeout,
                 safety_factor=safety_factor_from(get('SAFETY_FACTOR')),
                 key_algorithm=check_algorithm(get('KEY_ALGO_ZSK')),
                 key_size=key_size,
                 sender=get('sender'), recipients=tuple(recipients),
                 mail_relay=get('mailRelay'))
    l.logDebug('Configuration is %r' % cfg)
    return cfg
