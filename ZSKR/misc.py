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
misc.py - exception classes shared by all modules
"""

#--------------------------
#   classes
#--------------------------
# exceptions

class ZSKRError(Exception):
    """Base of all errors, which abort a rollover check"""
    def __init__(self, x):
        super().__init__(x)
        self.data = x

class ConfigError(ZSKRError):           # bad endpoint or credentials
    pass

class TransportError(ZSKRError):        # inventory could not be fetched
    pass

class ValidationError(ZSKRError):
    """Key inventory violates the one active / one pre-published rule.

    reason is one of 'multiple-active', 'multiple-prepublished',
    'missing-active-or-prepublished', 'active-and-deactivated' or
    'missing-max-ttl'.
    """
    def __init__(self, reason, detail=''):
        text = reason
        if detail:
            text = '%s (%s)' % (reason, detail)
        super().__init__(text)
        self.reason = reason

class OperationError(ZSKRError):
    """A mutating call of the key management service did not succeed"""
    def __init__(self, action, cause):
        super().__init__('%s failed: %s' % (action, cause))
        self.action = action
        self.cause = cause
