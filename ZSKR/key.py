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
key.py - zone signing key records and the classification of a key set

Pre-Publication Method with ZSK (RFC 6781, 4.1.1.1):
a new ZSK is published inactive ahead of time, so its DNSKEY propagates
through caches before it signs anything, and the old ZSK is kept for a
while after deactivation, so resolvers holding cached signatures can
still validate them.
Both periods are the safety window: safety factor * max TTL of the
installation.
"""

import enum

# -----------------------------------------

import ZSKR.logger as logger
l = logger.Logger()
import ZSKR.misc as misc

#--------------------------
#   classes
#--------------------------

class KeyRole(enum.Enum):
    ACTIVE = 'active'                   # the one key signing the zones
    PREPUBLISHED = 'pre-published'      # published, waiting to be activated
    DEACTIVATED = 'deactivated'         # retired, waiting to be deleted


class KeyRecord(object):
    """One ZSK as reported by the key management service"""
    
    def __init__(self, id, activated, deactivated_at=None, created_ago=0,
                 deactivated_ago=0, max_ttl=None):
        self.id = id
        self.activated = activated
        self.deactivated_at = deactivated_at
        self.created_ago = created_ago          # seconds since creation
        self.deactivated_ago = deactivated_ago  # seconds since deactivation
        self.max_ttl = max_ttl                  # reported with the active key only
    
    @property
    def role(self):                     # None for an impossible combination
        if self.activated:
            if self.deactivated_at is not None:
                return None
            return KeyRole.ACTIVE
        if self.deactivated_at is None:
            return KeyRole.PREPUBLISHED
        return KeyRole.DEACTIVATED
    
    def __str__(self):
        role = self.role
        if role is None:
            return '%s/INVALID(activated and deactivated at %s)' % (self.id, self.deactivated_at)
        if role == KeyRole.DEACTIVATED:
            return '%s/%s(deactivated at %s, %ds ago)' % (self.id, role.value,
                self.deactivated_at, self.deactivated_ago)
        return '%s/%s(created %ds ago)' % (self.id, role.value, self.created_ago)
    
    def __repr__(self):
        return 'KeyRecord(%r, %r, %r, %r, %r, %r)' % (self.id, self.activated,
            self.deactivated_at, self.created_ago, self.deactivated_ago, self.max_ttl)


class ZSKSet(object):
    """Classified ZSK inventory of one installation at one point in time"""
    
    def __init__(self, active, prepublished, deactivated, max_ttl):
        self.active = active
        self.prepublished = prepublished
        self.deactivated = tuple(deactivated)
        self.max_ttl = max_ttl
    
    def keys(self):
        yield self.active
        yield self.prepublished
        for k in self.deactivated:
            yield k
    
    def describe(self):
        lines = ['max TTL: %ds' % self.max_ttl]
        for k in self.keys():
            lines.append('  ' + str(k))
        return '\n'.join(lines)


#--------------------------
#   functions
#--------------------------

def classify(records):
    """Partition records into active, pre-published and deactivated keys.
    
    Raises misc.ValidationError if the inventory does not hold exactly
    one active and exactly one pre-published key.
    """
    records = list(records)
    active = []
    prepublished = []
    deactivated = []
    
    for k in records:
        role = k.role
        if role is None:
            raise misc.ValidationError('active-and-deactivated', 'key %s' % k.id)
        elif role == KeyRole.ACTIVE:
            active.append(k)
        elif role == KeyRole.PREPUBLISHED:
            prepublished.append(k)
        else:
            deactivated.append(k)
    
    l.logDebug('classify(): %d active, %d pre-published, %d deactivated' %
            (len(active), len(prepublished), len(deactivated)))
    
    if len(active) > 1:
        raise misc.ValidationError('multiple-active',
                'keys %s' % ', '.join(str(k.id) for k in active))
    if len(prepublished) > 1:
        raise misc.ValidationError('multiple-prepublished',
                'keys %s' % ', '.join(str(k.id) for k in prepublished))
    if len(records) < 2 or not active or not prepublished:
        raise misc.ValidationError('missing-active-or-prepublished',
                '%d keys reported' % len(records))
    if active[0].max_ttl is None:
        raise misc.ValidationError('missing-max-ttl', 'key %s' % active[0].id)
    
    return ZSKSet(active[0], prepublished[0], deactivated, active[0].max_ttl)
