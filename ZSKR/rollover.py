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
rollover.py - rollover policy, actions and the decision which of them are due
"""

# -----------------------------------------

import ZSKR.logger as logger
l = logger.Logger()

# -----------------------------------------
# Configurables
# -----------------------------------------
import ZSKR.conf as conf

#--------------------------
#   classes
#--------------------------

class RolloverPolicy(object):
    """RolloverPolicy"""
    
    def __init__(self, safety_factor=conf.SAFETY_FACTOR,
                 algorithm=conf.KEY_ALGO_ZSK, bits=conf.KEY_SIZE_ZSK):
        if safety_factor < 0:
            raise ValueError('safety factor must not be negative: %d' % safety_factor)
        self.safety_factor = safety_factor
        self.algorithm = algorithm      # of follow-up keys
        self.bits = bits
    
    def window(self, max_ttl):          # safety window in seconds
        return self.safety_factor * max_ttl


# -----------------------------
# Actions, produced by evaluate() and performed by executor.apply()
# -----------------------------
class Action(object):
    
    def _args(self):
        return ()
    
    def perform(self, svc):
        raise NotImplementedError
    
    def __eq__(self, other):
        return type(self) is type(other) and self._args() == other._args()
    
    def __hash__(self):
        return hash((type(self).__name__,) + self._args())
    
    def __str__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(repr(a) for a in self._args()))
    
    __repr__ = __str__


class Activate(Action):
    
    def __init__(self, id):
        self.id = id
    
    def _args(self):
        return (self.id,)
    
    def perform(self, svc):
        return svc.ActivateKey(self.id)


class CreateKey(Action):
    
    def __init__(self, algorithm, bits, role='ZSK', activate=False):
        self.algorithm = algorithm
        self.bits = bits
        self.role = role
        self.activate = activate
    
    def _args(self):
        return (self.algorithm, self.bits, self.role, self.activate)
    
    def perform(self, svc):
        return svc.CreateKey(self.algorithm, self.bits, self.role, self.activate)


class Deactivate(Action):
    
    def __init__(self, id):
        self.id = id
    
    def _args(self):
        return (self.id,)
    
    def perform(self, svc):
        return svc.DeactivateKey(self.id)


class Delete(Action):
    
    def __init__(self, id):
        self.id = id
    
    def _args(self):
        return (self.id,)
    
    def perform(self, svc):
        return svc.DeleteKey(self.id)


#--------------------------
#   functions
#--------------------------

def evaluate(zsk_set, policy):
    """Return the ordered list of actions due for zsk_set.
    
    The pre-published key is activated once it is older than the safety
    window, followed by creation of its successor and deactivation of the
    old active key. Deactivated keys are deleted once they were retired
    longer than the safety window. An empty list means nothing to do.
    """
    window = policy.window(zsk_set.max_ttl)
    actions = []
    
    l.logDebug('evaluate(): safety window is %d * %d = %ds' %
            (policy.safety_factor, zsk_set.max_ttl, window))
    
    pre = zsk_set.prepublished
    if pre.created_ago > window:
        l.logVerbose('Pre-published key %s created %ds ago, rolling over' % (pre.id, pre.created_ago))
        actions.append(Activate(pre.id))
        # successor must exist before the old active key is retired
        actions.append(CreateKey(policy.algorithm, policy.bits, 'ZSK', False))
        actions.append(Deactivate(zsk_set.active.id))
    else:
        l.logDebug('Pre-published key %s created %ds ago, not yet due' % (pre.id, pre.created_ago))
    
    for k in zsk_set.deactivated:
        if k.deactivated_ago > window:
            l.logVerbose('Key %s deactivated %ds ago, deleting' % (k.id, k.deactivated_ago))
            actions.append(Delete(k.id))
    
    return actions
