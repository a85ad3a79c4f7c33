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
installation.py - the managedInstallation class module, one rollover check
"""

from datetime import datetime

# -----------------------------------------

import ZSKR.executor as executor
import ZSKR.key as key
import ZSKR.rollover as rollover

import ZSKR.logger as logger
l = logger.Logger()

#------------------------------------------------------------------------------
# class managedInstallation
#------------------------------------------------------------------------------
class managedInstallation(object):
    """managedInstallation"""

    def __init__(self, svc, policy):
        self.svc = svc
        self.policy = policy
        self.zsk_set = None
        self.actions = []
    
    def readKeys(self):
        """Fetch and classify the current ZSK inventory"""
        l.logVerbose('Reading ZSKs at %s' % (datetime.now().isoformat(),))
        records = self.svc.GetZSKInfo()
        for r in records:
            l.logDebug(r.__str__())
        self.zsk_set = key.classify(records)
        return self.zsk_set
    
    def planTransition(self):
        if self.zsk_set is None:
            self.readKeys()
        self.actions = rollover.evaluate(self.zsk_set, self.policy)
        return self.actions
    
    def performStateTransition(self, dry_run=False):
        """Do one rollover check; return the actions due (and applied unless dry_run)"""
        self.zsk_set = None
        actions = self.planTransition()
        if not actions:
            l.logVerbose('No state transition due')
            return actions
        if dry_run:
            for a in actions:
                print('[Would perform %s]' % (a,))
            return actions
        results = executor.apply(actions, self.svc)
        for a, res in zip(actions, results):
            if isinstance(a, rollover.CreateKey):
                l.logVerbose('Key %s created' % (res,))
        return actions
