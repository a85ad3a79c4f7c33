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
executor.py - apply a list of actions to the key management service
"""

# -----------------------------------------

import ZSKR.logger as logger
l = logger.Logger()
import ZSKR.misc as misc

#--------------------------
#   functions
#--------------------------

def apply(actions, svc):
    """Perform actions in order, stopping at the first failure.
    
    Nothing already applied is rolled back; a half done rollover shows up
    as 'multiple-active' at the next run and needs an operator.
    Returns the list of results, one per action.
    """
    results = []
    for n, action in enumerate(actions, 1):
        l.logVerbose('Performing %d/%d: %s' % (n, len(actions), action))
        try:
            res = action.perform(svc)
        except misc.OperationError as e:
            raise misc.OperationError(action, e.cause)
        except misc.TransportError as e:
            raise misc.OperationError(action, e.data)
        l.logDebug('%s returned %r' % (action, res))
        results.append(res)
    return results
