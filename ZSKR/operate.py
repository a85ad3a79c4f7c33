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
# commandline interface module
# -----------------------------------------
"""

import sys

from ZSKR.utils import parse_args
import ZSKR.config as config

import ZSKR.installation as installation
import ZSKR.kms as kms
import ZSKR.logger as logger
import ZSKR.misc as misc
import ZSKR.rollover as rollover

def execute_from_command_line(argv=None):
    
    opts, args = parse_args(argv)
    l = logger.Logger(opts.verbose, opts.debug, opts.cron)
    l.logVerbose('operate_zskr started.')
    l.logDebug('Options are {}.'.format(opts))
    
    cfg = None
    rc = 0
    try:
        cfg = config.load_config(opts.config, args[0] if args else None)
        policy = rollover.RolloverPolicy(cfg.safety_factor, cfg.key_algorithm, cfg.key_size)
        svc = kms.KeyManagementService(cfg)
        try:
            inst = installation.managedInstallation(svc, policy)
            if opts.list:
                zsk_set = inst.readKeys()
                print(zsk_set.describe())
                print('safety window: %ds' % policy.window(zsk_set.max_ttl))
                for a in inst.planTransition():
                    print('due: %s' % (a,))
            else:
                inst.performStateTransition(opts.dry_run)
        finally:
            svc.close()
    except misc.ValidationError as e:
        l.logError('Inconsistent ZSK set at %s: %s' % (cfg.server, e.data))
        l.logError('Operator intervention required, no changes made')
        rc = 1
    except misc.OperationError as e:
        l.logError(e.data)
        l.logError('Rollover aborted, remaining actions not performed')
        rc = 1
    except misc.ZSKRError as e:
        l.logError(e.data)
        rc = 1
    l.mailErrors(cfg)
    return rc

def main():
    sys.exit(execute_from_command_line())
