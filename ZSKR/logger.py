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
logger.py - Logger class module - centraliced logging and alarming
"""

import smtplib
import sys
from email.mime.text import MIMEText

#--------------------------
#   classes
#--------------------------

class Logger():
    """Log"""
    
    _singleton = None
    debug = False
    verbose = False
    cron = False
    debugText = ''
    verboseText = ''
    lastError = ''
    lastWarning = ''
    
    def __new__(cls, *args, **kwargs):
        if not cls._singleton:
            cls._singleton = super(Logger, cls).__new__(cls)
        return cls._singleton
    
    def __init__(self, verbose=None, debug=None, cron=None):
        # modules grab the logger at import time with no arguments;
        # only the command line sets the switches
        if verbose is not None:
            Logger.verbose = verbose
        if debug is not None:
            Logger.debug = debug
            if debug:
                Logger.verbose = True
        if cron is not None:
            Logger.cron = cron
    
    def logError(self, text):           # Fatal error
        Logger.lastError = '?%s' % (text)
        print(Logger.lastError, file=sys.stderr)
        Logger.verboseText = Logger.verboseText + Logger.lastError + '\n'
        Logger.debugText = Logger.debugText + Logger.lastError + '\n'
    
    def logWarn(self, text):            # Warning
        Logger.lastWarning = '%%%s' % (text)
        print(Logger.lastWarning, file=sys.stderr)
        Logger.verboseText = Logger.verboseText + Logger.lastWarning + '\n'
        Logger.debugText = Logger.debugText + Logger.lastWarning + '\n'
    
    def logVerbose(self, text):
        im = '[%s]' % (text)            # informal message
        if Logger.verbose:
            print(im)
        Logger.verboseText = Logger.verboseText + im + '\n'
        Logger.debugText = Logger.debugText + im + '\n'
    
    def logDebug(self, text):
        dm = '[%s]' % (text)            # debug message
        if Logger.debug:
            print(dm)
        Logger.debugText = Logger.debugText + dm + '\n'
    
    def reset(self):                    # forget collected messages
        Logger.debugText = ''
        Logger.verboseText = ''
        Logger.lastError = ''
        Logger.lastWarning = ''
    
    def mailErrors(self, cfg):          # called by main on exit
        if len(Logger.lastError) > 0:
            self.sendMail(cfg, Logger.lastError, Logger.debugText, True)
        elif len(Logger.lastWarning) > 0:
            self.sendMail(cfg, Logger.lastWarning, Logger.verboseText, True)

    def sendMail(self, cfg, subject, body, onlyCron=False):
        if cfg is None or not cfg.mail_relay:   # done, if not configured
            return False
        if onlyCron and not Logger.cron: # mail only if cronjob, if so requested
            return False
        msg = MIMEText(body)
        msg['Subject'] = '[ZSKR] ' + subject
        msg['From'] = cfg.sender
        msg['To'] = ', '.join(cfg.recipients)
        try:
            s = smtplib.SMTP(cfg.mail_relay)
            s.send_message(msg)
            s.quit()
        except (OSError, smtplib.SMTPException) as e:
            print('%%Failed to mail errors via %s, because %s' % (cfg.mail_relay, e),
                  file=sys.stderr)
            return False
        return True
