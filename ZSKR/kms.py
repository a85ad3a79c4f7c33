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
kms.py - Interface module to the key management service of the DNS installation

JSON-RPC over HTTP(S): each request is a POST of
    {"method": <name>, "params": [...], "id": <n>}
answered by
    {"result": <value>, "error": null | {"code": <n>, "message": <text>}, "id": <n>}
"""

# -----------------------------------------
import base64
import http.client
import json
import ssl
import urllib.parse
# -----------------------------------------

import ZSKR.logger as logger
l = logger.Logger()
import ZSKR.misc as misc
from ZSKR.key import KeyRecord

#------------------------------------------------------------------------------

#--------------------------
#   classes
#--------------------------
class KeyManagementService(object):
    """Connection to the key management service of one installation"""
    
    def __init__(self, cfg, connection=None):
        self.cfg = cfg
        self.url = urllib.parse.urlsplit(cfg.server)
        self.path = self.url.path or '/'
        if self.url.query:
            self.path = self.path + '?' + self.url.query
        self.myConnection = connection      # created on first request
        self.requestID = 0
    
    def conn(self):
        if self.myConnection:
            return self.myConnection
        host = self.url.hostname
        port = self.url.port
        try:
            if self.url.scheme == 'https':
                sslContext = ssl.create_default_context(purpose=ssl.Purpose.SERVER_AUTH,
                                                        cafile=self.cfg.ca_file)
                self.myConnection = http.client.HTTPSConnection(host, port,
                                        timeout=self.cfg.timeout, context=sslContext)
            else:
                self.myConnection = http.client.HTTPConnection(host, port,
                                        timeout=self.cfg.timeout)
        except (OSError, ssl.SSLError) as e:
            raise misc.TransportError("Can't set up connection to %s, because %s" %
                                      (self.cfg.server, e))
        l.logDebug('Connection to %s:%s set up.' % (host, port))
        return self.myConnection
    
    def close(self):
        if self.myConnection:
            self.myConnection.close()
        self.myConnection = None
    
    def headers(self):
        h = {'Content-Type': 'application/json',
             'Accept': 'application/json'}
        if self.cfg.account_name:
            credentials = '%s:%s' % (self.cfg.account_name, self.cfg.account_pw)
            h['Authorization'] = 'Basic ' + base64.b64encode(
                                    credentials.encode('utf-8')).decode('ascii')
        return h
    
    def call(self, method, *params):
        """Do one request and return its result, raise misc.TransportError otherwise"""
        self.requestID += 1
        body = json.dumps({'method': method, 'params': list(params), 'id': self.requestID})
        l.logDebug('Request: %s' % body)
        c = self.conn()
        try:
            c.request('POST', self.path, body, self.headers())
            r1 = c.getresponse()
            data = r1.read()
        except (OSError, http.client.HTTPException) as e:
            self.close()
            raise misc.TransportError('Request %s to %s failed, because %s' %
                                      (method, self.cfg.server, e))
        if r1.status != 200:
            raise misc.TransportError('Request %s to %s failed, because: %s - HTTP - status %d' %
                                      (method, self.cfg.server, r1.reason, r1.status))
        try:
            reply = json.loads(data.decode('utf-8'))
        except ValueError:                  # includes UnicodeDecodeError
            raise misc.TransportError('Garbage in response to %s: %r' % (method, data[:80]))
        l.logDebug('Response: %s' % reply)
        if not isinstance(reply, dict) or ('result' not in reply and 'error' not in reply):
            raise misc.TransportError('Malformed response to %s: %r' % (method, reply))
        error = reply.get('error')
        if error:
            if isinstance(error, dict):
                error = '%s (code %s)' % (error.get('message'), error.get('code'))
            raise misc.TransportError('%s returned error %s' % (method, error))
        return reply.get('result')
    
    def mutate(self, what, method, *params):
        try:
            res = self.call(method, *params)
        except misc.TransportError as e:
            raise misc.OperationError(what, e.data)
        if res is None or res is False:
            raise misc.OperationError(what, '%s returned %r' % (method, res))
        return res
    
    # -----------------------------
    # Calls of the service
    # -----------------------------
    def GetZSKInfo(self):
        """Return list of KeyRecord of all ZSKs of the installation"""
        res = self.call('GetZSKInfo')
        if not isinstance(res, list):
            raise misc.TransportError('GetZSKInfo returned no list of keys: %r' % (res,))
        return [parseKeyRecord(entry) for entry in res]
    
    def ActivateKey(self, id):
        return self.mutate('ActivateKey(%r)' % (id,), 'ActivateKey', id)
    
    def CreateKey(self, algorithm, bits, role, activate):
        """Return id of the new key"""
        return self.mutate('CreateKey(%r, %r, %r, %r)' % (algorithm, bits, role, activate),
                           'CreateKey', algorithm, bits, role, activate)
    
    def DeactivateKey(self, id):
        return self.mutate('DeactivateKey(%r)' % (id,), 'DeactivateKey', id)
    
    def DeleteKey(self, id):
        return self.mutate('DeleteKey(%r)' % (id,), 'DeleteKey', id)


# -----------------------------------------
# Functions
# -----------------------------------------
def seconds(entry, name, default=None):
    v = entry.get(name, default)
    if isinstance(v, bool) or not isinstance(v, (int, float)) or v < 0:
        raise misc.TransportError('Key %s: bad %s %r' % (entry.get('id'), name, v))
    return v

def parseKeyRecord(entry):
    """Turn one GetZSKInfo entry into a KeyRecord"""
    if not isinstance(entry, dict) or entry.get('id') in (None, ''):
        raise misc.TransportError('Malformed key entry %r' % (entry,))
    activated = entry.get('activated')
    if activated not in (True, False, 0, 1):
        raise misc.TransportError('Key %s: bad activated %r' % (entry['id'], activated))
    deactivated_at = entry.get('deactivated_at')
    if deactivated_at == '':
        deactivated_at = None
    deactivated_ago = 0
    if deactivated_at is not None:
        deactivated_ago = seconds(entry, 'deactivated_ago_seconds')
    max_ttl = None
    if entry.get('max_ttl') is not None:
        max_ttl = seconds(entry, 'max_ttl')
    return KeyRecord(entry['id'], bool(activated), deactivated_at,
                     seconds(entry, 'created_ago_seconds'), deactivated_ago, max_ttl)
