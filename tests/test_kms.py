import base64
import json

import pytest

import ZSKR.misc as misc
from ZSKR.config import Config
from ZSKR.key import KeyRole
from ZSKR.kms import KeyManagementService, parseKeyRecord


class FakeResponse(object):

    def __init__(self, status, body, reason='OK'):
        self.status = status
        self.reason = reason
        self.body = body

    def read(self):
        return self.body


class FakeConnection(object):

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests = []
        self.closed = False

    def request(self, method, path, body, headers):
        self.requests.append((method, path, json.loads(body), headers))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        self.reply = reply

    def getresponse(self):
        return self.reply

    def close(self):
        self.closed = True


def ok(result):
    return FakeResponse(200, json.dumps({'result': result, 'error': None, 'id': 1}).encode())

def failed(message):
    return FakeResponse(200, json.dumps({'result': None, 'error': {'code': 3, 'message': message},
                                         'id': 1}).encode())

def service(*replies, **kwargs):
    cfg = Config('https://dns-admin.example.net/rpc', **kwargs)
    c = FakeConnection(*replies)
    return KeyManagementService(cfg, connection=c), c


INVENTORY = [
    {'id': 11, 'activated': True, 'deactivated_at': None,
     'created_ago_seconds': 90000, 'deactivated_ago_seconds': 0, 'max_ttl': 3600},
    {'id': 12, 'activated': False, 'deactivated_at': None,
     'created_ago_seconds': 400},
    {'id': 10, 'activated': False, 'deactivated_at': '2026-10-01T00:00:00Z',
     'created_ago_seconds': 200000, 'deactivated_ago_seconds': 50000},
]


def test_get_zsk_info():
    svc, c = service(ok(INVENTORY))
    keys = svc.GetZSKInfo()
    assert [k.id for k in keys] == [11, 12, 10]
    assert [k.role for k in keys] == [KeyRole.ACTIVE, KeyRole.PREPUBLISHED, KeyRole.DEACTIVATED]
    assert keys[0].max_ttl == 3600
    assert keys[2].deactivated_ago == 50000
    method, path, body, headers = c.requests[0]
    assert (method, path) == ('POST', '/rpc')
    assert body['method'] == 'GetZSKInfo'
    assert body['params'] == []
    assert 'Authorization' not in headers


def test_basic_auth():
    svc, c = service(ok(INVENTORY), account_name='zskr', account_pw='secret')
    svc.GetZSKInfo()
    auth = c.requests[0][3]['Authorization']
    assert auth == 'Basic ' + base64.b64encode(b'zskr:secret').decode()


def test_create_key_returns_id():
    svc, c = service(ok(13))
    assert svc.CreateKey('RSASHA256', 1024, 'ZSK', False) == 13
    body = c.requests[0][2]
    assert body['method'] == 'CreateKey'
    assert body['params'] == ['RSASHA256', 1024, 'ZSK', False]


def test_request_ids_increase():
    svc, c = service(ok(True), ok(True))
    svc.ActivateKey(12)
    svc.DeactivateKey(11)
    assert [r[2]['id'] for r in c.requests] == [1, 2]


def test_http_error_on_inventory():
    svc, c = service(FakeResponse(500, b'', reason='Internal Server Error'))
    with pytest.raises(misc.TransportError) as e:
        svc.GetZSKInfo()
    assert '500' in str(e.value)


def test_garbage_inventory():
    svc, c = service(FakeResponse(200, b'<html>'))
    with pytest.raises(misc.TransportError):
        svc.GetZSKInfo()


@pytest.mark.parametrize('result', [None, {'keys': []}, 'none', [{'activated': True}]])
def test_malformed_inventory(result):
    svc, c = service(ok(result))
    with pytest.raises(misc.TransportError):
        svc.GetZSKInfo()


def test_connection_failure_closes_connection():
    svc, c = service(ConnectionRefusedError('refused'))
    with pytest.raises(misc.TransportError):
        svc.GetZSKInfo()
    assert c.closed
    assert svc.myConnection is None


def test_rpc_error_on_mutation():
    svc, c = service(failed('no such key'))
    with pytest.raises(misc.OperationError) as e:
        svc.DeleteKey(99)
    assert e.value.action == 'DeleteKey(99)'
    assert 'no such key' in e.value.cause


def test_false_result_on_mutation():
    svc, c = service(ok(False))
    with pytest.raises(misc.OperationError):
        svc.ActivateKey(12)


def test_parse_deactivated_needs_age():
    with pytest.raises(misc.TransportError):
        parseKeyRecord({'id': 1, 'activated': False, 'deactivated_at': 'yesterday',
                        'created_ago_seconds': 10})


@pytest.mark.parametrize('entry', [
    {'id': 1, 'activated': 'yes', 'created_ago_seconds': 10},
    {'id': 1, 'activated': False, 'created_ago_seconds': -5},
    {'id': 1, 'activated': False, 'created_ago_seconds': True},
    {'id': 1, 'activated': True, 'created_ago_seconds': 10, 'max_ttl': 'long'},
])
def test_parse_rejects_bad_fields(entry):
    with pytest.raises(misc.TransportError):
        parseKeyRecord(entry)


def test_fractional_age_is_kept():
    from ZSKR.key import KeyRecord, classify
    from ZSKR.rollover import RolloverPolicy, Activate, evaluate

    pre = parseKeyRecord({'id': 2, 'activated': False, 'created_ago_seconds': 36000.5})
    assert pre.created_ago == 36000.5
    zsk_set = classify([KeyRecord(1, True, None, 90000, 0, 3600), pre])
    actions = evaluate(zsk_set, RolloverPolicy(10))
    assert actions[0] == Activate(2)
    assert len(actions) == 3


def test_falsy_deactivation_time_still_deactivated():
    k = parseKeyRecord({'id': 3, 'activated': False, 'deactivated_at': 0,
                        'created_ago_seconds': 900, 'deactivated_ago_seconds': 800})
    assert k.role == KeyRole.DEACTIVATED
    assert k.deactivated_ago == 800
    k = parseKeyRecord({'id': 4, 'activated': False, 'deactivated_at': '',
                        'created_ago_seconds': 900})
    assert k.role == KeyRole.PREPUBLISHED
