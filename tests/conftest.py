import pytest

import ZSKR.logger as logger
import ZSKR.misc as misc
from ZSKR.key import KeyRecord


class FakeService(object):
    """In-memory key management service, records every call"""

    def __init__(self, records=(), fail_on=()):
        self.records = list(records)
        self.fail_on = set(fail_on)
        self.calls = []
        self.next_id = 100
        self.closed = False

    def _do(self, method, *args):
        self.calls.append((method,) + args)
        if method in self.fail_on:
            raise misc.OperationError('%s%r' % (method, args), 'refused by fake')

    def GetZSKInfo(self):
        self.calls.append(('GetZSKInfo',))
        return list(self.records)

    def ActivateKey(self, id):
        self._do('ActivateKey', id)
        return True

    def CreateKey(self, algorithm, bits, role, activate):
        self._do('CreateKey', algorithm, bits, role, activate)
        self.next_id += 1
        return self.next_id

    def DeactivateKey(self, id):
        self._do('DeactivateKey', id)
        return True

    def DeleteKey(self, id):
        self._do('DeleteKey', id)
        return True

    def close(self):
        self.closed = True

    def mutations(self):
        return [c for c in self.calls if c[0] != 'GetZSKInfo']


@pytest.fixture(autouse=True)
def quiet_logger():
    l = logger.Logger(verbose=False, debug=False, cron=False)
    l.reset()
    yield l
    l.reset()


@pytest.fixture
def example_records():
    # safety window 10 * 3600 = 36000s
    return [
        KeyRecord(1, True, None, 90000, 0, 3600),
        KeyRecord(2, False, None, 40000),
        KeyRecord(3, False, '2026-10-01T00:00:00Z', 120000, 50000),
        KeyRecord(4, False, '2026-10-15T23:00:00Z', 80000, 1000),
    ]


@pytest.fixture
def fake_service():
    return FakeService
