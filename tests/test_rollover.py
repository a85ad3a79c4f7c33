import pytest

from ZSKR.key import KeyRecord, classify
from ZSKR.rollover import (RolloverPolicy, Activate, CreateKey, Deactivate,
                           Delete, evaluate)


def make_set(pre_age, deactivated_ages=(), max_ttl=3600):
    records = [KeyRecord('A', True, None, 99999, 0, max_ttl),
               KeyRecord('B', False, None, pre_age)]
    for n, ago in enumerate(deactivated_ages):
        records.append(KeyRecord('D%d' % n, False, '2026-10-01T00:00:00Z', 99999, ago))
    return classify(records)


def test_example_plan(example_records):
    actions = evaluate(classify(example_records), RolloverPolicy(10))
    assert actions == [
        Activate(2),
        CreateKey('RSASHA256', 1024, 'ZSK', False),
        Deactivate(1),
        Delete(3),
    ]


def test_default_policy():
    p = RolloverPolicy()
    assert p.safety_factor == 10
    assert p.algorithm == 'RSASHA256'
    assert p.bits == 1024
    assert p.window(3600) == 36000


def test_negative_safety_factor():
    with pytest.raises(ValueError):
        RolloverPolicy(-1)


def test_nothing_due():
    assert evaluate(make_set(36000, [36000, 5]), RolloverPolicy(10)) == []


def test_threshold_is_strict():
    assert evaluate(make_set(36000), RolloverPolicy(10)) == []
    assert evaluate(make_set(36001), RolloverPolicy(10)) == [
        Activate('B'), CreateKey('RSASHA256', 1024, 'ZSK', False), Deactivate('A')]


def test_rollover_order_is_fixed():
    actions = evaluate(make_set(50000, [10]), RolloverPolicy(10))
    assert [type(a) for a in actions] == [Activate, CreateKey, Deactivate]


def test_expiry_is_per_key():
    actions = evaluate(make_set(0, [36001, 36000, 100000, 1]), RolloverPolicy(10))
    assert actions == [Delete('D0'), Delete('D2')]


def test_deletes_follow_rollover():
    actions = evaluate(make_set(40000, [40000]), RolloverPolicy(10))
    assert actions[-1] == Delete('D0')
    assert actions[:3] == [Activate('B'), CreateKey('RSASHA256', 1024, 'ZSK', False),
                           Deactivate('A')]


def test_zero_window():
    actions = evaluate(make_set(1, [1], max_ttl=0), RolloverPolicy(0))
    assert len(actions) == 4
    assert evaluate(make_set(0, [0], max_ttl=0), RolloverPolicy(0)) == []


def test_configured_successor():
    actions = evaluate(make_set(40000), RolloverPolicy(10, 'ECDSAP256SHA256', 256))
    assert actions[1] == CreateKey('ECDSAP256SHA256', 256, 'ZSK', False)


def test_action_equality_and_text():
    assert Delete(3) == Delete(3)
    assert Delete(3) != Deactivate(3)
    assert str(Activate(2)) == 'Activate(2)'
    assert str(CreateKey('RSASHA256', 1024)) == "CreateKey('RSASHA256', 1024, 'ZSK', False)"
