from __future__ import annotations

from hangul_liaison.domain.jamo import Choseong as C
from hangul_liaison.domain.jamo import Jongseong as J
from hangul_liaison.domain.jamo import Jungseong as V
from hangul_liaison.domain.liaison_rules import (
    PULLUP_RULES,
    PUSHDOWN_RULES,
    find_pullup_rule,
    find_pushdown_rule,
    is_palatalization_pair,
)


def test_table_sizes() -> None:
    assert len(PULLUP_RULES) == 28
    assert len(PUSHDOWN_RULES) == 26


def test_pullup_triggers_are_unique() -> None:
    triggers = [(r.trigger_final, r.trigger_initial) for r in PULLUP_RULES]
    assert len(set(triggers)) == len(triggers)


def test_pushdown_triggers_are_unique() -> None:
    triggers = [r.trigger_final for r in PUSHDOWN_RULES]
    assert len(set(triggers)) == len(triggers)


def test_pullup_never_pulls_ieung() -> None:
    assert all(r.trigger_initial is not C.Ieung for r in PULLUP_RULES)
    assert find_pullup_rule(None, C.Ieung, extended=True) is None


def test_pushdown_only_fires_before_ieung() -> None:
    assert find_pushdown_rule(J.Kiyeok, C.Kiyeok, extended=True) is None
    rule = find_pushdown_rule(J.Kiyeok, C.Ieung)
    assert rule is not None
    assert rule.replacement_final is None
    assert rule.replacement_initial is C.Kiyeok


def test_pushdown_splits_clusters() -> None:
    rule = find_pushdown_rule(J.RieulKiyeok, C.Ieung)
    assert rule is not None
    assert (rule.replacement_final, rule.replacement_initial) == (J.Rieul, C.Kiyeok)


def test_no_final_never_pushes_down() -> None:
    assert find_pushdown_rule(None, C.Ieung, extended=True) is None


def test_extended_rules_need_opt_in() -> None:
    assert find_pullup_rule(None, C.Hieuh) is None
    assert find_pullup_rule(None, C.Hieuh, extended=True).replacement_final is J.Hieuh
    assert find_pullup_rule(J.Sios, C.Sios) is None
    assert find_pullup_rule(J.Sios, C.Sios, extended=True).replacement_final is J.SsangSios
    assert find_pushdown_rule(J.Hieuh, C.Ieung) is None
    assert find_pushdown_rule(J.Hieuh, C.Ieung, extended=True).replacement_initial is C.Hieuh


def test_ordinary_rules_stay_eligible_in_extended_mode() -> None:
    for rule in PULLUP_RULES:
        if not rule.extended:
            assert find_pullup_rule(rule.trigger_final, rule.trigger_initial) == rule
            assert find_pullup_rule(rule.trigger_final, rule.trigger_initial, extended=True) == rule
    for rule in PUSHDOWN_RULES:
        if not rule.extended:
            assert find_pushdown_rule(rule.trigger_final, C.Ieung, extended=True) == rule


def test_pushdown_undoes_every_ordinary_cluster_pullup() -> None:
    for rule in PULLUP_RULES:
        if rule.extended or rule.trigger_final is None:
            continue
        back = find_pushdown_rule(rule.replacement_final, C.Ieung)
        assert back is not None
        assert back.replacement_final is rule.trigger_final
        assert back.replacement_initial is rule.trigger_initial


def test_palatalization_pair() -> None:
    assert is_palatalization_pair(J.Tikeut, V.I)
    assert is_palatalization_pair(J.Thieuth, V.Yeo)
    assert not is_palatalization_pair(J.Tikeut, V.A)
    assert not is_palatalization_pair(J.Kiyeok, V.I)
    assert not is_palatalization_pair(None, V.I)
