# tests/test_kneading.py
# Purpose:
# Kneading minutes, machine conversions and the wet-dough fold branch.
import pytest

from pietro_backend.app.dough.engine.kneading import plan_kneading, WET_ADVICE, STANDARD_ADVICE

def test_baseline_plan_hits_floors():
    p = plan_kneading(60, 11)
    assert p.knead_minutes == 6
    assert p.planetary_minutes == 4      # 3.3 → floor 4
    assert p.hand_mixer_minutes == 5     # 4.5 → floor 5
    assert not p.is_wet_dough
    assert (p.fold_count, p.fold_interval_minutes, p.total_fold_minutes) == (2, 15, 15)
    assert p.advice == STANDARD_ADVICE

def test_wet_dough_boundary():
    wet = plan_kneading(67, 12)
    assert wet.is_wet_dough
    assert (wet.fold_count, wet.fold_interval_minutes, wet.total_fold_minutes) == (3, 12, 24)
    assert wet.advice == WET_ADVICE
    assert not plan_kneading(66.999, 12).is_wet_dough

def test_caputo_pizzeria_defaults():
    # 62 % hydration, 12.5 % protein → 6 + 0.7 + 1.2 = 7.9
    p = plan_kneading(62, 12.5)
    assert p.knead_minutes == 8
    assert p.planetary_minutes == 4      # 4.345
    assert p.hand_mixer_minutes == 6     # 5.925

def test_half_minutes_round_up():
    # 6 + (21-11)*0.8 = 14; hand mixer 14 * 0.75 = 10.5 → 11
    p = plan_kneading(60, 21)
    assert p.knead_minutes == 14
    assert p.hand_mixer_minutes == 11
    assert p.planetary_minutes == 8      # 7.7

def test_ceilings():
    p = plan_kneading(120, 20)
    assert p.knead_minutes == 22
    assert p.planetary_minutes == 12     # 22 * 0.55 = 12.1
    assert p.hand_mixer_minutes == 17    # 22 * 0.75 = 16.5 → 17

def test_hydration_monotonic_until_ceiling():
    prev = None
    for h in range(60, 140, 3):
        raw = 6 + (h - 60) * 0.35
        p = plan_kneading(h, 11)
        if prev is not None and raw <= 22:
            assert p.knead_minutes >= prev
        prev = p.knead_minutes
    assert prev == 22

def test_low_protein_does_not_reduce_time():
    assert plan_kneading(58, 9).knead_minutes == 6
