from blocks_input import Cooldown, ShiftRepeat

SETTINGS = {"REPEAT_DELAY_MS": 100, "REPEAT_MS": 60, "ROTATE_COOLDOWN_MS": 150}


def test_shift_steps_once_then_repeats_after_delay():
    shift = ShiftRepeat(SETTINGS)
    steps = [shift.update(16, True, False) for _ in range(10)]
    assert steps == [-1, 0, 0, 0, 0, 0, 0, 0, 0, -1]


def test_shift_release_and_repress_is_immediate():
    shift = ShiftRepeat(SETTINGS)
    assert shift.update(16, False, True) == 1
    assert shift.update(16, False, True) == 0
    assert shift.update(16, False, False) == 0
    assert shift.update(16, False, True) == 1


def test_shift_both_keys_cancel():
    shift = ShiftRepeat(SETTINGS)
    assert shift.update(16, True, True) == 0


def test_cooldown():
    cd = Cooldown(settings=SETTINGS)
    assert cd.ready()
    assert not cd.ready()
    cd.update(100)
    assert not cd.ready()
    cd.update(60)
    assert cd.ready()
