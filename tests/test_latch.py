from gitness import GestureStateMachine, LatchPolicy, LatchState


def test_rising_edge_counts_once():
    sm = GestureStateMachine(time_tolerance=0.5)
    assert sm.update(True, 0.0)
    for i in range(1, 50):
        assert not sm.update(True, i / 60.0)
    assert sm.count == 1
    assert sm.state is LatchState.LATCHED


def test_idle_stays_idle_without_condition():
    sm = GestureStateMachine()
    for i in range(10):
        assert not sm.update(False, i / 60.0)
    assert sm.count == 0
    assert sm.state is LatchState.IDLE


def test_timeout_policy_holds_latch_until_tolerance_elapsed():
    sm = GestureStateMachine(time_tolerance=0.5, policy=LatchPolicy.TIMEOUT)
    sm.update(True, 0.0)
    sm.update(False, 0.3)
    assert sm.state is LatchState.LATCHED
    # condition returning inside the debounce window does not recount
    assert not sm.update(True, 0.4)
    sm.update(False, 0.6)
    assert sm.state is LatchState.IDLE
    assert sm.update(True, 0.7)
    assert sm.count == 2


def test_immediate_policy_releases_on_false():
    sm = GestureStateMachine(time_tolerance=0.5, policy=LatchPolicy.IMMEDIATE)
    sm.update(True, 0.0)
    sm.update(False, 0.01)
    assert sm.state is LatchState.IDLE
    assert sm.update(True, 0.02)
    assert sm.count == 2


def test_reset_clears_latch_and_count():
    sm = GestureStateMachine()
    sm.update(True, 1.0)
    sm.reset()
    assert sm.count == 0
    assert sm.state is LatchState.IDLE
    assert sm.last_trigger_time == 0.0
    # latch cleared, so a still-true condition counts again
    assert sm.update(True, 1.1)
    assert sm.count == 1
