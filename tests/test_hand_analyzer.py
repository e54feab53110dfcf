from glovehand.detectors.glove.detector_state import HandState
from glovehand.detectors.glove.finger_naming import FingerName
from glovehand.detectors.glove.hand_analyzer import HandAnalyzer

from conftest import COG, FakeBackend, hand_defects, upright_moments

ALL_FINGERS = [FingerName.THUMB, FingerName.INDEX, FingerName.MIDDLE,
               FingerName.RING, FingerName.PINKY]


def test_starts_idle(fake_backend):
    analyzer = HandAnalyzer(backend=fake_backend)
    assert not analyzer.is_tracking
    assert analyzer.state == HandState()


def test_five_finger_hand(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)

    assert analyzer.update(contour, scale=1)

    state = analyzer.state
    assert analyzer.is_tracking
    assert state.cog == COG
    assert state.axis_angle == 90
    assert len(state.finger_tips) == 5
    assert state.named_fingers == ALL_FINGERS


def test_five_finger_hand_scaled(contour):
    backend = FakeBackend(moments=upright_moments(scale=2), defects=hand_defects(scale=2))
    analyzer = HandAnalyzer(backend=backend)

    analyzer.update(contour, scale=2)

    assert analyzer.state.cog == COG
    assert analyzer.state.named_fingers == ALL_FINGERS


def test_missing_contour_keeps_previous_state(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)
    analyzer.update(contour, scale=1)
    before = analyzer.snapshot()

    assert not analyzer.update(None, scale=1)

    assert analyzer.state == before
    assert analyzer.is_tracking


def test_missing_contour_while_idle(fake_backend):
    analyzer = HandAnalyzer(backend=fake_backend)
    assert not analyzer.update(None)
    assert not analyzer.is_tracking
    assert fake_backend.calls == []


def test_zero_area_keeps_previous_cog(contour):
    backend = FakeBackend()
    analyzer = HandAnalyzer(backend=backend)
    analyzer.update(contour, scale=1)

    backend.moments = dict(upright_moments(cog=(10, 10)), m00=0.0)
    analyzer.update(contour, scale=1)

    assert analyzer.state.cog == COG


def test_zero_area_first_frame_leaves_fingers_unnamed(contour):
    backend = FakeBackend(moments=dict(upright_moments(), m00=0.0))
    analyzer = HandAnalyzer(backend=backend)

    analyzer.update(contour, scale=1)

    assert analyzer.state.cog is None
    assert len(analyzer.state.finger_tips) == 5
    assert analyzer.state.named_fingers == [FingerName.UNKNOWN] * 5


def test_previous_tips_below_cog_flip_axis(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)
    analyzer.update(contour, scale=1)
    # the synthetic hand's tips average slightly below its COG
    avg_y = sum(y for _, y in analyzer.state.finger_tips) // 5
    assert avg_y > COG[1]

    analyzer.update(contour, scale=1)

    assert analyzer.state.axis_angle == 180 - (90 + 180)


def test_previous_tips_above_cog_keep_axis(contour):
    # only the three upper fingers, all above the COG
    backend = FakeBackend(defects=hand_defects(angles=[150, 75, 20]))
    analyzer = HandAnalyzer(backend=backend)
    analyzer.update(contour, scale=1)
    analyzer.update(contour, scale=1)
    assert analyzer.state.axis_angle == 90


def test_names_match_tips(contour):
    backend = FakeBackend(defects=hand_defects(angles=[150, 75, 20]))
    analyzer = HandAnalyzer(backend=backend)
    analyzer.update(contour, scale=1)

    state = analyzer.state
    assert len(state.named_fingers) == len(state.finger_tips)
    assert state.named_fingers == [FingerName.THUMB, FingerName.INDEX, FingerName.MIDDLE]


def test_no_defects_gives_no_fingers(contour):
    backend = FakeBackend(defects=[])
    analyzer = HandAnalyzer(backend=backend)
    analyzer.update(contour, scale=1)
    assert analyzer.state.finger_tips == []
    assert analyzer.state.named_fingers == []
    assert analyzer.state.cog == COG


def test_thresholds_are_configurable(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend, min_finger_depth=30)
    analyzer.update(contour, scale=1)
    assert analyzer.state.finger_tips == []


def test_defect_cap_is_configurable(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend, max_points=3)
    analyzer.update(contour, scale=1)
    # the first three defects all pass the filters as a circular list of three
    assert len(analyzer.state.finger_tips) == 3
    assert analyzer.state.named_fingers == ALL_FINGERS[:3]


def test_process_mask_uses_backend_contour(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)
    assert analyzer.process_mask(contour, scale=1)
    assert fake_backend.calls[0] == 'find_largest_contour'
    assert analyzer.state.named_fingers == ALL_FINGERS


def test_process_mask_without_contour(fake_backend):
    analyzer = HandAnalyzer(backend=fake_backend)
    assert not analyzer.process_mask(None)
    assert analyzer.state == HandState()


def test_snapshot_is_independent(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)
    analyzer.update(contour, scale=1)

    snap = analyzer.snapshot()
    snap.finger_tips.clear()

    assert len(analyzer.state.finger_tips) == 5


def test_reset_returns_to_idle(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)
    analyzer.update(contour, scale=1)
    analyzer.reset()
    assert not analyzer.is_tracking
    assert analyzer.state == HandState()


def test_state_helpers(fake_backend, contour):
    analyzer = HandAnalyzer(backend=fake_backend)
    analyzer.update(contour, scale=1)
    state = analyzer.state
    assert state.finger_count == 5
    assert state.named_pairs()[0] == (FingerName.THUMB, state.finger_tips[0])
